# smartflow/render/inline_css.py
from __future__ import annotations

CSS_BLOCK = r"""
html, body { margin: 0; height: 100%; font-family: system-ui, sans-serif; background: #0f172a; color: #e2e8f0; }
body { display: flex; flex-direction: column; }
.sf-header { display: flex; gap: 12px; align-items: center; padding: 10px 16px; border-bottom: 1px solid #1e293b; }
.sf-title { font-weight: 700; font-size: 13px; text-transform: uppercase; }
.sf-search { position: relative; flex: 1; max-width: 520px; }
.sf-search input { width: 100%; box-sizing: border-box; padding: 8px 10px; background: #1e293b; color: inherit; border: 1px solid #334155; border-radius: 8px; }
.sf-results { position: absolute; left: 0; right: 0; top: 100%; background: #111827; border: 1px solid #334155; border-radius: 8px; max-height: 240px; overflow-y: auto; z-index: 10; }
.sf-results button { display: block; width: 100%; text-align: left; padding: 8px 10px; background: none; color: inherit; border: 0; cursor: pointer; }
.sf-results button:hover { background: #4338ca; }
.sf-canvas { flex: 1; position: relative; overflow: hidden; cursor: grab; touch-action: none; }
.sf-canvas.dragging { cursor: grabbing; }
.sf-edge { fill: none; stroke: rgba(99, 102, 241, 0.45); stroke-width: 1.5; }
.node-card rect { fill: #111827; stroke: #334155; rx: 14; }
.node-card.focus rect { fill: #312e81; stroke: #818cf8; }
.node-card { cursor: pointer; }
.node-card text { fill: #e2e8f0; font-size: 11px; }
.node-card .sf-date { fill: #818cf8; font-size: 9px; }
.node-card.done text.sf-label { text-decoration: line-through; opacity: .6; }
.sf-detail { position: absolute; right: 16px; top: 16px; width: 320px; background: #111827; border: 1px solid #334155; border-radius: 12px; padding: 12px; font-size: 12px; }
.sf-status { position: absolute; left: 16px; bottom: 12px; font-size: 10px; opacity: .5; }
.sf-card { display: block; width: 100%; margin-top: 10px; }
.sf-card[hidden] { display: none; }
.sf-card-edge { stroke: rgba(99, 102, 241, 0.5); stroke-width: 1.5; }
.sf-card-edge.parallel { stroke-dasharray: 4 3; }
.sf-card-node rect { fill: #1e293b; stroke: #334155; rx: 8; }
.sf-card-node.focus rect { fill: #312e81; stroke: #818cf8; }
.sf-card-node.parallel rect { stroke-dasharray: 4 3; }
.sf-card-node text { fill: #e2e8f0; font-size: 11px; text-anchor: middle; }
.sf-card-node:not(.focus) { cursor: pointer; }
"""
