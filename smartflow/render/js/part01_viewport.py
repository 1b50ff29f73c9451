# smartflow/render/js/part01_viewport.py
from __future__ import annotations

# Browser twin of smartflow.viewport.ViewportController; limits come from DATA.cfg.
JS_PART = r'''
(() => {
  "use strict";

  function showFatal(msg, err) {
    try {
      const s = document.getElementById("sfStatus");
      if (s) s.textContent = msg + (err ? " " + String(err) : "");
      console.error(msg, err);
    } catch (_) {}
  }

  let DATA;
  try {
    DATA = JSON.parse(document.getElementById("sf-data").textContent);
  } catch (e) {
    showFatal("Failed to parse embedded data. Your HTML may be truncated or invalid.", e);
    return;
  }

  const CFG = DATA.cfg || {};
  // Configured bounds may only narrow [0.2, 3.0].
  const MIN_SCALE = Math.max(0.2, Number(CFG.min_scale) || 0.2);
  const MAX_SCALE = Math.min(3.0, Number(CFG.max_scale) || 3.0);
  const zin = Number(CFG.zoom_in_factor), zout = Number(CFG.zoom_out_factor);
  const ZOOM_IN = zin > 1 ? zin : 1.1;
  const ZOOM_OUT = (zout > 0 && zout < 1) ? zout : (1 / 1.1);
  const clamp = (n, lo, hi) => (n < lo ? lo : (n > hi ? hi : n));

  const view = { panX: 0, panY: 0, scale: 1, dragOrigin: null };

  function isInteractive(el) {
    return !!(el && el.closest && el.closest("button, input, .node-card, .sf-detail"));
  }

  function beginDrag(x, y, target) {
    if (isInteractive(target) || view.dragOrigin) return false;
    view.dragOrigin = { x: x - view.panX, y: y - view.panY };
    return true;
  }

  function continueDrag(x, y) {
    if (!view.dragOrigin) return;
    view.panX = x - view.dragOrigin.x;
    view.panY = y - view.dragOrigin.y;
  }

  function endDrag() { view.dragOrigin = null; }

  function zoom(deltaY) {
    const f = deltaY > 0 ? ZOOM_OUT : ZOOM_IN;
    view.scale = clamp(view.scale * f, MIN_SCALE, MAX_SCALE);
  }

  function resetView() {
    view.panX = 0; view.panY = 0; view.scale = 1; view.dragOrigin = null;
  }

  globalThis.__sf = { DATA, view, beginDrag, continueDrag, endDrag, zoom, resetView, showFatal };
})();
'''
