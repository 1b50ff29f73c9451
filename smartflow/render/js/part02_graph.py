# smartflow/render/js/part02_graph.py
from __future__ import annotations

JS_PART = r'''
(() => {
  "use strict";
  const sf = globalThis.__sf;
  if (!sf) return;
  const { DATA, view } = sf;

  const SVG_NS = "http://www.w3.org/2000/svg";
  const canvas = document.getElementById("sfCanvas");
  const layer = document.getElementById("sfLayer");
  const detail = document.getElementById("sfDetail");
  const detailText = document.getElementById("sfDetailText");
  const card = document.getElementById("sfCard");
  const status = document.getElementById("sfStatus");
  const search = document.getElementById("sfSearch");
  const results = document.getElementById("sfSearchResults");

  const byId = new Map((DATA.schedules || []).map(s => [s.id, s]));
  const done = new Set((DATA.schedules || []).filter(s => s.completed).map(s => s.id));
  let focusId = DATA.focus || null;

  function el(tag, attrs, text) {
    const e = document.createElementNS(SVG_NS, tag);
    for (const k in (attrs || {})) e.setAttribute(k, attrs[k]);
    if (text != null) e.textContent = text;
    return e;
  }

  function applyTransform() {
    layer.setAttribute("transform", `translate(${view.panX}, ${view.panY}) scale(${view.scale})`);
  }

  function drawCard(rel) {
    card.innerHTML = "";
    const placed = rel.card || [];
    const center = placed.find(c => c.role === "focus");
    if (!center) { card.hidden = true; return; }
    for (const c of placed) {
      if (c.role === "focus") continue;
      card.appendChild(el("line", { class: `sf-card-edge ${c.role}`, x1: center.x, y1: center.y, x2: c.x, y2: c.y }));
    }
    for (const c of placed) {
      const s = byId.get(c.scheduleId) || {};
      const grp = el("g", { class: `sf-card-node ${c.role}`, transform: `translate(${c.x - 55}, ${c.y - 20})` });
      grp.appendChild(el("rect", { width: 110, height: 40 }));
      grp.appendChild(el("text", { x: 55, y: 24 }, String(s.title || c.scheduleId).slice(0, 16)));
      if (c.role !== "focus") {
        grp.addEventListener("click", ev => { ev.stopPropagation(); setFocus(c.scheduleId); });
      }
      card.appendChild(grp);
    }
    card.hidden = false;
  }

  function showDetail(id) {
    const s = byId.get(id);
    if (!s) { detail.hidden = true; return; }
    const rel = (DATA.relatives || {})[id] || { parents: [], children: [], parallels: [], card: [] };
    const names = ids => ids.map(i => (byId.get(i) || {}).title || "(deleted)").join(", ") || "-";
    detailText.innerHTML = "";
    const rows = [
      ["Title", s.title], ["Date", [s.date, s.time].filter(Boolean).join(" ")], ["Owner", s.owner || "-"],
      ["Before", names(rel.parents)], ["After", names(rel.children)], ["Parallel", names(rel.parallels)],
    ];
    for (const [k, v] of rows) {
      const p = document.createElement("div");
      const b = document.createElement("b");
      b.textContent = k + ": ";
      p.appendChild(b);
      p.appendChild(document.createTextNode(String(v || "")));
      detailText.appendChild(p);
    }
    drawCard(rel);
    detail.hidden = false;
  }

  function render() {
    const g = (DATA.graphs || {})[focusId] || { nodes: [], edges: [] };
    layer.innerHTML = "";
    const pos = new Map(g.nodes.map(n => [n.scheduleId, n]));
    for (const e of g.edges) {
      const s = pos.get(e.sourceId), t = pos.get(e.targetId);
      if (!s || !t) continue;
      layer.appendChild(el("path", {
        class: "sf-edge",
        d: `M ${s.x} ${s.y} C ${s.x + 100} ${s.y}, ${t.x - 100} ${t.y}, ${t.x} ${t.y}`,
      }));
    }
    for (const n of g.nodes) {
      const s = byId.get(n.scheduleId) || {};
      const cls = ["node-card"];
      if (n.isFocus) cls.push("focus");
      if (done.has(n.scheduleId)) cls.push("done");
      const grp = el("g", { class: cls.join(" "), transform: `translate(${n.x - 90}, ${n.y - 50})` });
      grp.appendChild(el("rect", { width: 180, height: 100 }));
      grp.appendChild(el("text", { class: "sf-date", x: 14, y: 22 }, s.date || ""));
      grp.appendChild(el("text", { class: "sf-label", x: 14, y: 50 }, s.title || n.scheduleId));
      const box = el("text", { class: "sf-check", x: 158, y: 22 }, done.has(n.scheduleId) ? "☑" : "☐");
      box.addEventListener("click", ev => {
        ev.stopPropagation();
        if (done.has(n.scheduleId)) done.delete(n.scheduleId); else done.add(n.scheduleId);
        render();
      });
      grp.appendChild(box);
      grp.addEventListener("click", ev => {
        ev.stopPropagation();
        if (n.isFocus) showDetail(n.scheduleId);
        else setFocus(n.scheduleId);
      });
      layer.appendChild(grp);
    }
    applyTransform();
    status.textContent = `${g.nodes.length} nodes • ${g.edges.length} links` + (g.truncated ? " • truncated" : "");
  }

  function setFocus(id) {
    if (id !== focusId) sf.resetView();
    focusId = id;
    detail.hidden = true;
    render();
  }

  function renderResults() {
    const q = (search.value || "").toLowerCase();
    results.innerHTML = "";
    if (!q) { results.hidden = true; return; }
    for (const s of (DATA.schedules || [])) {
      if (!String(s.title || "").toLowerCase().includes(q)) continue;
      const b = document.createElement("button");
      b.type = "button";
      b.textContent = `${s.title} · ${s.date || ""}`;
      b.addEventListener("click", () => { search.value = ""; results.hidden = true; setFocus(s.id); });
      results.appendChild(b);
    }
    results.hidden = !results.childElementCount;
  }

  canvas.addEventListener("pointerdown", ev => {
    if (sf.beginDrag(ev.clientX, ev.clientY, ev.target)) canvas.classList.add("dragging");
  });
  canvas.addEventListener("pointermove", ev => {
    if (!view.dragOrigin) return;
    sf.continueDrag(ev.clientX, ev.clientY);
    applyTransform();
  });
  const stop = () => { sf.endDrag(); canvas.classList.remove("dragging"); };
  canvas.addEventListener("pointerup", stop);
  canvas.addEventListener("pointerleave", stop);
  canvas.addEventListener("wheel", ev => {
    ev.preventDefault();
    sf.zoom(ev.deltaY);
    applyTransform();
  }, { passive: false });

  search.addEventListener("input", renderResults);
  document.getElementById("sfReset").addEventListener("click", () => { sf.resetView(); applyTransform(); });

  try {
    render();
  } catch (e) {
    sf.showFatal("Render failed.", e);
  }
})();
'''
