# smartflow/render/html_markup.py
from __future__ import annotations

BODY_MARKUP = r"""
<header class="sf-header">
  <div class="sf-title">Logic graph</div>
  <div class="sf-search">
    <input id="sfSearch" type="text" placeholder="Search titles to switch focus..." autocomplete="off" />
    <div id="sfSearchResults" class="sf-results" hidden></div>
  </div>
  <button id="sfReset" type="button">Reset view</button>
</header>
<main id="sfCanvas" class="sf-canvas">
  <svg id="sfSvg" width="100%" height="100%">
    <g id="sfLayer"></g>
  </svg>
  <aside id="sfDetail" class="sf-detail" hidden>
    <div id="sfDetailText"></div>
    <svg id="sfCard" class="sf-card" viewBox="0 0 380 450" hidden></svg>
  </aside>
  <div id="sfStatus" class="sf-status"></div>
</main>
"""
