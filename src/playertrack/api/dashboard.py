"""HTML dashboard that polls the players endpoint."""

from __future__ import annotations

import json
from html import escape


_STYLE = """
:root { --primary: #3a86ff; --secondary: #8338ec; --bg: #f8f9fa; --card: #ffffff;
        --text: #212529; --border: #dee2e6; --online: #2ecc71; }
body { font-family: 'Segoe UI', Tahoma, sans-serif; background: var(--bg); color: var(--text); margin: 0; }
body.dark-mode { --bg: #222; --card: #333; --text: #eee; }
.container { max-width: 1200px; margin: 0 auto; padding: 20px; }
header { display: flex; justify-content: space-between; align-items: center;
         border-bottom: 1px solid var(--border); margin-bottom: 20px; padding-bottom: 20px; }
header h1 { margin: 0; color: var(--primary); }
#status { display: flex; gap: 10px; align-items: center; padding: 15px; border-radius: 8px;
          background: var(--card); margin-bottom: 20px; }
.indicator { width: 12px; height: 12px; border-radius: 50%; background: #f44336; }
.indicator.online { background: var(--online); }
.stats { display: flex; flex-wrap: wrap; gap: 20px; margin-bottom: 20px; }
.stat { flex: 1; min-width: 200px; background: var(--card); padding: 20px; border-radius: 8px; }
.stat h3 { margin-top: 0; color: var(--primary); }
.stat p { font-size: 2rem; font-weight: bold; margin: 10px 0 0 0; }
.grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(300px, 1fr)); gap: 20px; }
.card { background: var(--card); border-radius: 8px; padding: 20px; }
.card div { display: flex; justify-content: space-between; margin: 8px 0; }
.card div span:first-child { color: var(--secondary); font-weight: 500; }
.timestamp { font-size: 0.8rem; color: #777; justify-content: flex-end !important; }
.empty { text-align: center; padding: 40px; background: var(--card); border-radius: 8px; }
.hide { display: none !important; }
"""

_SCRIPT = """
(function () {
  const playersUrl = %(players_url)s;
  const pollInterval = %(poll_interval)d;
  const $ = (id) => document.getElementById(id);
  const fields = [
    ['Username', (p) => p.playerName], ['Game', (p) => p.gameName],
    ['Players', (p) => p.serverPlayers + '/' + p.maxPlayers], ['Place ID', (p) => p.placeId],
    ['Job ID', (p) => p.jobId], ['Country', (p) => p.country],
    ['Executor', (p) => p.executor], ['Version', (p) => p.version],
  ];
  const clock = (d) => isNaN(d) ? '-' : d.toTimeString().slice(0, 8);

  const toggle = $('theme-toggle');
  if (localStorage.getItem('theme') === 'dark') {
    document.body.classList.add('dark-mode');
    toggle.checked = true;
  }
  toggle.addEventListener('change', function () {
    document.body.classList.toggle('dark-mode', this.checked);
    localStorage.setItem('theme', this.checked ? 'dark' : 'light');
  });

  function card(player) {
    const el = document.createElement('div');
    el.className = 'card';
    const title = document.createElement('h3');
    title.textContent = player.displayName || player.playerName;
    el.appendChild(title);
    for (const [label, get] of fields) {
      const row = document.createElement('div');
      const name = document.createElement('span');
      name.textContent = label + ':';
      const value = document.createElement('span');
      value.textContent = get(player);
      row.append(name, value);
      el.appendChild(row);
    }
    const stamp = document.createElement('div');
    stamp.className = 'timestamp';
    stamp.textContent = clock(new Date(player.lastUpdated));
    el.appendChild(stamp);
    return el;
  }

  function render(players) {
    $('active-players').textContent = players.length;
    $('unique-games').textContent = new Set(players.map((p) => p.gameName)).size;
    $('last-updated').textContent = clock(new Date());
    const grid = $('player-grid');
    grid.replaceChildren(...players.map(card));
    $('empty-state').classList.toggle('hide', players.length > 0);
    grid.classList.toggle('hide', players.length === 0);
  }

  function poll() {
    fetch(playersUrl)
      .then((resp) => {
        if (!resp.ok) throw new Error('Failed to fetch player data');
        $('connection').classList.add('online');
        $('status-text').textContent = 'Connected';
        return resp.json();
      })
      .then(render)
      .catch((err) => {
        console.error('Error fetching player data:', err);
        $('connection').classList.remove('online');
        $('status-text').textContent = 'Connection Error';
      });
  }

  poll();
  setInterval(poll, pollInterval);
})();
"""


def render_dashboard_page(*, title: str = "Player Tracker", players_url: str, poll_interval_ms: int = 5000) -> str:
    script = _SCRIPT % {"players_url": json.dumps(players_url), "poll_interval": poll_interval_ms}
    safe_title = escape(title)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{safe_title}</title>
<style>{_STYLE}</style>
</head>
<body>
<div class="container">
  <header>
    <h1>{safe_title}</h1>
    <label><input type="checkbox" id="theme-toggle"> Dark Mode</label>
  </header>
  <div id="status"><div class="indicator" id="connection"></div><span id="status-text">Disconnected</span></div>
  <div class="stats">
    <div class="stat"><h3>Active Players</h3><p id="active-players">0</p></div>
    <div class="stat"><h3>Unique Games</h3><p id="unique-games">0</p></div>
    <div class="stat"><h3>Last Updated</h3><p id="last-updated">-</p></div>
  </div>
  <div class="empty hide" id="empty-state"><h3>No Players Connected</h3><p>Waiting for connections...</p></div>
  <div class="grid hide" id="player-grid"></div>
</div>
<script>{script}</script>
</body>
</html>
"""
