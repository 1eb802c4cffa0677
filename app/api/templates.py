from __future__ import annotations

import html
import json
from string import Template

_FULLSCREEN_STYLE = """
    html, body {
      margin: 0;
      padding: 0;
      width: 100%;
      height: 100%;
      background: #000;
    }
    iframe {
      border: none;
      width: 100%;
      height: 100%;
    }
"""

_BOARD = Template("""<!DOCTYPE html>
<html lang="$lang">
<head>
  <meta charset="UTF-8" />
  <title>$business - $title</title>
  <style>
    body {
      margin: 0;
      font-family: system-ui, sans-serif;
      background: #020617;
      color: #f9fafb;
    }
    .wrapper { padding: 32px; }
    .badge {
      display: inline-block;
      padding: 6px 12px;
      border: 1px solid #1d4ed8;
      border-radius: 999px;
      margin-bottom: 12px;
      color: #bfdbfe;
      font-size: 14px;
      letter-spacing: 0.08em;
      text-transform: uppercase;
    }
    h1 { font-size: 42px; margin: 0 0 5px; }
    .subtitle { color: #9ca3af; margin-bottom: 16px; }
    .time { color: #e5e7eb; margin-bottom: 24px; }
    .next-card {
      display: flex;
      flex-direction: column;
      gap: 4px;
      padding: 16px 20px;
      border-radius: 16px;
      margin-bottom: 24px;
      background: linear-gradient(135deg, #1d4ed8, #0f172a);
      box-shadow: 0 18px 40px rgba(15,23,42,0.6);
    }
    .next-title {
      font-size: 18px;
      text-transform: uppercase;
      letter-spacing: 0.12em;
      color: #bfdbfe;
    }
    .next-name { font-size: 28px; font-weight: 600; }
    .next-meta { font-size: 18px; color: #e5e7eb; }
    .next-cancelled { background: linear-gradient(135deg, #b91c1c, #450a0a); }
    .empty { margin-top: 20px; color: #aaa; font-size: 22px; }
    table { width: 100%; border-collapse: collapse; margin-top: 8px; }
    th, td { padding: 12px; text-align: left; font-size: 16px; }
    th {
      border-bottom: 2px solid #1f2937;
      text-transform: uppercase;
      letter-spacing: 0.06em;
      color: #e5e7eb;
      font-size: 14px;
    }
    tr.active { background-color: #1d4ed8; }
    tr.cancelled { background-color: #7f1d1d; }
  </style>
</head>
<body>
  <div class="wrapper">
    <div class="badge">$business</div>
    <h1>$title</h1>
    <div class="subtitle">$subtitle</div>
    <div class="time">Last updated: <span id="now"></span></div>
    <div id="next"></div>
    <div id="content"></div>
  </div>

  <script>
    const LOCALE = $locale;
    const REFRESH_MS = $refresh_ms;

    function esc(value) {
      const div = document.createElement("div");
      div.textContent = value == null ? "" : String(value);
      return div.innerHTML;
    }
    function fmtDate(d) {
      return d.toLocaleDateString(LOCALE);
    }
    function fmtTime(d) {
      return d.toLocaleTimeString(LOCALE, { hour: "2-digit", minute: "2-digit" });
    }

    async function loadAppointments() {
      let data = [];
      try {
        const res = await fetch("/api/appointments");
        data = await res.json();
      } catch (err) {
        console.error("Failed to load appointments", err);
        return;
      }

      document.getElementById("now").textContent = new Date().toLocaleString(LOCALE);

      const content = document.getElementById("content");
      const nextEl = document.getElementById("next");

      if (!data || data.length === 0) {
        nextEl.innerHTML = "";
        content.innerHTML = '<div class="empty">No upcoming sessions.</div>';
        return;
      }

      const next = data[0];
      const rest = data.slice(1);
      const nextStart = new Date(next.startTime);
      const nextEnd = new Date(next.endTime);
      const nextCancelled = next.status === "cancelled";

      nextEl.innerHTML =
        '<div class="next-card ' + (nextCancelled ? "next-cancelled" : "") + '">' +
        '<div class="next-title">Next up</div>' +
        '<div class="next-name">' + esc(next.clientName) + (nextCancelled ? " (Cancelled)" : "") + '</div>' +
        '<div class="next-meta">' + fmtDate(nextStart) + ' &middot; ' +
        fmtTime(nextStart) + ' - ' + fmtTime(nextEnd) + ' &middot; Coach: ' + esc(next.coachName) + '</div>' +
        '</div>';

      if (rest.length === 0) {
        content.innerHTML = "";
        return;
      }

      let rows = "";
      rest.forEach(function (a) {
        const s = new Date(a.startTime);
        const e = new Date(a.endTime);
        const cancelled = a.status === "cancelled";
        const statusLabel = cancelled ? "Cancelled" : (a.durationMinutes == null ? "" : a.durationMinutes + " min");

        rows +=
          '<tr class="' + (cancelled ? "cancelled" : "active") + '">' +
          '<td>' + fmtDate(s) + '</td>' +
          '<td>' + fmtTime(s) + ' - ' + fmtTime(e) + '</td>' +
          '<td>' + esc(a.clientName) + (cancelled ? " (Cancelled)" : "") + '</td>' +
          '<td>' + esc(a.coachName) + '</td>' +
          '<td>' + statusLabel + '</td>' +
          '</tr>';
      });

      content.innerHTML =
        '<table><thead><tr>' +
        '<th>Date</th><th>Time</th><th>Client</th><th>Coach</th><th>Status / Duration</th>' +
        '</tr></thead><tbody>' + rows + '</tbody></table>';
    }

    loadAppointments();
    setInterval(loadAppointments, REFRESH_MS);
  </script>
</body>
</html>
""")

_ADS = Template("""<!DOCTYPE html>
<html lang="$lang">
<head>
  <meta charset="UTF-8" />
  <title>$business Ads</title>
  <style>$style</style>
</head>
<body>
  <iframe src="$video_url" allow="autoplay; fullscreen" allowfullscreen></iframe>
</body>
</html>
""")

_TV = Template("""<!DOCTYPE html>
<html lang="$lang">
<head>
  <meta charset="UTF-8" />
  <title>$business TV</title>
  <style>$style</style>
</head>
<body>
  <iframe id="frame" src="/display"></iframe>

  <script>
    const POLL_MS = $poll_ms;
    const PAGES = { ads: "/ads", board: "/display" };

    async function updateMode() {
      const now = new Date();
      const url = "/api/display-mode?hour=" + now.getHours() + "&minute=" + now.getMinutes();
      let mode = "board";
      try {
        const res = await fetch(url);
        mode = (await res.json()).mode || "board";
      } catch (err) {
        console.error("Failed to fetch display mode", err);
      }

      const frame = document.getElementById("frame");
      const target = PAGES[mode] || PAGES.board;
      if (frame.getAttribute("src") !== target) {
        frame.setAttribute("src", target);
      }
    }

    updateMode();
    setInterval(updateMode, POLL_MS);
  </script>
</body>
</html>
""")


def render_board(
    business: str,
    title: str,
    subtitle: str,
    locale: str,
    refresh_seconds: int,
) -> str:
    return _BOARD.substitute(
        lang=html.escape(_lang(locale)),
        business=html.escape(business),
        title=html.escape(title),
        subtitle=html.escape(subtitle),
        locale=json.dumps(locale),
        refresh_ms=int(refresh_seconds * 1000),
    )


def render_ads(business: str, video_url: str, locale: str) -> str:
    return _ADS.substitute(
        lang=html.escape(_lang(locale)),
        business=html.escape(business),
        video_url=html.escape(video_url),
        style=_FULLSCREEN_STYLE,
    )


def render_tv(business: str, locale: str, poll_seconds: int) -> str:
    return _TV.substitute(
        lang=html.escape(_lang(locale)),
        business=html.escape(business),
        poll_ms=int(poll_seconds * 1000),
        style=_FULLSCREEN_STYLE,
    )


def _lang(locale: str) -> str:
    return locale.split("-", 1)[0] or "en"
