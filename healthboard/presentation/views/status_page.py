"""
Status page rendering - Presentation Layer

Pure functions from the typed view model to HTML. No lookups by string
key and no I/O: everything shown is already on the view.
"""

from html import escape
from typing import Iterable

from healthboard.domain.entities.dashboard import ChannelRowView, StatusPageView, TickView
from healthboard.domain.entities.severity import SeverityBucket

_STYLE = """
body { font-family: system-ui, sans-serif; margin: 2rem; background: #f8fafc; color: #0f172a; }
.score { display: inline-block; padding: 1rem 1.5rem; border-radius: 1rem; color: #fff; }
.subscores span { margin-right: 1rem; }
.row { margin: 1.5rem 0; }
.ticks { display: flex; gap: 2px; height: 2rem; }
.status-tick { flex: 1; max-width: 10px; border-radius: 2px; }
.status-tick.excellent { background: #10b981; }
.status-tick.good { background: #3b82f6; }
.status-tick.warning { background: #f59e0b; }
.status-tick.critical { background: #ef4444; }
.status-tick.overload { background: #991b1b; }
.badge { padding: 0 .5rem; border-radius: .5rem; font-size: .85rem; }
.badge.success { background: #d1fae5; } .badge.info { background: #dbeafe; }
.badge.warning { background: #fef3c7; } .badge.error { background: #fee2e2; }
.empty { color: #64748b; font-style: italic; }
"""


def render_tick(tick: TickView) -> str:
    tooltip = escape(tick.tooltip, quote=True)
    return f'<div class="status-tick {tick.severity.value}" title="{tooltip}"></div>'


def render_ticks(ticks: Iterable[TickView]) -> str:
    """One tick per history entry, oldest first."""
    return "".join(render_tick(tick) for tick in ticks)


def _badge(severity: SeverityBucket) -> str:
    return f'<span class="badge {severity.color}">{escape(severity.label)}</span>'


def render_row(row: ChannelRowView, capacity: int) -> str:
    ticks = render_ticks(row.ticks)
    if not ticks:
        ticks = '<span class="empty">No samples yet</span>'
    return (
        f'<section class="row" id="channel-{row.channel.value}">'
        f"<h3>{escape(row.title)} {_badge(row.current)}</h3>"
        f'<div class="ticks">{ticks}</div>'
        f"<small>{len(row.ticks)} / {capacity} samples</small>"
        "</section>"
    )


def render_status_page(view: StatusPageView) -> str:
    score = view.score
    start, end = score.severity.style.gradient
    perf = "n/a" if view.perf_ms is None else f"{view.perf_ms:.0f} ms"
    rows = "".join(render_row(row, view.history_capacity) for row in view.rows)
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{escape(view.api_name)} status</title>"
        f"<style>{_STYLE}</style></head><body>"
        f"<h1>{escape(view.api_name)} <small>v{escape(view.version)}</small></h1>"
        f'<div class="score" data-icon="{score.status_icon}" '
        f'style="background: linear-gradient(135deg, {start}, {end})">'
        f"<strong>{score.total}</strong>/100 {escape(score.status_label)}</div>"
        '<p class="subscores">'
        f"<span>CPU {score.cpu_sub}/25</span>"
        f"<span>Memory {score.memory_sub}/25</span>"
        f"<span>Performance {score.perf_sub}/25</span>"
        f"<span>Network {score.network_sub}/25</span></p>"
        f"<p>Response time {perf} | Uptime {escape(view.uptime_text)} | "
        f"Load {escape(view.load_average)} | "
        f"Updated {view.generated_at:%H:%M} UTC</p>"
        f"{rows}</body></html>"
    )


def render_unavailable_page(api_name: str, version: str) -> str:
    """Shown when the view model could not be built."""
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{escape(api_name)} status</title>"
        f"<style>{_STYLE}</style></head><body>"
        f"<h1>{escape(api_name)} <small>v{escape(version)}</small></h1>"
        f"<p>{_badge(SeverityBucket.OVERLOAD)} Diagnostics are temporarily "
        "unavailable.</p></body></html>"
    )
