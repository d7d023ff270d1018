"""Overlay payloads for the chart widget.

The engine output is turned into the overlay dicts the front end passes to the
charting library: one polyline per visible band line plus an optional filled
band. Undefined points are dropped so the widget draws a gap instead of a
bogus price.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from bandchart.models import OHLCV, BandPoint, BollingerStyle, PriceSummary

# Draw order matches the front end: upper, basis, lower.
_LINES = (("upper", "bb_upper"), ("basis", "bb_basis"), ("lower", "bb_lower"))


def fill_color(color: str, opacity: float) -> str:
    """``#RRGGBB`` + opacity -> ``rgba(r, g, b, a)``."""
    r, g, b = (int(color[i:i + 2], 16) for i in (1, 3, 5))
    return f"rgba({r}, {g}, {b}, {opacity:g})"


def _line_points(bands: Sequence[BandPoint], field: str) -> list[dict[str, Any]]:
    points = []
    for p in bands:
        value = getattr(p, field)
        if value is not None:
            points.append({"timestamp": p.time, "value": value})
    return points


def build_overlays(bands: Sequence[BandPoint], style: BollingerStyle) -> list[dict[str, Any]]:
    overlays: list[dict[str, Any]] = []
    for field, overlay_id in _LINES:
        line = getattr(style, field)
        if not line.visible:
            continue
        overlays.append({
            "id": overlay_id,
            "name": "polyline",
            "lock": True,
            "styles": {
                "line": {
                    "style": line.style.value,
                    "color": line.color,
                    "size": line.width,
                },
            },
            "points": _line_points(bands, field),
        })

    if style.background.visible:
        overlays.append({
            "id": "bb_fill",
            "name": "band",
            "lock": True,
            "styles": {
                "polygon": {
                    "color": fill_color(style.background.color, style.background.opacity),
                },
            },
            "points": [
                {"timestamp": p.time, "upper": p.upper, "lower": p.lower}
                for p in bands
                if p.is_defined
            ],
        })
    return overlays


def price_summary(series: Sequence[OHLCV]) -> PriceSummary | None:
    """Latest close with change vs. the previous bar, or None if empty."""
    if not series:
        return None
    latest = series[-1]
    change = change_pct = None
    if len(series) > 1:
        previous = series[-2]
        change = latest.close - previous.close
        if previous.close != 0:
            change_pct = change / previous.close * 100
    return PriceSummary(
        time=latest.time,
        price=latest.close,
        change=change,
        change_pct=change_pct,
        volume=latest.volume,
    )
