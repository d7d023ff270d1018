"""Payloads handed to the browser charting widget."""

from bandchart.chart.overlays import build_overlays, fill_color, price_summary

__all__ = ["build_overlays", "fill_color", "price_summary"]
