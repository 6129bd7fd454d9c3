"""Visualization utilities for rendering Plotly figures built by ChartGenerators."""

from pathlib import Path
from typing import Any

import plotly.graph_objects as go
import plotly.offline as pyo
from loguru import logger


def create_figure(chart_json: dict[str, Any]) -> go.Figure:
    """Create a Plotly Figure from a ``{"data", "layout"}`` dict."""
    return go.Figure(
        data=chart_json.get("data", []), layout=chart_json.get("layout", {})
    )


def render_chart_html(
    chart_json: dict[str, Any], path: str | Path = "chart.html"
) -> str | None:
    """
    Write a standalone HTML file for a figure without opening a browser.

    Args:
        chart_json: Plotly chart dict with data and layout
        path: Output file path

    Returns:
        Path to generated HTML file or None if there was nothing to render

    """
    if not chart_json or not chart_json.get("data"):
        logger.info("No chart data to render")
        return None

    html_path = Path(path)
    pyo.plot(create_figure(chart_json), auto_open=False, filename=str(html_path))
    logger.info(f"Chart written to {html_path}")
    return str(html_path)
