"""Plotly figure generation from render descriptors."""

from collections.abc import Mapping, Sequence
from typing import Any

import pandas as pd

from ..core.values import Value
from .data_processors import DataProcessors
from .vis_types import ChartKind, RenderDescriptor

DARK_LAYOUT = {
    "paper_bgcolor": "#1e293b",
    "plot_bgcolor": "#1e293b",
    "font": {"color": "#e2e8f0"},
    "legend": {"orientation": "h"},
}


def hex_to_rgba(color: str, alpha: float) -> str:
    """Convert a ``#rrggbb`` colour to an ``rgba()`` string."""
    value = color.lstrip("#")
    red, green, blue = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    return f"rgba({red}, {green}, {blue}, {alpha})"


class ChartGenerators:
    """Utility class for generating Plotly traces per chart kind."""

    @staticmethod
    def build_figure(
        records: Sequence[Mapping[str, Value]], descriptor: RenderDescriptor | None
    ) -> dict[str, Any]:
        """
        Build a Plotly figure dict for a render descriptor.

        Args:
            records: Parsed records
            descriptor: Descriptor from the render selector, or None

        Returns:
            Dict with ``data`` (traces) and ``layout``

        """
        chart_json = {"data": [], "layout": dict(DARK_LAYOUT)}
        if descriptor is None:
            return chart_json

        df = DataProcessors.records_to_dataframe(records)
        generators = {
            ChartKind.BAR: ChartGenerators.generate_bar_chart,
            ChartKind.LINE: ChartGenerators.generate_line_chart,
            ChartKind.AREA: ChartGenerators.generate_area_chart,
            ChartKind.PIE: ChartGenerators.generate_pie_chart,
        }
        generators[descriptor.chart_kind](df, descriptor, chart_json)

        if descriptor.chart_kind is not ChartKind.PIE and descriptor.categorical_key:
            chart_json["layout"]["xaxis"] = {"title": descriptor.categorical_key}

        return chart_json

    @staticmethod
    def generate_bar_chart(df: pd.DataFrame, desc: RenderDescriptor, chart_json):
        """Generate grouped bar traces, one per series."""
        x_data = DataProcessors.column_values(df, desc.categorical_key)
        for series in desc.series:
            chart_json["data"].append(
                {
                    "x": x_data,
                    "y": DataProcessors.column_values(df, series.key),
                    "type": "bar",
                    "name": series.key,
                    "marker": {"color": series.color},
                }
            )
        chart_json["layout"]["barmode"] = "group"

    @staticmethod
    def generate_line_chart(df: pd.DataFrame, desc: RenderDescriptor, chart_json):
        """Generate line traces, one per series."""
        x_data = DataProcessors.column_values(df, desc.categorical_key)
        for series in desc.series:
            chart_json["data"].append(
                {
                    "x": x_data,
                    "y": DataProcessors.column_values(df, series.key),
                    "type": "scatter",
                    "mode": "lines+markers",
                    "name": series.key,
                    "line": {"color": series.color, "width": 2},
                }
            )

    @staticmethod
    def generate_area_chart(df: pd.DataFrame, desc: RenderDescriptor, chart_json):
        """Generate filled area traces, one per series."""
        x_data = DataProcessors.column_values(df, desc.categorical_key)
        for series in desc.series:
            chart_json["data"].append(
                {
                    "x": x_data,
                    "y": DataProcessors.column_values(df, series.key),
                    "type": "scatter",
                    "mode": "lines",
                    "name": series.key,
                    "fill": "tozeroy",
                    "line": {"color": series.color},
                    "fillcolor": hex_to_rgba(series.color, 0.3),
                    "legendgroup": series.gradient_id,
                }
            )

    @staticmethod
    def generate_pie_chart(df: pd.DataFrame, desc: RenderDescriptor, chart_json):
        """Generate a single pie trace from the descriptor's wedges."""
        if not desc.slices:
            return
        chart_json["data"].append(
            {
                "labels": [s.name for s in desc.slices],
                "values": [s.value for s in desc.slices],
                "text": [s.label for s in desc.slices],
                "textinfo": "text",
                "type": "pie",
                "name": desc.series[0].key,
                "marker": {"colors": [s.color for s in desc.slices]},
                "sort": False,
            }
        )
