"""
Render selection policy.

Maps an inferred schema and a chart kind to the parameters the chart-drawing
component needs: which series to draw, their colours and pie wedges.
"""

import math
import re
from collections.abc import Sequence

from ..utils.vis_types import ChartKind, PieSlice, RenderDescriptor, SeriesSpec
from .schema import Schema
from .values import NumberValue, Record

# Indexed by series ordinal modulo its length.
PALETTE = (
    "#6366f1",
    "#8b5cf6",
    "#ec4899",
    "#14b8a6",
    "#f59e0b",
    "#3b82f6",
    "#ef4444",
)


def palette_color(index: int) -> str:
    """Return the palette colour for a series ordinal."""
    return PALETTE[index % len(PALETTE)]


def gradient_id(key: str, index: int) -> str:
    """
    Build the area fill gradient id for a series.

    The key is slugged for use as an SVG id and the ordinal is appended so
    keys that slug identically still get distinct ids.
    """
    slug = re.sub(r"[^A-Za-z0-9_-]+", "-", key).strip("-") or "series"
    return f"gradient-{slug}-{index}"


def select_render(
    records: list[Record],
    chart_kind: ChartKind | str,
    schema: Schema,
) -> RenderDescriptor | None:
    """
    Build the rendering descriptor for a chart kind.

    Args:
        records: Parsed records
        chart_kind: Chart kind or its name
        schema: Schema inferred from the records

    Returns:
        Render descriptor, or None when there is nothing to draw

    Raises:
        InvalidChartKindError: If chart_kind names no supported kind

    """
    return select_render_for_keys(
        records,
        chart_kind,
        categorical_key=schema.categorical_key,
        numeric_keys=schema.numeric_keys,
    )


def select_render_for_keys(
    records: list[Record],
    chart_kind: ChartKind | str,
    categorical_key: str | None,
    numeric_keys: Sequence[str],
) -> RenderDescriptor | None:
    """Build the rendering descriptor from explicit axis and series keys."""
    kind = ChartKind.normalize(chart_kind)
    if not records:
        return None

    if kind is ChartKind.PIE:
        return _pie_descriptor(records, categorical_key, list(numeric_keys))

    series = [
        SeriesSpec(
            key=key,
            color=palette_color(index),
            gradient_id=gradient_id(key, index) if kind is ChartKind.AREA else None,
        )
        for index, key in enumerate(numeric_keys)
    ]

    return RenderDescriptor(
        chart_kind=kind, categorical_key=categorical_key, series=series
    )


def _pie_descriptor(
    records: list[Record], categorical_key: str | None, numeric_keys: list[str]
) -> RenderDescriptor:
    if not numeric_keys:
        return RenderDescriptor(
            chart_kind=ChartKind.PIE, categorical_key=categorical_key
        )

    value_key = numeric_keys[0]
    values = [_numeric_cell(record, value_key) for record in records]
    total = sum(values)

    slices = []
    for index, (record, value) in enumerate(zip(records, values)):
        name = _category_label(record, categorical_key, index)
        percent = pie_percent(value, total)
        slices.append(
            PieSlice(
                name=name,
                value=value,
                percent=percent,
                label=f"{name} {percent}%",
                color=palette_color(index),
            )
        )

    return RenderDescriptor(
        chart_kind=ChartKind.PIE,
        categorical_key=categorical_key,
        series=[SeriesSpec(key=value_key, color=palette_color(0))],
        slices=slices,
    )


def pie_percent(value: float, total: float) -> int:
    """Return a wedge's share of the total, rounded half up; 0 for a zero total."""
    if not total or not math.isfinite(total):
        return 0
    share = value / total * 100
    if not math.isfinite(share):
        return 0
    return math.floor(share + 0.5)


def _numeric_cell(record: Record, key: str) -> float:
    value = record.get(key)
    if not isinstance(value, NumberValue):
        return 0
    try:
        number = float(value.value)
    except OverflowError:
        # Integers beyond float range count like other non-finite values
        return 0
    return number if math.isfinite(number) else 0


def _category_label(record: Record, key: str | None, index: int) -> str:
    value = record.get(key) if key is not None else None
    if value is None or value.value is None:
        return str(index + 1)
    return str(value.value)
