"""Visualization type enums and models."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from .error_handler import InvalidChartKindError


class ChartKind(str, Enum):
    """Supported chart kinds."""

    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    AREA = "area"

    @classmethod
    def normalize(cls, value: "ChartKind | str") -> "ChartKind":
        """
        Resolve a chart kind from user input.

        Matching is case-insensitive and accepts common aliases.

        Args:
            value: Chart kind or its name

        Returns:
            Matching ChartKind

        Raises:
            InvalidChartKindError: If the value names no supported kind

        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            key = CHART_KIND_ALIASES.get(key, key)
            try:
                return cls(key)
            except ValueError:
                pass
        raise InvalidChartKindError(
            f"Unsupported chart kind: {value!r} "
            f"(expected one of {', '.join(kind.value for kind in cls)})"
        )


CHART_KIND_ALIASES = {
    "bars": "bar",
    "column": "bar",
    "columns": "bar",
    "lines": "line",
    "donut": "pie",
    "doughnut": "pie",
    "areas": "area",
}


class SeriesSpec(BaseModel):
    """One plotted series and its colour."""

    key: str = Field(description="Numeric field drawn by this series")
    color: str = Field(description="Palette colour for the series")
    gradient_id: str | None = Field(
        default=None, description="Fill gradient id (area charts only)"
    )


class PieSlice(BaseModel):
    """One pie wedge."""

    name: str = Field(description="Categorical value of the record")
    value: float = Field(description="Value of the selected numeric field")
    percent: int = Field(description="Rounded share of the field total")
    label: str = Field(description="Wedge label, e.g. 'A 33%'")
    color: str = Field(description="Palette colour for the wedge")


class RenderDescriptor(BaseModel):
    """Rendering parameters handed to the chart-drawing component."""

    chart_kind: ChartKind = Field(description="Chart kind to draw")
    categorical_key: str | None = Field(
        default=None, description="Field used for the category axis"
    )
    series: list[SeriesSpec] = Field(
        default_factory=list, description="Series to draw, in order"
    )
    slices: list[PieSlice] = Field(
        default_factory=list, description="Pie wedges (pie charts only)"
    )

    @field_validator("chart_kind", mode="before")
    @classmethod
    def normalize_chart_kind(cls, v):
        """Normalize chart kind names and aliases to the enum."""
        return ChartKind.normalize(v)
