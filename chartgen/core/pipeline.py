"""
Parse -> infer -> render pipeline.

UI state lives with the caller as a ``ChartState`` and is passed in on every
change; the pipeline keeps nothing between runs except an optional
per-instance memo of previous results.
"""

from collections import OrderedDict
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

import xxhash
from loguru import logger

from ..config.settings import PIPELINE_CONFIG
from ..utils.vis_types import ChartKind, RenderDescriptor
from .parser import parse
from .render import select_render
from .schema import Schema, infer_schema
from .values import Value, record_to_plain


@dataclass(frozen=True)
class ChartState:
    """Caller-owned input state."""

    raw_text: str = ""
    chart_kind: ChartKind | str = ChartKind.BAR
    is_generating: bool = False


@dataclass(frozen=True)
class ChartResult:
    """
    Output of one pipeline run.

    Results may be shared between callers through the memo, so records are
    exposed as a tuple of read-only mappings.
    """

    chart_kind: ChartKind
    records: tuple[Mapping[str, Value], ...] = ()
    schema: Schema = field(default_factory=Schema)
    descriptor: RenderDescriptor | None = None

    @property
    def renderable(self) -> bool:
        """Whether there is anything to draw."""
        return self.descriptor is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "chart_kind": self.chart_kind.value,
            "records": [record_to_plain(record) for record in self.records],
            "schema": self.schema.to_dict(),
            "descriptor": (
                self.descriptor.model_dump(mode="json") if self.descriptor else None
            ),
        }


class ChartPipeline:
    """Runs parsing, schema inference and render selection for a ChartState."""

    def __init__(
        self,
        cache_enabled: bool | None = None,
        max_cache_entries: int | None = None,
        skip_blank_lines: bool | None = None,
    ):
        """
        Initialize the pipeline.

        Args:
            cache_enabled: Memoize results by input hash
            max_cache_entries: Maximum memoized results kept
            skip_blank_lines: Drop blank CSV data lines

        """
        config = PIPELINE_CONFIG

        self.cache_enabled = (
            config["cache_enabled"] if cache_enabled is None else cache_enabled
        )
        self.max_cache_entries = max_cache_entries or config["max_cache_entries"]
        self.skip_blank_lines = (
            config["skip_blank_lines"] if skip_blank_lines is None else skip_blank_lines
        )
        self._cache: OrderedDict[str, ChartResult] = OrderedDict()

    def run(self, state: ChartState) -> ChartResult:
        """
        Run the pipeline for the given state.

        Args:
            state: Current input text and chart kind

        Returns:
            Records, schema and render descriptor

        Raises:
            InvalidChartKindError: If the state's chart kind is not supported

        """
        kind = ChartKind.normalize(state.chart_kind)

        if not self.cache_enabled:
            return self._compute(state.raw_text, kind)

        key = self.cache_key(state.raw_text, kind)
        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            logger.debug(f"Chart cache hit ({key})")
            return cached

        result = self._compute(state.raw_text, kind)
        self._cache[key] = result
        if len(self._cache) > self.max_cache_entries:
            self._cache.popitem(last=False)
        return result

    def _compute(self, raw_text: str, kind: ChartKind) -> ChartResult:
        records = parse(raw_text, skip_blank_lines=self.skip_blank_lines)
        schema = infer_schema(records)
        descriptor = select_render(records, kind, schema)

        if descriptor is None:
            logger.debug("No records parsed, nothing to render")
        else:
            logger.debug(
                f"Selected {kind.value} chart with {len(descriptor.series)} series "
                f"over {len(records)} records"
            )

        return ChartResult(
            chart_kind=kind,
            records=tuple(MappingProxyType(record) for record in records),
            schema=schema,
            descriptor=descriptor,
        )

    @staticmethod
    def cache_key(raw_text: str, kind: ChartKind) -> str:
        """Hash the input text and chart kind."""
        return xxhash.xxh64(f"{kind.value}\x00{raw_text}".encode()).hexdigest()

    def clear_cache(self) -> None:
        """Drop all memoized results."""
        self._cache.clear()
