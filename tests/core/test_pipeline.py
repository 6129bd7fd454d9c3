"""Tests for the parse -> infer -> render pipeline."""

import pytest

from chartgen.core.pipeline import ChartPipeline, ChartResult, ChartState
from chartgen.core.values import NumberValue
from chartgen.utils.error_handler import InvalidChartKindError
from chartgen.utils.vis_types import ChartKind


def test_run_bar_chart(pipeline, sales_csv):
    """A full run yields records, schema and descriptor."""
    result = pipeline.run(ChartState(raw_text=sales_csv, chart_kind="bar"))

    assert isinstance(result, ChartResult)
    assert result.renderable
    assert len(result.records) == 2
    assert result.schema.categorical_key == "Year"
    assert [s.key for s in result.descriptor.series] == ["Sales", "Profit"]


def test_run_unparseable_input(pipeline):
    """Unparseable input is not an error, just nothing to render."""
    result = pipeline.run(ChartState(raw_text="singleline", chart_kind="pie"))

    assert not result.renderable
    assert result.records == ()
    assert result.descriptor is None


def test_run_rejects_unknown_kind(pipeline, sales_csv):
    """Unknown chart kinds raise before any work is done."""
    with pytest.raises(InvalidChartKindError):
        pipeline.run(ChartState(raw_text=sales_csv, chart_kind="radar"))


def test_results_are_memoized(pipeline, sales_csv):
    """Identical state returns the memoized result."""
    state = ChartState(raw_text=sales_csv, chart_kind=ChartKind.LINE)

    assert pipeline.run(state) is pipeline.run(state)


def test_memoized_records_are_read_only(pipeline, sales_csv):
    """Callers cannot change records shared through the memo."""
    state = ChartState(raw_text=sales_csv, chart_kind="bar")
    result = pipeline.run(state)

    with pytest.raises(TypeError):
        result.records[0]["Sales"] = None
    with pytest.raises(AttributeError):
        result.records.append({})

    assert pipeline.run(state).records[0]["Sales"] == NumberValue(100)


def test_chart_kind_is_part_of_cache_key(pipeline, sales_csv):
    """Switching chart kind recomputes the descriptor."""
    bar = pipeline.run(ChartState(raw_text=sales_csv, chart_kind="bar"))
    area = pipeline.run(ChartState(raw_text=sales_csv, chart_kind="area"))

    assert bar.descriptor.chart_kind is ChartKind.BAR
    assert area.descriptor.chart_kind is ChartKind.AREA


def test_cache_is_bounded(pipeline, sales_csv, region_csv, products_json):
    """The oldest entry is evicted once the cache is full."""
    first = pipeline.run(ChartState(raw_text=sales_csv))
    pipeline.run(ChartState(raw_text=region_csv))
    pipeline.run(ChartState(raw_text=products_json))

    assert pipeline.run(ChartState(raw_text=sales_csv)) is not first


def test_cache_can_be_disabled(sales_csv):
    """Without caching each run recomputes."""
    pipeline = ChartPipeline(cache_enabled=False)
    state = ChartState(raw_text=sales_csv)

    first = pipeline.run(state)
    second = pipeline.run(state)

    assert first is not second
    assert first == second


def test_clear_cache(pipeline, sales_csv):
    """Clearing the cache forces recomputation."""
    state = ChartState(raw_text=sales_csv)
    first = pipeline.run(state)

    pipeline.clear_cache()

    assert pipeline.run(state) is not first


def test_skip_blank_lines_option():
    """The pipeline forwards the blank-line policy to the parser."""
    raw = "a,b\nx,1\n\ny,2"

    kept = ChartPipeline(cache_enabled=False).run(ChartState(raw_text=raw))
    skipped = ChartPipeline(cache_enabled=False, skip_blank_lines=True).run(
        ChartState(raw_text=raw)
    )

    assert len(kept.records) == 3
    assert len(skipped.records) == 2


def test_to_dict(pipeline, products_json):
    """Results serialize to plain JSON-friendly values."""
    result = pipeline.run(ChartState(raw_text=products_json, chart_kind="pie"))

    payload = result.to_dict()

    assert payload["chart_kind"] == "pie"
    assert payload["records"] == [
        {"name": "A", "value": 10},
        {"name": "B", "value": 20},
    ]
    assert payload["schema"] == {"categorical_key": "name", "numeric_keys": ["value"]}
    assert payload["descriptor"]["chart_kind"] == "pie"
    assert [s["percent"] for s in payload["descriptor"]["slices"]] == [33, 67]


def test_cache_key_is_stable():
    """The cache key depends only on text and chart kind."""
    key = ChartPipeline.cache_key("a,b\n1,2", ChartKind.BAR)

    assert key == ChartPipeline.cache_key("a,b\n1,2", ChartKind.BAR)
    assert key != ChartPipeline.cache_key("a,b\n1,2", ChartKind.PIE)
