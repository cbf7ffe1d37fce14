import numpy as np

from statlab.analyzer.base import STAT_FIELDS, SampleAnalyzer
from statlab.metrics import METRICS, register_metric


def test_every_field_has_a_metric() -> None:
    assert set(STAT_FIELDS) <= set(METRICS)


def test_analyzer_keeps_original_order() -> None:
    analyzer = SampleAnalyzer([3, 1, 2])
    np.testing.assert_array_equal(analyzer.values, [3.0, 1.0, 2.0])
    np.testing.assert_array_equal(analyzer.ordered, [1.0, 2.0, 3.0])
    assert len(analyzer) == 3


def test_run_metric_passes_requested_arrays() -> None:
    @register_metric("first_seen")
    def first_seen(values: np.ndarray) -> float:
        return float(values[0])

    try:
        assert SampleAnalyzer([9, 1, 5])._run_metric("first_seen") == 9
        assert SampleAnalyzer([9, 1, 5])._run_metric("min") == 1
    finally:
        del METRICS["first_seen"]


def test_summary_accepts_generators() -> None:
    stats = SampleAnalyzer(x for x in (1, 2, 2)).summary()
    assert stats.count == 3
    assert stats.mode == (2,)
