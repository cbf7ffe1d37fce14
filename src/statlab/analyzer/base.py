"""Base analyzer computing the descriptive statistics of one dataset.

An analyzer prepares the value arrays and dispatches metric functions declared
in ``metrics.METRICS``.  The analyzer never mutates the data it is given and
never raises on finite numeric input: an empty dataset yields
:meth:`Statistics.empty`.
"""

from __future__ import annotations

import inspect
import math
from collections.abc import Iterable

import numpy as np

from ..metrics import METRICS
from ..stats import Statistics

STAT_FIELDS: tuple[str, ...] = (
    "count",
    "sum",
    "mean",
    "median",
    "mode",
    "min",
    "max",
    "range",
    "variance",
    "standard_deviation",
    "q1",
    "q3",
    "iqr",
    "outliers",
)


def _as_float(value: float) -> float:
    """Convert to float; integers beyond the float range become +/-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.copysign(math.inf, value)


class SampleAnalyzer:
    """Prepare value arrays and compute a :class:`Statistics` summary."""

    def __init__(self, data: Iterable[float]) -> None:
        """Store a copy of *data* and its ascending sort."""
        self.values = np.array([_as_float(v) for v in data], dtype=float)
        self.ordered = np.sort(self.values)

    def __len__(self) -> int:
        return int(self.values.size)

    def _run_metric(self, name: str) -> object:
        """Execute the metric *name* with the arrays it asks for."""
        fn = METRICS[name]
        sig = inspect.signature(fn)
        kwargs = {}
        if "values" in sig.parameters:
            kwargs["values"] = self.values
        if "ordered" in sig.parameters:
            kwargs["ordered"] = self.ordered
        return fn(**kwargs)

    def summary(self) -> Statistics:
        """Return a :class:`Statistics` populated with every metric."""
        if self.values.size == 0:
            return Statistics.empty()
        results = {name: self._run_metric(name) for name in STAT_FIELDS}
        return Statistics(**results)
