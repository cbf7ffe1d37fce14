"""Collection of built-in metric functions used by the analyzers.

Every metric receives non-empty arrays: ``values`` in the original order of
the dataset and/or ``ordered``, the same values sorted ascending.  A metric
declares which of the two it needs through its parameter names.
"""

from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np

METRICS: dict[str, Callable[..., object]] = {}


def register_metric(
    name: str,
) -> Callable[[Callable[..., object]], Callable[..., object]]:
    """Register *name* as a metric."""

    def decorator(fn: Callable[..., object]) -> Callable[..., object]:
        METRICS[name] = fn
        return fn

    return decorator


@register_metric("count")
def count(ordered: np.ndarray) -> int:
    return int(ordered.size)


@register_metric("sum")
def total(ordered: np.ndarray) -> float:
    return float(np.sum(ordered))


@register_metric("mean")
def mean(ordered: np.ndarray) -> float:
    """Arithmetic average."""
    return float(np.sum(ordered)) / ordered.size


@register_metric("median")
def median(ordered: np.ndarray) -> float:
    """Middle value, or the average of the two central values."""
    n = ordered.size
    if n % 2 == 0:
        return (float(ordered[n // 2 - 1]) + float(ordered[n // 2])) / 2
    return float(ordered[n // 2])


@register_metric("mode")
def mode(ordered: np.ndarray) -> tuple[float, ...]:
    """Most frequent values, ascending.

    A dataset whose values are all distinct has no mode, even though every
    value ties at frequency one.
    """
    uniq, freq = np.unique(ordered, return_counts=True)
    max_freq = int(freq.max())
    if max_freq <= 1:
        return ()
    return tuple(float(v) for v in uniq[freq == max_freq])


@register_metric("min")
def minimum(ordered: np.ndarray) -> float:
    return float(ordered[0])


@register_metric("max")
def maximum(ordered: np.ndarray) -> float:
    return float(ordered[-1])


@register_metric("range")
def spread(ordered: np.ndarray) -> float:
    return float(ordered[-1]) - float(ordered[0])


@register_metric("variance")
def variance(ordered: np.ndarray) -> float:
    """
    Population variance of the values.

    The sum of squared deviations is divided by N, not N - 1, and a single
    value has variance 0.
    """
    n = ordered.size
    if n <= 1:
        return 0.0
    centre = float(np.sum(ordered)) / n
    return float(np.sum((ordered - centre) ** 2)) / n


@register_metric("standard_deviation")
def standard_deviation(ordered: np.ndarray) -> float:
    return math.sqrt(variance(ordered))


def _quartile_index(n: int, fraction: float) -> int:
    return int(math.floor(n * fraction))


@register_metric("q1")
def lower_quartile(ordered: np.ndarray) -> float | None:
    """Nearest-rank lower quartile; needs at least four values."""
    n = ordered.size
    if n < 4:
        return None
    return float(ordered[_quartile_index(n, 0.25)])


@register_metric("q3")
def upper_quartile(ordered: np.ndarray) -> float | None:
    """Nearest-rank upper quartile; needs at least four values."""
    n = ordered.size
    if n < 4:
        return None
    return float(ordered[_quartile_index(n, 0.75)])


@register_metric("iqr")
def iqr(ordered: np.ndarray) -> float | None:
    q1 = lower_quartile(ordered)
    q3 = upper_quartile(ordered)
    if q1 is None or q3 is None:
        return None
    return q3 - q1


@register_metric("outliers")
def outliers(values: np.ndarray, ordered: np.ndarray) -> tuple[float, ...]:
    """Values strictly beyond 1.5 IQR from the quartiles, in original order."""
    q1 = lower_quartile(ordered)
    q3 = upper_quartile(ordered)
    if q1 is None or q3 is None:
        return ()
    width = q3 - q1
    low = q1 - 1.5 * width
    high = q3 + 1.5 * width
    mask = (values < low) | (values > high)
    return tuple(float(v) for v in values[mask])
