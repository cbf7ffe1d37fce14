"""Step-by-step explanations of how each statistic is obtained.

Presentation code reads the :class:`Statistics` record only through
:func:`format_value` / :func:`format_values`, which render fields that cannot
be computed yet as an explicit placeholder.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from .analyzer.base import SampleAnalyzer
from .stats import Statistics

PLACEHOLDER = "N/A"

EXPLAINABLE = (
    "mean",
    "median",
    "mode",
    "range",
    "variance",
    "standard_deviation",
    "iqr",
    "outliers",
)

DEFINITIONS: dict[str, dict[str, str]] = {
    "mean": {
        "simple": "The balance point of all your numbers",
        "formal": "Sum of all values divided by the number of values",
        "formula": "(x1 + x2 + ... + xn) / n",
    },
    "median": {
        "simple": "The number in the middle when they are lined up",
        "formal": "Middle value of the sorted data",
        "formula": "middle value, or average of the two middle values",
    },
    "mode": {
        "simple": "The number that shows up most often",
        "formal": "Value(s) with the highest frequency, if any value repeats",
        "formula": "most frequent value(s)",
    },
    "range": {
        "simple": "How far apart the smallest and largest numbers are",
        "formal": "Difference between the maximum and the minimum",
        "formula": "max - min",
    },
    "variance": {
        "simple": "How far the numbers wander from the average, squared",
        "formal": "Average of the squared differences from the mean",
        "formula": "sum((x - mean)^2) / n",
    },
    "standard_deviation": {
        "simple": "How spread out the numbers are from the average",
        "formal": "Average distance of values from the mean",
        "formula": "sqrt(average of squared differences from mean)",
    },
    "iqr": {
        "simple": "How wide the middle half of the numbers is",
        "formal": "Difference between the upper and lower quartile",
        "formula": "Q3 - Q1",
    },
    "outliers": {
        "simple": "Numbers that sit far away from the rest",
        "formal": "Values beyond 1.5 IQR below Q1 or above Q3",
        "formula": "x < Q1 - 1.5 IQR  or  x > Q3 + 1.5 IQR",
    },
}


@dataclass(frozen=True)
class Step:
    title: str
    detail: str


def format_value(value: float | None) -> str:
    """Render a statistic, or the placeholder when it is not computable."""
    if value is None:
        return PLACEHOLDER
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def format_values(values: Sequence[float]) -> str:
    if not values:
        return "None"
    return ", ".join(format_value(v) for v in values)


def _join(values: Iterable[float], sep: str) -> str:
    return sep.join(format_value(v) for v in values)


def _explain_mean(data: list[float], stats: Statistics) -> list[Step]:
    return [
        Step("Step 1: List all numbers", _join(data, ", ")),
        Step(
            "Step 2: Add all numbers together",
            f"{_join(data, ' + ')} = {format_value(stats.sum)}",
        ),
        Step(
            "Step 3: Divide by count of numbers",
            f"{format_value(stats.sum)} ÷ {stats.count} = {format_value(stats.mean)}",
        ),
    ]


def _explain_median(data: list[float], stats: Statistics) -> list[Step]:
    ordered = sorted(data)
    n = len(ordered)
    steps = [Step("Step 1: Sort the numbers", _join(ordered, ", "))]
    if n % 2:
        steps.append(
            Step(
                "Step 2: Pick the middle number",
                f"{n} numbers, so the middle one is number {n // 2 + 1}: "
                f"{format_value(stats.median)}",
            )
        )
    else:
        a, b = ordered[n // 2 - 1], ordered[n // 2]
        steps.append(
            Step(
                "Step 2: Average the two middle numbers",
                f"({format_value(a)} + {format_value(b)}) ÷ 2 = {format_value(stats.median)}",
            )
        )
    return steps


def _explain_mode(data: list[float], stats: Statistics) -> list[Step]:
    freq = Counter(data)
    counted = ", ".join(f"{format_value(v)} appears {freq[v]}×" for v in sorted(freq))
    if stats.mode:
        found = f"Most frequent: {format_values(stats.mode)} ({freq[stats.mode[0]]} times)"
    else:
        found = "Every number appears only once, so there is no mode"
    return [
        Step("Step 1: Count how often each number appears", counted),
        Step("Step 2: Pick the most frequent", found),
    ]


def _explain_range(data: list[float], stats: Statistics) -> list[Step]:
    return [
        Step(
            "Step 1: Find the smallest and largest numbers",
            f"min = {format_value(stats.min)}, max = {format_value(stats.max)}",
        ),
        Step(
            "Step 2: Subtract the smallest from the largest",
            f"{format_value(stats.max)} - {format_value(stats.min)} = {format_value(stats.range)}",
        ),
    ]


def _explain_variance(data: list[float], stats: Statistics) -> list[Step]:
    mean = stats.mean if stats.mean is not None else 0.0
    if stats.count == 1:
        return [
            Step("Step 1: Find the mean", f"mean = {format_value(stats.mean)}"),
            Step("Step 2: Only one number", "A single number does not vary: variance = 0"),
        ]
    squares = [(x - mean) ** 2 for x in data]
    squared = ", ".join(
        f"({format_value(x)} - {format_value(mean)})² = {format_value(sq)}"
        for x, sq in zip(data, squares)
    )
    return [
        Step("Step 1: Find the mean", f"mean = {format_value(stats.mean)}"),
        Step("Step 2: Square each distance from the mean", squared),
        Step(
            "Step 3: Average the squared distances",
            f"{format_value(math.fsum(squares))} ÷ {stats.count} = {format_value(stats.variance)}",
        ),
    ]


def _explain_standard_deviation(data: list[float], stats: Statistics) -> list[Step]:
    steps = _explain_variance(data, stats)
    steps.append(
        Step(
            f"Step {len(steps) + 1}: Take the square root of the variance",
            f"√{format_value(stats.variance)} = {format_value(stats.standard_deviation)}",
        )
    )
    return steps


def _explain_iqr(data: list[float], stats: Statistics) -> list[Step]:
    ordered = sorted(data)
    if stats.iqr is None:
        return [
            Step("Step 1: Sort the numbers", _join(ordered, ", ")),
            Step("Not enough data", "Quartiles need at least 4 numbers"),
        ]
    n = len(ordered)
    return [
        Step("Step 1: Sort the numbers", _join(ordered, ", ")),
        Step(
            "Step 2: Find the quartiles",
            f"Q1 is number {math.floor(n * 0.25) + 1}: {format_value(stats.q1)}, "
            f"Q3 is number {math.floor(n * 0.75) + 1}: {format_value(stats.q3)}",
        ),
        Step(
            "Step 3: Subtract Q1 from Q3",
            f"{format_value(stats.q3)} - {format_value(stats.q1)} = {format_value(stats.iqr)}",
        ),
    ]


def _explain_outliers(data: list[float], stats: Statistics) -> list[Step]:
    steps = _explain_iqr(data, stats)
    if stats.iqr is None:
        return steps
    steps.append(
        Step(
            "Step 4: Build the fences",
            f"{format_value(stats.q1)} - 1.5 × {format_value(stats.iqr)} = "
            f"{format_value(stats.lower_fence)}, "
            f"{format_value(stats.q3)} + 1.5 × {format_value(stats.iqr)} = "
            f"{format_value(stats.upper_fence)}",
        )
    )
    if stats.outliers:
        verdict = f"Outside the fences: {format_values(stats.outliers)}"
    else:
        verdict = "Every number is inside the fences: no outliers"
    steps.append(Step("Step 5: Check each number", verdict))
    return steps


_EXPLAINERS: dict[str, Callable[[list[float], Statistics], list[Step]]] = {
    "mean": _explain_mean,
    "median": _explain_median,
    "mode": _explain_mode,
    "range": _explain_range,
    "variance": _explain_variance,
    "standard_deviation": _explain_standard_deviation,
    "iqr": _explain_iqr,
    "outliers": _explain_outliers,
}


def explain(
    kind: str, data: Iterable[float], stats: Statistics | None = None
) -> list[Step]:
    """Return the calculation steps for the statistic *kind* over *data*."""
    try:
        explainer = _EXPLAINERS[kind]
    except KeyError:
        raise ValueError(
            f"cannot explain {kind!r}; expected one of {', '.join(EXPLAINABLE)}"
        ) from None
    values = [float(v) for v in data]
    if stats is None:
        stats = SampleAnalyzer(values).summary()
    if stats.is_empty:
        return [Step("No data yet", "Add some numbers to see how this is calculated")]
    return explainer(values, stats)
