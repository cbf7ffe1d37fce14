"""Data structures for summarising descriptive statistics."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class Statistics:
    """Immutable container for the descriptive statistics of one dataset.

    Every optional field is ``None`` when it cannot be computed yet (no data,
    or fewer than four values for the quartile family).
    """

    count: int
    sum: Optional[float] = None
    mean: Optional[float] = None
    median: Optional[float] = None
    mode: tuple[float, ...] = ()
    min: Optional[float] = None
    max: Optional[float] = None
    range: Optional[float] = None
    variance: Optional[float] = None
    standard_deviation: Optional[float] = None
    q1: Optional[float] = None
    q3: Optional[float] = None
    iqr: Optional[float] = None
    outliers: tuple[float, ...] = ()

    @classmethod
    def empty(cls) -> Statistics:
        """Return the record describing an empty dataset."""

        return cls(count=0)

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    @property
    def lower_fence(self) -> float | None:
        """Values strictly below this bound are outliers."""

        if self.q1 is None or self.iqr is None:
            return None
        return self.q1 - 1.5 * self.iqr

    @property
    def upper_fence(self) -> float | None:
        """Values strictly above this bound are outliers."""

        if self.q3 is None or self.iqr is None:
            return None
        return self.q3 + 1.5 * self.iqr

    def as_dict(self) -> dict[str, float | tuple[float, ...] | None]:
        """Return statistics as a plain dictionary."""

        return asdict(self)
