"""Owned, versioned dataset feeding the statistics engine.

The store is the only place where values are validated: each accepted value is
clamped into the configured range and rounded to an integer, and the dataset
never grows past ``max_points``.  Statistics are recomputed from a snapshot of
the values after every mutation.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Iterator
from typing import Optional

from .analyzer.base import SampleAnalyzer
from .config import StatlabConfig
from .errors import DatasetFullError, InvalidValueError
from .stats import Statistics

logger = logging.getLogger(__name__)

Observer = Callable[[Statistics], None]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return int(math.floor(value + 0.5))


class DatasetStore:
    """Mutable dataset with clamp/round/cap policy and change observers."""

    def __init__(
        self,
        values: Iterable[float] = (),
        *,
        config: Optional[StatlabConfig] = None,
    ) -> None:
        self.config = config or StatlabConfig()
        self._values: list[int] = []
        self._version = 0
        self._cached: tuple[int, Statistics] | None = None
        self._observers: list[Observer] = []
        values = list(values)
        if values:
            self.replace_all(values)

    # ------------------------------------------------------------------ #
    # snapshot
    # ------------------------------------------------------------------ #
    @property
    def values(self) -> tuple[int, ...]:
        return tuple(self._values)

    @property
    def version(self) -> int:
        """Counter incremented on every mutation."""
        return self._version

    @property
    def is_full(self) -> bool:
        return len(self._values) >= self.config.max_points

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    @property
    def statistics(self) -> Statistics:
        """Statistics of the current snapshot, memoized per version."""
        if self._cached is None or self._cached[0] != self._version:
            self._cached = (self._version, SampleAnalyzer(self._values).summary())
        return self._cached[1]

    # ------------------------------------------------------------------ #
    # observers
    # ------------------------------------------------------------------ #
    def subscribe(self, callback: Observer) -> None:
        """Call *callback* with fresh statistics after every mutation."""
        self._observers.append(callback)

    def unsubscribe(self, callback: Observer) -> None:
        self._observers.remove(callback)

    def _changed(self) -> None:
        self._version += 1
        if not self._observers:
            return
        stats = self.statistics
        for callback in list(self._observers):
            callback(stats)

    # ------------------------------------------------------------------ #
    # mutations
    # ------------------------------------------------------------------ #
    def constrain(self, value: float) -> int:
        """Round *value* and clamp it into the configured range.

        Fractional bounds are narrowed to the integers inside them, so the
        stored value is always an integer within [min_value, max_value].
        """
        low = math.ceil(self.config.min_value)
        high = math.floor(self.config.max_value)
        if math.isinf(value):
            return high if value > 0 else low
        return max(low, min(high, round_half_up(value)))

    def add(self, value: float) -> int:
        """Append *value* after constraining it; return the stored value."""
        if math.isnan(value):
            raise InvalidValueError("Please enter a valid number")
        if self.is_full:
            raise DatasetFullError(
                f"Maximum {self.config.max_points} data points allowed"
            )
        stored = self.constrain(value)
        if stored != value:
            logger.debug("value %r stored as %d", value, stored)
        self._values.append(stored)
        self._changed()
        return stored

    def remove_at(self, index: int) -> int:
        """Remove and return the value at *index*; negative indices are rejected."""
        if not 0 <= index < len(self._values):
            raise IndexError(f"no value at index {index}")
        removed = self._values.pop(index)
        self._changed()
        return removed

    def clear(self) -> None:
        self._values.clear()
        self._changed()

    def replace_all(self, values: Iterable[float]) -> tuple[int, ...]:
        """Replace the whole dataset; NaN is dropped and the rest constrained."""
        incoming = list(values)
        kept = [self.constrain(v) for v in incoming if not math.isnan(v)]
        if len(kept) < len(incoming):
            logger.warning("dropped %d non-numeric value(s)", len(incoming) - len(kept))
        limit = self.config.max_points
        if len(kept) > limit:
            logger.warning(
                "dataset truncated to %d of %d values", limit, len(kept)
            )
            kept = kept[:limit]
        self._values = kept
        self._changed()
        return self.values
