"""High level entry points for the descriptive statistics package.

The package exposes a single :func:`compute` convenience function mapping a
sequence of numbers to an immutable :class:`Statistics` record, together with
the collaborators a teaching front end needs: a validated dataset store, bulk
import, sample generators, explanations and challenges.
"""

from __future__ import annotations

from typing import Iterable

from .analyzer.base import SampleAnalyzer
from .analyzer.frame import FrameAnalyzer
from .cli import main
from .config import StatlabConfig, load_config
from .dataset import DatasetStore
from .stats import Statistics

__all__ = [
    "Statistics",
    "compute",
    "main",
    "SampleAnalyzer",
    "FrameAnalyzer",
    "DatasetStore",
    "StatlabConfig",
    "load_config",
]


def compute(data: Iterable[float]) -> Statistics:
    """Compute descriptive statistics for *data*.

    Parameters
    ----------
    data:
        Any finite sequence of numbers, possibly empty.  It is neither
        mutated nor required to be sorted.

    Returns
    -------
    Statistics
        The full record.  An empty input gives ``count == 0`` and every other
        field ``None`` or empty; the function never raises on finite input.
    """

    return SampleAnalyzer(data).summary()
