"""Turn typed entries and uploaded text files into numbers.

Tokens are read the way a lenient number parser reads them: the leading
decimal literal counts (``"12kg"`` reads as 12) and tokens without one are
discarded.  Bulk import drops out-of-range values silently; a single typed
entry is rejected with a message instead.
"""

from __future__ import annotations

import logging
import math
import re
from pathlib import Path

from .errors import InvalidValueError, NoNumbersFoundError, UnsupportedFileError

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = frozenset({".csv", ".txt"})

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_SEPARATORS = re.compile(r"[,;\s]+")


def _leading_number(token: str) -> float | None:
    match = _LEADING_NUMBER.match(token.strip())
    if match is None:
        return None
    return float(match.group())


def _format_bound(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def parse_numbers(text: str, low: float = -1000, high: float = 1000) -> list[float]:
    """Extract every in-range number from free-form *text*, in order."""
    numbers: list[float] = []
    skipped = 0
    for line in text.splitlines():
        if not line.strip():
            continue
        for token in _SEPARATORS.split(line.strip()):
            num = _leading_number(token)
            if num is None or not math.isfinite(num) or not low <= num <= high:
                skipped += 1
                continue
            numbers.append(num)
    if skipped:
        logger.debug("discarded %d token(s) while parsing", skipped)
    return numbers


def load_file(path: str | Path, low: float = -1000, high: float = 1000) -> list[float]:
    """Read a ``.csv`` or ``.txt`` file and return the numbers it contains."""
    path = Path(path)
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise UnsupportedFileError(f"{path.name}: only .csv and .txt files are supported")
    numbers = parse_numbers(path.read_text(encoding="utf-8"), low, high)
    if not numbers:
        raise NoNumbersFoundError(
            f"{path.name}: no valid numbers found; "
            "put one number per line or separate them with commas"
        )
    logger.info("loaded %d value(s) from %s", len(numbers), path)
    return numbers


def parse_entry(text: str, low: float = -1000, high: float = 1000) -> float:
    """Validate a single typed value."""
    value = _leading_number(text)
    if value is None or not math.isfinite(value):
        raise InvalidValueError("Please enter a valid number")
    if not low <= value <= high:
        raise InvalidValueError(
            f"Value must be between {_format_bound(low)} and {_format_bound(high)}"
        )
    return value
