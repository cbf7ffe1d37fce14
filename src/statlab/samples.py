"""Generated sample datasets for exploring the statistics."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

SAMPLE_KINDS = ("normal", "skewed", "bimodal", "uniform", "random", "falling")


def _round(x: np.ndarray) -> list[int]:
    # halves round up, matching DatasetStore
    return [int(v) for v in np.floor(x + 0.5)]


def _rng(rng: np.random.Generator | int | None) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def normal(rng: np.random.Generator) -> list[int]:
    """20 values bunched around 50, kept within [10, 90]."""
    u = rng.random(20)
    return _round(np.clip(50 + (u - 0.5) * 30, 10, 90))


def skewed(rng: np.random.Generator) -> list[int]:
    """15 right-skewed values in [20, 80]."""
    return _round(rng.random(15) ** 2 * 60 + 20)


def bimodal(rng: np.random.Generator) -> list[int]:
    """Two clusters of 8 values, around 30 and around 70."""
    low = 30 + (rng.random(8) - 0.5) * 8
    high = 70 + (rng.random(8) - 0.5) * 8
    return _round(np.concatenate([low, high]))


def uniform(rng: np.random.Generator) -> list[int]:
    """20 values spread evenly over [20, 80]."""
    return _round(rng.random(20) * 60 + 20)


_GENERATORS: dict[str, Callable[[np.random.Generator], list[int]]] = {
    "normal": normal,
    "skewed": skewed,
    "bimodal": bimodal,
    "uniform": uniform,
    "random": lambda rng: random_values(10, rng),
    "falling": lambda rng: falling_values(10, rng),
}


def generate(kind: str, rng: np.random.Generator | int | None = None) -> list[int]:
    """Return a sample dataset of the given *kind*.

    Parameters
    ----------
    kind:
        One of ``"normal"``, ``"skewed"``, ``"bimodal"``, ``"uniform"``,
        ``"random"`` (:func:`random_values`) or ``"falling"``
        (:func:`falling_values` with 10 values).
    rng:
        A numpy ``Generator`` or a seed.  ``None`` draws fresh entropy.
    """

    try:
        fn = _GENERATORS[kind]
    except KeyError:
        raise ValueError(
            f"unknown sample kind {kind!r}; expected one of {', '.join(SAMPLE_KINDS)}"
        ) from None
    return fn(_rng(rng))


def random_values(count: int = 10, rng: np.random.Generator | int | None = None) -> list[int]:
    """*count* values in [20, 80]."""
    return _round(_rng(rng).random(count) * 60 + 20)


def falling_values(count: int, rng: np.random.Generator | int | None = None) -> list[int]:
    """Values for the falling-numbers demo.

    ``count - 1`` values in [10, 90] that are guaranteed to repeat at least
    one value (so a mode exists), followed by a single large outlier in
    [200, 1200].
    """

    if count < 3:
        raise ValueError("falling_values needs at least 3 values")
    gen = _rng(rng)
    numbers = _round(gen.random(count - 1) * 80 + 10)
    if len(set(numbers)) == len(numbers):
        source, target = gen.choice(len(numbers), size=2, replace=False)
        numbers[int(target)] = numbers[int(source)]
    numbers.append(int(np.floor(gen.random() * 1000 + 200 + 0.5)))
    return numbers
