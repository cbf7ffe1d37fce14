"""Small goals the learner reaches by shaping the dataset."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import List, Optional

from .stats import Statistics


@dataclass(frozen=True)
class Challenge:
    id: str
    title: str
    description: str
    target: float | str
    kind: str
    difficulty: str
    check: Callable[[Statistics], bool] = field(compare=False, repr=False)

    def is_complete(self, stats: Statistics) -> bool:
        return self.check(stats)


CHALLENGES: tuple[Challenge, ...] = (
    Challenge(
        id="mean-5",
        title="Balance at 5",
        description="Make the balance plank rest at exactly 5",
        target=5,
        kind="mean",
        difficulty="easy",
        check=lambda s: s.mean is not None and abs(s.mean - 5) < 0.1,
    ),
    Challenge(
        id="median-7",
        title="Middle at 7",
        description="Create a dataset where the middle candy is at 7",
        target=7,
        kind="median",
        difficulty="easy",
        check=lambda s: s.median == 7,
    ),
    Challenge(
        id="mode-exists",
        title="Find the Crown",
        description="Create a mode by having the same number appear twice",
        target="Any",
        kind="mode",
        difficulty="medium",
        check=lambda s: len(s.mode) > 0,
    ),
    Challenge(
        id="range-10",
        title="Stretch the Rope",
        description="Make the range exactly 10 units",
        target=10,
        kind="range",
        difficulty="medium",
        check=lambda s: s.range == 10,
    ),
)


@dataclass
class ChallengeTracker:
    """Walks through :data:`CHALLENGES` and records the completed ones."""

    challenges: tuple[Challenge, ...] = CHALLENGES
    min_points: int = 3
    index: int = 0
    completed: List[str] = field(default_factory=list)

    def current(self, stats: Statistics) -> Optional[Challenge]:
        """The active challenge, or None until the dataset is large enough."""
        if stats.count < self.min_points or not self.challenges:
            return None
        return self.challenges[self.index]

    def update(self, stats: Statistics) -> Optional[Challenge]:
        """Mark the active challenge completed if *stats* satisfies it."""
        challenge = self.current(stats)
        if challenge is None or not challenge.is_complete(stats):
            return None
        if challenge.id not in self.completed:
            self.completed.append(challenge.id)
        return challenge

    def advance(self) -> None:
        """Move to the next challenge, wrapping around after the last."""
        if self.challenges:
            self.index = (self.index + 1) % len(self.challenges)
