from statlab import compute
from statlab.challenges import CHALLENGES, ChallengeTracker


def test_challenge_checks() -> None:
    by_id = {c.id: c for c in CHALLENGES}
    assert by_id["mean-5"].is_complete(compute([4, 5, 6]))
    assert not by_id["mean-5"].is_complete(compute([4, 5, 7]))
    assert by_id["median-7"].is_complete(compute([1, 7, 9]))
    assert by_id["mode-exists"].is_complete(compute([2, 2, 3]))
    assert by_id["range-10"].is_complete(compute([0, 4, 10]))
    assert not by_id["range-10"].is_complete(compute([]))


def test_tracker_waits_for_enough_data() -> None:
    tracker = ChallengeTracker()
    assert tracker.current(compute([5, 5])) is None
    assert tracker.current(compute([5, 5, 5])).id == "mean-5"


def test_tracker_completes_and_advances() -> None:
    tracker = ChallengeTracker()
    stats = compute([4, 5, 6])

    assert tracker.update(stats).id == "mean-5"
    assert tracker.update(stats).id == "mean-5"
    assert tracker.completed == ["mean-5"]

    tracker.advance()
    assert tracker.update(stats) is None
    assert tracker.update(compute([6, 7, 8])).id == "median-7"

    for _ in range(len(CHALLENGES) - 1):
        tracker.advance()
    assert tracker.current(stats).id == "mean-5"
