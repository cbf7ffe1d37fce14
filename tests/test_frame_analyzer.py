import numpy as np
import pandas as pd
import pytest

from statlab import FrameAnalyzer


def make_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "class": ["a", "a", "b", "b", "b"],
            "score": [1.0, 2.0, 3.0, 4.0, 5.0],
            "height": [10.0, np.nan, 30.0, 30.0, 50.0],
        }
    )


def test_frame_summary_total() -> None:
    out = FrameAnalyzer(make_frame()).summary()

    assert list(out["column"]) == ["score", "height"]
    score = out.set_index("column").loc["score"]
    assert score["count"] == 5
    assert score["mean"] == pytest.approx(3.0)
    height = out.set_index("column").loc["height"]
    assert height["count"] == 4
    assert height["mode"] == (30.0,)


def test_frame_summary_group() -> None:
    out = FrameAnalyzer(make_frame(), columns="score").summary(group="class")

    assert list(out.columns[:2]) == ["class", "column"]
    assert list(out["class"]) == ["a", "b"]
    assert list(out["median"]) == [1.5, 4.0]


def test_frame_unknown_names() -> None:
    with pytest.raises(KeyError):
        FrameAnalyzer(make_frame(), columns="missing")
    with pytest.raises(KeyError):
        FrameAnalyzer(make_frame()).summary(group="missing")


def test_frame_datasets_skip_text_and_nan() -> None:
    out = dict(FrameAnalyzer(make_frame()).datasets())

    assert list(out) == ["score", "height"]
    assert list(out["height"]) == [10.0, 30.0, 30.0, 50.0]
