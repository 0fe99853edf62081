import math

import pytest

from core.time_utils import parse_time_to_seconds, seconds_to_display


@pytest.mark.parametrize(
    "raw, seconds",
    [
        ("1:05,32", 65.32),
        ("35.40", 35.4),
        ("1:02:03.5", 3723.5),
        (" 58,90 s", 58.9),
        ("2.10.45", 2.1),
    ],
)
def test_parse_time_to_seconds(raw, seconds):
    assert parse_time_to_seconds(raw) == pytest.approx(seconds)


@pytest.mark.parametrize("raw", ["", "DNS", "---", None, ":30", "1:"])
def test_unparseable_time_is_none(raw):
    assert parse_time_to_seconds(raw) is None


def test_seconds_to_display():
    assert seconds_to_display(75.4) == "1:15.40"
    assert seconds_to_display(5) == "0:05.00"
    assert seconds_to_display(0) == "0:00.00"
    assert seconds_to_display(math.nan) == ""
    assert seconds_to_display(None) == ""


@pytest.mark.parametrize("seconds", [0, 35.4, 75.0, 3661.2])
def test_display_round_trip(seconds):
    assert parse_time_to_seconds(seconds_to_display(seconds)) == pytest.approx(seconds, abs=0.01)
