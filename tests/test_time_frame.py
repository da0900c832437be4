from __future__ import annotations

from datetime import timedelta

import pytest

from stock_dash.domain import TimeFrame
from stock_dash.utils.errors import EmptyTimeFrameError, InvalidTimeFrameError, ParseTimeFrameError


@pytest.mark.parametrize("time_frame", list(TimeFrame))
def test_parse_display_code_round_trip(time_frame: TimeFrame) -> None:
    assert TimeFrame.parse(time_frame.display_code) is time_frame
    assert TimeFrame.parse(str(time_frame)) is time_frame


@pytest.mark.parametrize("time_frame", list(TimeFrame))
def test_parse_provider_code(time_frame: TimeFrame) -> None:
    assert TimeFrame.parse(time_frame.interval) is time_frame


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5d", TimeFrame.FIVE_DAYS),
        ("1m", TimeFrame.ONE_MONTH),
        ("1MO", TimeFrame.ONE_MONTH),
        ("ytd", TimeFrame.YEAR_TO_DATE),
        ("Max", TimeFrame.MAX),
        (" 10Y ", TimeFrame.TEN_YEARS),
    ],
)
def test_parse_ignores_case(text: str, expected: TimeFrame) -> None:
    assert TimeFrame.parse(text) is expected


def test_parse_empty_fails() -> None:
    with pytest.raises(EmptyTimeFrameError):
        TimeFrame.parse("")


def test_parse_invalid_fails() -> None:
    with pytest.raises(InvalidTimeFrameError) as excinfo:
        TimeFrame.parse("xyz")

    assert excinfo.value.text == "xyz"
    assert isinstance(excinfo.value, ParseTimeFrameError)
    assert isinstance(excinfo.value, ValueError)


def test_display_codes_are_unique() -> None:
    codes = [tf.display_code for tf in TimeFrame]

    assert len(set(codes)) == len(codes)
    assert codes == ["5D", "1M", "3M", "6M", "YTD", "1Y", "2Y", "5Y", "10Y", "MAX"]


def test_open_ended_frames_have_no_duration() -> None:
    assert TimeFrame.YEAR_TO_DATE.duration is None
    assert TimeFrame.MAX.duration is None


def test_fixed_durations() -> None:
    assert TimeFrame.FIVE_DAYS.duration == timedelta(days=5)
    assert TimeFrame.ONE_MONTH.duration == timedelta(days=30)
    assert TimeFrame.SIX_MONTHS.duration == timedelta(days=180)
    assert TimeFrame.ONE_YEAR.duration == timedelta(days=360)
    assert TimeFrame.TEN_YEARS.duration == timedelta(days=3600)


def test_intervals() -> None:
    assert [tf.interval for tf in TimeFrame] == [
        "5d", "1mo", "3mo", "6mo", "ytd", "1y", "2y", "5y", "10y", "max",
    ]
