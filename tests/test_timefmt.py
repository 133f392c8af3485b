"""Tests for wire timestamp helpers."""

from datetime import datetime

import pytest

from streamfeed.codec import timefmt
from streamfeed.codec.timefmt import format_time, parse_time, system_clock


class TestParseTime:
    """Tests for parse_time()."""

    def test_microseconds(self):
        assert parse_time("2017-03-14T09:26:53.589793") == datetime(2017, 3, 14, 9, 26, 53, 589793)

    def test_short_fraction(self):
        assert parse_time("2017-03-14T09:26:53.5") == datetime(2017, 3, 14, 9, 26, 53, 500000)

    def test_nanoseconds_are_truncated(self):
        assert parse_time("2017-03-14T09:26:53.123456789") == datetime(2017, 3, 14, 9, 26, 53, 123456)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "2017-03-14",
            "2017-03-14 09:26:53.589793",
            "2017-03-14T09:26:53.589793Z",
            "2017-13-14T09:26:53.589793",
            "2017-03-14T09:26:53.",
            "2017-03-14T09:26:53.589793\n",
        ],
    )
    def test_rejects(self, text):
        assert parse_time(text) is None


def test_format_time():
    assert format_time(datetime(2017, 3, 14, 9, 26, 53, 589793)) == "2017-03-14T09:26:53.589793"


def test_system_clock_is_naive():
    assert system_clock().tzinfo is None


def test_system_clock_local(monkeypatch):
    monkeypatch.setattr(timefmt.settings, "use_utc_clock", False)
    assert system_clock().tzinfo is None
