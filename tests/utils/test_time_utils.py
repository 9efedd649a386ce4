from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from trex.utils.time_utils import has_zone_marker, now_millis, parse_utc_timestamp


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2024-01-01T00:00:00", datetime(2024, 1, 1, tzinfo=timezone.utc)),
        ("2024-01-01T00:00:00Z", datetime(2024, 1, 1, tzinfo=timezone.utc)),
        ("2024-01-01T09:00:00+09:00", datetime(2024, 1, 1, tzinfo=timezone.utc)),
        ("2024-01-01T00:00:00.5", datetime(2024, 1, 1, 0, 0, 0, 500000, tzinfo=timezone.utc)),
        ("2024-01-01T00:00:00.12345678Z", datetime(2024, 1, 1, 0, 0, 0, 123456, tzinfo=timezone.utc)),
    ],
)
def test_parse_utc_timestamp(value, expected) -> None:
    parsed = parse_utc_timestamp(value)

    assert parsed == expected
    assert parsed.utcoffset() == timedelta(0)


def test_has_zone_marker() -> None:
    assert has_zone_marker("2024-01-01T00:00:00Z")
    assert has_zone_marker("2024-01-01T00:00:00-05:00")
    assert not has_zone_marker("2024-01-01T00:00:00")
    assert not has_zone_marker("2024-01-01")


def test_now_millis_tracks_wall_clock() -> None:
    before = int(datetime.now(timezone.utc).timestamp() * 1000)

    assert now_millis() >= before
