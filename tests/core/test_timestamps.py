"""UTC normalisation."""

from datetime import datetime, timedelta, timezone

from pm_api.core.timestamps import as_utc, utcnow


def test_naive_is_treated_as_utc():
    assert as_utc(datetime(2026, 1, 1, 12)) == datetime(2026, 1, 1, 12, tzinfo=timezone.utc)


def test_offset_is_converted():
    local = datetime(2026, 1, 1, 12, tzinfo=timezone(timedelta(hours=-5)))
    assert as_utc(local).hour == 17
    assert as_utc(local).tzinfo == timezone.utc


def test_utcnow_is_aware():
    assert utcnow().tzinfo == timezone.utc
