from datetime import datetime, timedelta, timezone

from suncycle.core.instants import as_utc, epoch_seconds, is_before

A = datetime(2017, 2, 9, 7, tzinfo=timezone.utc)
B = datetime(2017, 2, 9, 17, tzinfo=timezone.utc)


def test_absent_sorts_first():
  assert is_before(None, A)
  assert not is_before(A, None)
  assert not is_before(None, None)
  assert not is_before(A, A)
  assert is_before(A, B)


def test_as_utc():
  assert as_utc(1486598400) == datetime(2017, 2, 9, tzinfo=timezone.utc)
  assert as_utc(datetime(2017, 2, 9)).tzinfo is timezone.utc
  shifted = as_utc(datetime(2017, 2, 9, 9, tzinfo=timezone(timedelta(hours=9))))
  assert shifted == datetime(2017, 2, 9, 0, tzinfo=timezone.utc)
  assert shifted.utcoffset() == timedelta(0)


def test_epoch_seconds():
  assert epoch_seconds(None) is None
  assert epoch_seconds(A) == 1486623600
