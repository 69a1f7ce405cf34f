from datetime import datetime, timedelta, timezone

import pytest

from suncycle.core.offsets import FixedOffset, ZoneOffset, resolver_for, to_local

MAY = datetime(2019, 5, 3, 12, tzinfo=timezone.utc)
JAN = datetime(2019, 1, 3, 12, tzinfo=timezone.utc)


@pytest.mark.parametrize("value,seconds", [
  ("UTC", 0),
  ("+0000", 0),
  ("-05:00", -18000),
  ("+0530", 19800),
  ("UTC+2", 7200),
  ("-18000", -18000),
  ("3600", 3600),
  ("0", 0),
  (3600, 3600),
])
def test_resolver_for_offsets(value, seconds):
  assert resolver_for(value)(MAY) == seconds


def test_zone_offset_follows_dst():
  chicago = resolver_for("America/Chicago")
  assert isinstance(chicago, ZoneOffset)
  assert chicago(MAY) == -5 * 3600
  assert chicago(JAN) == -6 * 3600


def test_unknown_zone():
  with pytest.raises(ValueError):
    resolver_for("Not/AZone")


def test_none_and_callables_pass_through():
  assert resolver_for(None) is None
  fn = FixedOffset(60)
  assert resolver_for(fn) is fn


def test_to_local_keeps_instant():
  local = to_local(MAY, FixedOffset(-18000))
  assert local == MAY
  assert local.hour == 7
  assert local.utcoffset() == timedelta(hours=-5)
  assert to_local(None, FixedOffset(0)) is None
  assert to_local(MAY, None) is MAY


@pytest.mark.parametrize("value", ["+3600", "+24:00", "-0575", "90000", 86400, -90000])
def test_out_of_range_offsets_rejected_up_front(value):
  with pytest.raises(ValueError):
    resolver_for(value)
