from datetime import datetime, timedelta, timezone

import pytest

from suncycle.runtime.clock import SimulationClock, SystemClock

START = datetime(2017, 2, 9, 5, tzinfo=timezone.utc)


def test_paused_clock_only_moves_when_told():
  clock = SimulationClock(start_time=START)
  assert clock.is_paused()
  assert clock.now() == START
  clock.advance(timedelta(hours=2))
  assert clock.now() == START + timedelta(hours=2)
  clock.set_time(datetime(2017, 2, 10))
  assert clock.now() == datetime(2017, 2, 10, tzinfo=timezone.utc)


def test_running_clock_moves_forward():
  clock = SimulationClock(start_time=START, speed=1000.0, paused=False)
  assert clock.now() >= START
  clock.pause()
  frozen = clock.now()
  assert clock.now() == frozen


def test_speed_must_be_positive():
  with pytest.raises(ValueError):
    SimulationClock(speed=0)
  with pytest.raises(ValueError):
    SimulationClock().set_speed(-1)


def test_system_clock_is_utc():
  assert SystemClock().now().utcoffset() == timedelta(0)
