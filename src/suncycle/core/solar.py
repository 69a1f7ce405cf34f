"""Sunrise / sunset calculation.

Closed-form approximation of the sun's position (the Almanac for Computers
method, as used by NOAA's sunrise equation). Accuracy is a few minutes against
high-precision almanac data. The functions here are pure: no clock, no I/O.
"""
from datetime import datetime, timedelta, timezone
from enum import Enum
from math import acos, asin, atan, cos, degrees, floor, radians, sin, tan
from typing import NamedTuple, Optional

from ..model.coordinate import Coordinate
from .cycle import Cycle
from .instants import as_utc

# Shared read-only calendar anchor for day-of-year extraction.
UTC_CALENDAR = timezone.utc


class SolarEvent(str, Enum):
  SUNRISE = "sunrise"
  SUNSET = "sunset"


class Zenith(float, Enum):
  """Zenith angle (degrees) at which an event counts as happening."""
  OFFICIAL = 90.83
  CIVIL = 96.0
  NAUTICAL = 102.0
  ASTRONOMICAL = 108.0

  @classmethod
  def parse(cls, value) -> "Zenith":
    if isinstance(value, Zenith):
      return value
    if isinstance(value, (int, float)):
      return cls(float(value))
    try:
      return cls[str(value).strip().upper()]
    except KeyError:
      raise ValueError(f"Unknown zenith {value!r}; expected one of {', '.join(z.name.lower() for z in cls)}") from None


class SolarSolution(NamedTuple):
  instant: Optional[datetime]
  cos_h: float


def day_of_year(instant: datetime) -> int:
  return as_utc(instant).timetuple().tm_yday


def normalise(value: float, maximum: float) -> float:
  # single wrap is enough for the magnitudes produced below
  if value < 0:
    value += maximum
  if value > maximum:
    value -= maximum
  return value


def quadrant(angle: float) -> float:
  return floor(angle / 90) * 90


def solve(event: SolarEvent, coordinate: Coordinate, instant: datetime,
          zenith: Zenith = Zenith.OFFICIAL) -> SolarSolution:
  """
  Compute the event for the UTC day containing `instant`.

  Returns the UTC instant (or None when the sun never crosses `zenith` that
  day) together with the cosine of the local hour angle, which tells polar
  day (< -1) apart from polar night (> 1).
  """
  utc = as_utc(instant)
  zenith = Zenith.parse(zenith)
  day = day_of_year(utc)

  lng_hour = coordinate.longitude / 15
  approx_hour = 6 if event == SolarEvent.SUNRISE else 18
  t = day + ((approx_hour - lng_hour) / 24)

  # mean anomaly
  m = (0.9856 * t) - 3.289

  # true longitude
  l = m + (1.916 * sin(radians(m))) + (0.020 * sin(2 * radians(m))) + 282.634
  l = normalise(l, 360)

  # right ascension, pulled into the same quadrant as l, in hours
  ra = degrees(atan(0.91764 * tan(radians(l))))
  ra = normalise(ra, 360)
  ra = ra + (quadrant(l) - quadrant(ra))
  ra = ra / 15

  # declination
  sin_dec = 0.39782 * sin(radians(l))
  cos_dec = cos(asin(sin_dec))

  # local hour angle
  lat = radians(coordinate.latitude)
  cos_h = (cos(radians(zenith.value)) - (sin_dec * sin(lat))) / (cos_dec * cos(lat))
  if cos_h > 1:
    # never rises
    return SolarSolution(None, cos_h)
  if cos_h < -1:
    # never sets
    return SolarSolution(None, cos_h)

  if event == SolarEvent.SUNRISE:
    h = (360 - degrees(acos(cos_h))) / 15
  else:
    h = degrees(acos(cos_h)) / 15

  # local mean time, then back to UTC
  local_t = h + ra - (0.06571 * t) - 6.622
  ut = normalise(local_t - lng_hour, 24)

  hour = floor(ut)
  minute = floor((ut - hour) * 60.0)
  second = (((ut - hour) * 60) - minute) * 60.0

  # the 6h/18h approximation can land the event on the neighbouring UTC day
  if lng_hour > 0 and ut > 12 and event == SolarEvent.SUNRISE:
    shift = -1
  elif lng_hour < 0 and ut < 12 and event == SolarEvent.SUNSET:
    shift = 1
  else:
    shift = 0

  midnight = datetime(utc.year, utc.month, utc.day, tzinfo=UTC_CALENDAR) + timedelta(days=shift)
  return SolarSolution(midnight + timedelta(hours=hour, minutes=minute, seconds=int(second)), cos_h)


def calculate(event: SolarEvent, coordinate: Coordinate, instant: datetime,
              zenith: Zenith = Zenith.OFFICIAL) -> Optional[datetime]:
  return solve(event, coordinate, instant, zenith).instant


def polar_cycle(solution: SolarSolution) -> Optional[Cycle]:
  """Which continuous state an absent event implies, if any."""
  if solution.instant is not None:
    return None
  return Cycle.NIGHT if solution.cos_h > 1 else Cycle.DAY
