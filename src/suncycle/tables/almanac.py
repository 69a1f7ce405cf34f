from datetime import date, timedelta
from typing import Dict, Iterator, List

import numpy as np

from ..core.daylight import Daylight
from ..core.instants import epoch_seconds
from ..core.offsets import resolver_for, to_local
from ..core.solar import Zenith
from ..model.locations import LocationConfig


def utc_days(year: int) -> Iterator[date]:
  d = date(year, 1, 1)
  while d.year == year:
    yield d
    d += timedelta(days=1)


def almanac_rows(location: LocationConfig, year: int, zenith: Zenith = Zenith.OFFICIAL) -> List[dict]:
  """
  One row per UTC day of `year`: event instants (epoch + local ISO), day
  length and the polar state when an event is missing.
  """
  daylight = Daylight(location.coordinate, zenith)
  resolver = resolver_for(location.tz)
  rows = []
  for d in utc_days(year):
    sunrise, sunset = daylight.sunrise_sunset(d)
    polar = daylight.polar(d)
    rise_local = to_local(sunrise, resolver)
    set_local = to_local(sunset, resolver)
    rows.append({
      "location": location.name,
      "date": d.isoformat(),
      "latitude": location.latitude,
      "longitude": location.longitude,
      "zenith": zenith.name.lower(),
      "sunrise_epoch": epoch_seconds(sunrise),
      "sunset_epoch": epoch_seconds(sunset),
      "sunrise_local": rise_local.isoformat() if rise_local else None,
      "sunset_local": set_local.isoformat() if set_local else None,
      "day_length_s": int(daylight.day_length(d).total_seconds()),
      "polar": polar.value if polar else None,
    })
  return rows


def day_length_stats(rows: List[dict]) -> Dict[str, float]:
  if not rows:
    return {"days": 0}
  lengths = np.array([r["day_length_s"] for r in rows], dtype=float)
  polar = np.array([r["polar"] or "" for r in rows])
  longest = int(np.argmax(lengths))
  shortest = int(np.argmin(lengths))
  return {
    "days": int(lengths.size),
    "mean_day_length_h": float(lengths.mean() / 3600.0),
    "min_day_length_h": float(lengths[shortest] / 3600.0),
    "max_day_length_h": float(lengths[longest] / 3600.0),
    "shortest_day": rows[shortest]["date"],
    "longest_day": rows[longest]["date"],
    "polar_day_count": int(np.sum(polar == "day")),
    "polar_night_count": int(np.sum(polar == "night")),
  }
