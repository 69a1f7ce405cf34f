from datetime import datetime
from enum import Enum
from typing import Optional

from .instants import as_utc

SECONDS_PER_DAY = 86400


class Cycle(str, Enum):
  DAY = "day"
  NIGHT = "night"


def classify(sunrise: Optional[datetime], sunset: Optional[datetime], query: datetime,
             absent: Cycle = Cycle.DAY) -> Cycle:
  """
  Day iff the query falls in [sunrise, sunset) when all three are read as
  offsets into a day that starts at sunrise's time of day. A sunset that
  lands after UTC midnight therefore still orders after sunrise.

  absent: returned when either event is missing (polar day or night). Callers
  that know which polar condition applies pass it explicitly.
  """
  if sunrise is None or sunset is None:
    return absent
  origin = as_utc(sunrise).timestamp()
  end_of_day = (as_utc(sunset).timestamp() - origin) % SECONDS_PER_DAY
  current = (as_utc(query).timestamp() - origin) % SECONDS_PER_DAY
  return Cycle.DAY if current < end_of_day else Cycle.NIGHT
