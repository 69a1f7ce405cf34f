from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from ..model.coordinate import Coordinate
from .cycle import Cycle
from .solar import SolarEvent, Zenith, polar_cycle, solve


@dataclass(frozen=True)
class Daylight:
  coordinate: Coordinate
  zenith: Zenith = Zenith.OFFICIAL

  def _solutions(self, d: date):
    noon = datetime(d.year, d.month, d.day, 12, tzinfo=timezone.utc)
    return (solve(SolarEvent.SUNRISE, self.coordinate, noon, self.zenith),
            solve(SolarEvent.SUNSET, self.coordinate, noon, self.zenith))

  def sunrise_sunset(self, d: date) -> tuple[Optional[datetime], Optional[datetime]]:
    rise, set_ = self._solutions(d)
    return rise.instant, set_.instant

  def polar(self, d: date) -> Optional[Cycle]:
    """DAY / NIGHT when the sun stays up / down all UTC day, else None."""
    rise, set_ = self._solutions(d)
    return polar_cycle(rise) or polar_cycle(set_)

  def day_length(self, d: date) -> timedelta:
    rise, set_ = self._solutions(d)
    if rise.instant is None or set_.instant is None:
      state = polar_cycle(rise) or polar_cycle(set_)
      return timedelta(days=1) if state is Cycle.DAY else timedelta(0)
    # sunset may carry over UTC midnight relative to sunrise
    return timedelta(seconds=(set_.instant - rise.instant).total_seconds() % 86400)
