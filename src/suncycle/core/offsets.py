"""UTC offset resolution for presenting results in a local zone.

A resolver maps an instant to seconds east of UTC. Zone-backed resolvers look
the offset up at that instant, so DST is applied per event rather than once
per day.
"""
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .cycle import SECONDS_PER_DAY
from .instants import as_utc

UtcOffsetResolver = Callable[[datetime], int]

_OFFSET_RE = re.compile(r"^(?:UTC|GMT)?([+-])(\d{1,2})(?::?(\d{2}))?$", re.IGNORECASE)


@dataclass(frozen=True)
class FixedOffset:
  seconds: int

  def __post_init__(self):
    if abs(self.seconds) >= SECONDS_PER_DAY:
      raise ValueError(f"UTC offset out of range: {self.seconds} seconds")

  def __call__(self, instant: datetime) -> int:
    return self.seconds


class ZoneOffset:
  def __init__(self, name: str):
    try:
      self.zone = ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
      raise ValueError(f"Unknown time zone {name!r}") from e
    self.name = name

  def __call__(self, instant: datetime) -> int:
    return int(as_utc(instant).astimezone(self.zone).utcoffset().total_seconds())

  def __repr__(self) -> str:
    return f"ZoneOffset({self.name!r})"


def resolver_for(value: Union[None, int, str, UtcOffsetResolver]) -> Optional[UtcOffsetResolver]:
  """
  Build a resolver from loose input: None, seconds east of UTC, "UTC",
  "+05:30" / "-0500", or an IANA zone name. Callables pass through.
  """
  if value is None or callable(value):
    return value
  if isinstance(value, int):
    return FixedOffset(value)
  text = str(value).strip()
  if text.upper() in ("UTC", "Z", "GMT"):
    return FixedOffset(0)
  if text.isdigit() or (re.fullmatch(r"[+-]\d+", text) and len(text) > 5):
    return FixedOffset(int(text))
  m = _OFFSET_RE.match(text)
  if m:
    sign, hours, minutes = m.groups()
    if int(minutes or 0) >= 60:
      raise ValueError(f"Malformed UTC offset {text!r}")
    seconds = int(hours) * 3600 + int(minutes or 0) * 60
    return FixedOffset(-seconds if sign == "-" else seconds)
  return ZoneOffset(text)


def to_local(instant: Optional[datetime], resolver: Optional[UtcOffsetResolver]) -> Optional[datetime]:
  """Convert a final UTC instant; local calendar fields come from the resolved offset."""
  if instant is None or resolver is None:
    return instant
  utc = as_utc(instant)
  return utc.astimezone(timezone(timedelta(seconds=resolver(utc))))
