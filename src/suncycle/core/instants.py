"""Helpers for optional instants.

Every comparison involving a possibly-absent instant goes through this module.
Null policy: an absent instant sorts before any present instant.
"""
from datetime import datetime, timezone
from typing import Optional, Union

InstantLike = Union[datetime, int, float]


def as_utc(value: InstantLike) -> datetime:
  """Normalise to an aware UTC datetime. Naive values are read as UTC."""
  if isinstance(value, (int, float)):
    return datetime.fromtimestamp(value, tz=timezone.utc)
  if value.tzinfo is None:
    return value.replace(tzinfo=timezone.utc)
  return value.astimezone(timezone.utc)


def is_before(a: Optional[datetime], b: Optional[datetime]) -> bool:
  if a is None:
    return b is not None
  if b is None:
    return False
  return a < b


def epoch_seconds(value: Optional[datetime]) -> Optional[int]:
  return None if value is None else int(value.timestamp())
