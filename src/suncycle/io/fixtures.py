import json
import re
from pathlib import Path
from typing import List

from .schema import CityFixture

# "+0000" -> "+00:00"; older parsers only accept the colon form
_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")


def _iso(value: str) -> str:
  value = value.strip()
  if value.endswith("Z"):
    return value[:-1] + "+00:00"
  return _COMPACT_OFFSET.sub(r"\1:\2", value)


def load_city_fixtures(path) -> List[CityFixture]:
  """
  Read a JSON list of {city, latitude, longitude, sunrise, sunset} records.
  Timestamps must carry an explicit UTC offset.
  """
  records = json.loads(Path(path).read_text(encoding="utf-8"))
  out = []
  for r in records:
    fixture = CityFixture(**{**r, "sunrise": _iso(r["sunrise"]), "sunset": _iso(r["sunset"])})
    if fixture.sunrise.tzinfo is None or fixture.sunset.tzinfo is None:
      raise ValueError(f"{fixture.city}: timestamps need an explicit UTC offset")
    out.append(fixture)
  return out
