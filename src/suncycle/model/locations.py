from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..core.offsets import resolver_for
from ..core.solar import Zenith
from .coordinate import Coordinate


class LocationConfig(BaseModel):
  name: str
  latitude: float = Field(ge=-90.0, le=90.0)
  longitude: float = Field(ge=-180.0, le=180.0)
  tz: Optional[str] = None

  @field_validator("tz")
  @classmethod
  def check_tz(cls, v: Optional[str]) -> Optional[str]:
    resolver_for(v)
    return v

  @property
  def coordinate(self) -> Coordinate:
    return Coordinate.of(self.latitude, self.longitude)


class OutputConfig(BaseModel):
  path: str = "out/"
  format: str = "jsonl"

  @field_validator("format")
  @classmethod
  def check_format(cls, v: str) -> str:
    if v not in ("jsonl", "parquet"):
      raise ValueError("format must be 'jsonl' or 'parquet'")
    return v


class AlmanacConfig(BaseModel):
  year: int = 2025
  zenith: Zenith = Zenith.OFFICIAL
  locations: List[LocationConfig]
  output: OutputConfig = OutputConfig()

  @field_validator("zenith", mode="before")
  @classmethod
  def zenith_by_name(cls, v):
    return Zenith.parse(v)


def load_config(path) -> AlmanacConfig:
  cfg = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
  return AlmanacConfig(**cfg)
