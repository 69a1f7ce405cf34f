from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class AlmanacRow(BaseModel):
  location: str
  date: str
  latitude: float
  longitude: float
  zenith: str
  sunrise_epoch: Optional[int]
  sunset_epoch: Optional[int]
  sunrise_local: Optional[str]
  sunset_local: Optional[str]
  day_length_s: int
  polar: Optional[str]


class CityFixture(BaseModel):
  city: str
  latitude: float = Field(ge=-90.0, le=90.0)
  longitude: float = Field(ge=-180.0, le=180.0)
  sunrise: datetime
  sunset: datetime
