import math

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class InvalidCoordinate(ValueError):
  """Latitude or longitude outside the valid geographic range."""


class Coordinate(BaseModel):
  model_config = ConfigDict(frozen=True)

  latitude: float = Field(ge=-90.0, le=90.0)
  longitude: float = Field(ge=-180.0, le=180.0)

  @field_validator("latitude", "longitude")
  @classmethod
  def check_finite(cls, v: float) -> float:
    if not math.isfinite(v):
      raise ValueError("must be finite")
    return v

  @classmethod
  def of(cls, latitude: float, longitude: float) -> "Coordinate":
    """
    Validating factory. Never yields a partially valid coordinate.
    """
    try:
      return cls(latitude=latitude, longitude=longitude)
    except ValidationError as e:
      raise InvalidCoordinate(f"invalid coordinate ({latitude}, {longitude}): {e.error_count()} error(s)") from e
