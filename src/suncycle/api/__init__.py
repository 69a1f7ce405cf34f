"""HTTP API for suncycle."""

from .rest import SunRestAPI

__all__ = [
    "SunRestAPI",
]
