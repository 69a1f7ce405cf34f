"""REST API exposing sunrise / sunset queries."""

from datetime import datetime
from typing import Any, Callable, Optional
from fastapi import FastAPI, HTTPException, Query
import logging

from ..core.solar import Zenith
from ..model.coordinate import InvalidCoordinate
from ..runtime.clock import SystemClock
from ..session import create_session

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


class SunRestAPI:
    """HTTP front end over create_session()."""

    def __init__(self, clock: Optional[Any] = None):
        """Initialize REST API.

        Args:
            clock: Clock used for queries without an explicit instant
                (default: SystemClock)
        """
        self.clock = clock or SystemClock()
        self.app = FastAPI(
            title="suncycle API",
            description="Sunrise, sunset and twilight times for a coordinate",
            version=API_VERSION,
        )

        # Setup routes
        self._setup_routes()

    def _setup_routes(self) -> None:
        """Setup all API routes."""

        @self.app.get("/api/")
        async def api_discovery():
            """API discovery endpoint."""
            return {
                "message": "API running.",
                "version": API_VERSION,
                "zeniths": {z.name.lower(): z.value for z in Zenith},
            }

        @self.app.get("/health")
        async def health():
            """Liveness check."""
            return {"status": "ok", "time": self.clock.now().isoformat()}

        @self.app.get("/api/sun")
        async def get_sun(
            latitude: float,
            longitude: float,
            at: Optional[datetime] = Query(None, description="Instant (ISO 8601); defaults to now"),
            zenith: str = "official",
            tz: Optional[str] = Query(None, description="IANA zone, UTC offset, or seconds east of UTC"),
        ):
            """Sunrise / sunset / twilight and day-night state."""
            session = self._build(lambda: create_session(
                (latitude, longitude),
                instant=at or self.clock.now(),
                zenith=zenith,
                offset_resolver=tz,
            ))
            return session.to_dict()

    def _build(self, factory: Callable):
        try:
            return factory()
        except InvalidCoordinate as e:
            logger.info(f"Rejected coordinate: {e}")
            raise HTTPException(status_code=400, detail=str(e))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
