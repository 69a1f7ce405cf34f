"""Session facade tying a coordinate and an instant source to the solar calculator."""

from datetime import datetime
from threading import RLock
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union
import logging

from .core.cycle import Cycle, classify
from .core.instants import InstantLike, as_utc, epoch_seconds, is_before
from .core.offsets import UtcOffsetResolver, resolver_for, to_local
from .core.solar import SolarEvent, SolarSolution, Zenith, polar_cycle, solve
from .model.coordinate import Coordinate, InvalidCoordinate
from .runtime.clock import SystemClock

logger = logging.getLogger(__name__)

CoordinateLike = Union[Coordinate, Tuple[float, float], Mapping[str, float]]


class Session:
    """Sunrise / sunset / day-night answers for one location.

    A session either pins an instant (fixed mode) or follows a clock (live
    mode). Fixed sessions are pure: each (event, zenith) pair is computed once,
    absent results included. Live sessions recompute a pair whenever its cached
    instant is absent or already in the past relative to the clock.

    Returned instants are aware datetimes in UTC, or in the local offset given
    by the session's offset resolver.
    """

    def __init__(
        self,
        coordinate: Coordinate,
        instant: Optional[InstantLike] = None,
        zenith: Union[Zenith, str, float] = Zenith.OFFICIAL,
        offset_resolver: Union[None, int, str, UtcOffsetResolver] = None,
        clock: Optional[Any] = None,
    ):
        """Initialize a session. Prefer create_session(), which validates input.

        Args:
            coordinate: A validated Coordinate
            instant: Fixed instant to compute for; None tracks the clock
            zenith: Default zenith profile for sunrise()/sunset()/cycle()
            offset_resolver: Local presentation of results (see core.offsets)
            clock: Object with now() used in live mode (default: SystemClock)
        """
        if not isinstance(coordinate, Coordinate):
            raise TypeError(f"Expected Coordinate, got {type(coordinate).__name__}")

        self._coordinate = coordinate
        self._instant = None if instant is None else as_utc(instant)
        self._zenith = Zenith.parse(zenith)
        self._resolver = resolver_for(offset_resolver)
        self._clock = clock or SystemClock()
        self._lock = RLock()
        self._cache: Dict[Tuple[SolarEvent, Zenith], SolarSolution] = {}

    @property
    def coordinate(self) -> Coordinate:
        return self._coordinate

    @property
    def instant(self) -> Optional[datetime]:
        """The fixed instant, or None for a live session."""
        return self._instant

    @property
    def zenith(self) -> Zenith:
        return self._zenith

    @property
    def is_live(self) -> bool:
        return self._instant is None

    def now(self) -> datetime:
        """The instant queries refer to: the fixed instant, or the clock's current time."""
        if self._instant is not None:
            return self._instant
        return as_utc(self._clock.now())

    def _solution(
        self,
        event: SolarEvent,
        zenith: Zenith,
        now: Optional[datetime] = None,
    ) -> SolarSolution:
        """Get (and memoize) the raw solution for one event/zenith pair.

        Args:
            event: Sunrise or sunset
            zenith: Zenith profile
            now: Clock reading to use in live mode, so that several reads
                made for one answer agree with each other
        """
        key = (event, zenith)
        with self._lock:
            cached = self._cache.get(key)
            if self._instant is not None:
                if cached is None:
                    cached = solve(event, self._coordinate, self._instant, zenith)
                    self._cache[key] = cached
                return cached

            now = now or self.now()
            # absent sorts before present, so a missing event is always stale
            if cached is not None and not is_before(cached.instant, now):
                return cached

            if cached is not None:
                logger.debug(f"Recomputing {event.value}/{zenith.name.lower()} at {now.isoformat()}")
            solution = solve(event, self._coordinate, now, zenith)
            self._cache[key] = solution
            return solution

    def event(self, event: Union[SolarEvent, str], zenith: Union[None, Zenith, str, float] = None) -> Optional[datetime]:
        """Get one event instant, or None if it does not occur that UTC day."""
        event = SolarEvent(event)
        zenith = self._zenith if zenith is None else Zenith.parse(zenith)
        return to_local(self._solution(event, zenith).instant, self._resolver)

    def sunrise(self, zenith: Union[None, Zenith, str, float] = None) -> Optional[datetime]:
        return self.event(SolarEvent.SUNRISE, zenith)

    def sunset(self, zenith: Union[None, Zenith, str, float] = None) -> Optional[datetime]:
        return self.event(SolarEvent.SUNSET, zenith)

    def twilight(self, zenith: Union[Zenith, str, float]) -> Tuple[Optional[datetime], Optional[datetime]]:
        """Get the (morning, evening) pair for a twilight zenith, e.g. civil."""
        with self._lock:
            now = self.now()
            zenith = Zenith.parse(zenith)
            rise = self._solution(SolarEvent.SUNRISE, zenith, now)
            set_ = self._solution(SolarEvent.SUNSET, zenith, now)
        return to_local(rise.instant, self._resolver), to_local(set_.instant, self._resolver)

    def cycle(self, zenith: Union[None, Zenith, str, float] = None) -> Cycle:
        """Classify the session's instant as day or night.

        When an event is missing the sun either never set (continuous day) or
        never rose (continuous night) at this zenith; that condition decides.
        """
        zenith = self._zenith if zenith is None else Zenith.parse(zenith)
        with self._lock:
            return self._cycle(zenith, self.now())

    def _cycle(self, zenith: Zenith, now: datetime) -> Cycle:
        with self._lock:
            rise = self._solution(SolarEvent.SUNRISE, zenith, now)
            set_ = self._solution(SolarEvent.SUNSET, zenith, now)
        absent = polar_cycle(rise) or polar_cycle(set_) or Cycle.DAY
        return classify(rise.instant, set_.instant, now, absent=absent)

    def is_daytime(self) -> bool:
        return self.cycle() is Cycle.DAY

    def is_nighttime(self) -> bool:
        return self.cycle() is Cycle.NIGHT

    def to_dict(self, zeniths: Optional[Iterable[Zenith]] = None) -> dict:
        """Convert to a JSON-friendly summary."""
        zeniths = list(zeniths) if zeniths is not None else list(Zenith)
        with self._lock:
            now = self.now()
            events = {}
            for z in zeniths:
                rise = to_local(self._solution(SolarEvent.SUNRISE, z, now).instant, self._resolver)
                set_ = to_local(self._solution(SolarEvent.SUNSET, z, now).instant, self._resolver)
                events[z.name.lower()] = {
                    "sunrise": rise.isoformat() if rise else None,
                    "sunset": set_.isoformat() if set_ else None,
                    "sunrise_epoch": epoch_seconds(rise),
                    "sunset_epoch": epoch_seconds(set_),
                }
            cycle = self._cycle(self._zenith, now)
        return {
            "latitude": self._coordinate.latitude,
            "longitude": self._coordinate.longitude,
            "instant": to_local(now, self._resolver).isoformat(),
            "live": self.is_live,
            "zenith": self._zenith.name.lower(),
            "cycle": cycle.value,
            "is_daytime": cycle is Cycle.DAY,
            "events": events,
        }

    def __repr__(self) -> str:
        mode = "live" if self.is_live else self._instant.isoformat()
        return f"Session(({self._coordinate.latitude}, {self._coordinate.longitude}), {mode}, {self._zenith.name.lower()})"


def _coerce_coordinate(coordinate: CoordinateLike) -> Coordinate:
    if isinstance(coordinate, Coordinate):
        return Coordinate.of(coordinate.latitude, coordinate.longitude)
    if isinstance(coordinate, Mapping):
        try:
            return Coordinate.of(coordinate["latitude"], coordinate["longitude"])
        except KeyError as e:
            raise InvalidCoordinate(f"missing {e.args[0]}") from e
    try:
        latitude, longitude = coordinate
    except (TypeError, ValueError) as e:
        raise InvalidCoordinate(f"expected (latitude, longitude), got {coordinate!r}") from e
    return Coordinate.of(latitude, longitude)


def create_session(
    coordinate: CoordinateLike,
    instant: Optional[InstantLike] = None,
    zenith: Union[Zenith, str, float] = Zenith.OFFICIAL,
    offset_resolver: Union[None, int, str, UtcOffsetResolver] = None,
    clock: Optional[Any] = None,
) -> Session:
    """Validated construction of a Session.

    Raises:
        InvalidCoordinate: latitude outside [-90, 90] or longitude outside [-180, 180]
    """
    return Session(
        _coerce_coordinate(coordinate),
        instant=instant,
        zenith=zenith,
        offset_resolver=offset_resolver,
        clock=clock,
    )
