"""Clocks that supply "now" to live sessions.

Live sessions never read the wall clock directly; they ask a clock. Tests and
simulations swap in a SimulationClock to move time deterministically.
"""
from datetime import datetime, timedelta, timezone
from threading import RLock
from typing import Optional
import time


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        """Get the current UTC time."""
        return datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return "SystemClock()"


class SimulationClock:
    """Virtual clock that can be set, advanced, paused, or run faster than real time."""

    def __init__(
        self,
        start_time: Optional[datetime] = None,
        speed: float = 1.0,
        paused: bool = True,
    ):
        """Initialize simulation clock.

        Args:
            start_time: Initial time (default: current UTC time). Naive values are UTC.
            speed: Time acceleration factor while running (1.0 = real-time)
            paused: Whether to start paused. Paused clocks only move via
                set_time() / advance(), which keeps tests deterministic.
        """
        if speed <= 0:
            raise ValueError("Speed must be positive")

        self._lock = RLock()
        self._start_time = self._utc(start_time or datetime.now(timezone.utc))
        self._wall_start = time.time()
        self._speed = speed
        self._paused = paused

    @staticmethod
    def _utc(value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def now(self) -> datetime:
        """Get current simulated time."""
        with self._lock:
            if self._paused:
                return self._start_time

            wall_elapsed = time.time() - self._wall_start
            return self._start_time + timedelta(seconds=wall_elapsed * self._speed)

    def set_time(self, new_time: datetime) -> None:
        """Jump to a specific time."""
        with self._lock:
            self._start_time = self._utc(new_time)
            self._wall_start = time.time()

    def advance(self, delta: timedelta) -> None:
        """Move time forward (or backward, for a negative delta)."""
        with self._lock:
            self.set_time(self.now() + delta)

    def set_speed(self, speed: float) -> None:
        """Change time acceleration factor.

        Args:
            speed: New speed multiplier (must be > 0)
        """
        if speed <= 0:
            raise ValueError("Speed must be positive")

        with self._lock:
            # Re-anchor so the change does not jump the clock
            self.set_time(self.now())
            self._speed = speed

    def pause(self) -> None:
        """Freeze the clock at its current time."""
        with self._lock:
            if not self._paused:
                self._start_time = self.now()
                self._paused = True

    def resume(self) -> None:
        """Let the clock run again from where it was paused."""
        with self._lock:
            if self._paused:
                self._wall_start = time.time()
                self._paused = False

    def is_paused(self) -> bool:
        """Check if clock is paused."""
        with self._lock:
            return self._paused

    def __repr__(self) -> str:
        status = "paused" if self._paused else f"{self._speed}x"
        return f"SimulationClock({self.now().isoformat()}, {status})"
