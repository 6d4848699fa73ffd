"""Board lifecycle: a ticking clock plus a one-shot weather fetch."""
from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional

from .. import clock
from ..cities import DEFAULT_CITIES
from ..display import BoardCell, build_cells
from ..entities import City, WeatherReading
from ..scheduler import PeriodicTask
from .weather import WeatherFetcher


class WorldClockBoard:
    """Owns the time and weather maps for a fixed set of cities.

    Each map has a single writer: the periodic clock task for ``times`` and the
    one-shot fetch for ``weather``. Readers always get a copy.
    """

    TICK_SECONDS = 1.0

    def __init__(
        self,
        fetcher: WeatherFetcher,
        cities: Iterable[City] = DEFAULT_CITIES,
        *,
        tick_seconds: Optional[float] = None,
        now_func: Optional[Callable[[], datetime]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.fetcher = fetcher
        self.cities = tuple(cities)
        self.tick_seconds = self.TICK_SECONDS if tick_seconds is None else tick_seconds
        if self.tick_seconds <= 0:
            raise ValueError("tick_seconds must be positive")
        self._now_func = now_func
        self._log = logger or logging.getLogger(self.__class__.__name__)
        self._lock = threading.Lock()
        self._times: Dict[str, str] = {}
        self._weather: Dict[str, WeatherReading] = {}
        self._weather_done = threading.Event()
        self._fetch_lock = threading.Lock()
        self._ticker: Optional[PeriodicTask] = None
        self._fetch_thread: Optional[threading.Thread] = None

    # Lifecycle ----------------------------------------------------------
    @property
    def mounted(self) -> bool:
        return self._ticker is not None and self._ticker.running

    def mount(self) -> None:
        if self._ticker is not None:
            raise RuntimeError("board already mounted")
        self.refresh_times()
        self._ticker = PeriodicTask(self.tick_seconds, self.refresh_times, name="world-clock-tick")
        self._ticker.start()
        self._fetch_thread = threading.Thread(target=self.load_weather, name="world-clock-weather", daemon=True)
        self._fetch_thread.start()
        self._log.info("Board mounted with %d cities", len(self.cities))

    def unmount(self) -> None:
        # An in-flight weather fetch is left to finish on its own.
        if self._ticker is None or not self._ticker.stop():
            return
        self._log.info("Board unmounted")

    # Refresh cycles -----------------------------------------------------
    def refresh_times(self) -> None:
        now = self._now_func() if self._now_func else None
        times = clock.snapshot(self.cities, now)
        with self._lock:
            self._times = times

    def load_weather(self) -> None:
        """Run the weather cycle. Later calls return without fetching again."""
        with self._fetch_lock:
            if self._weather_done.is_set():
                return
            results = self.fetcher.fetch_all(self.cities)
            with self._lock:
                self._weather = results
            self._weather_done.set()

    def wait_for_weather(self, timeout: Optional[float] = None) -> bool:
        return self._weather_done.wait(timeout)

    # Readers ------------------------------------------------------------
    @property
    def times(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._times)

    @property
    def weather(self) -> Dict[str, WeatherReading]:
        with self._lock:
            return dict(self._weather)

    def cells(self) -> List[BoardCell]:
        with self._lock:
            times, weather = self._times, self._weather
        return build_cells(self.cities, times, weather)


__all__ = ["WorldClockBoard"]
