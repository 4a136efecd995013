"""Periodic execution of duplicate scans."""

from __future__ import annotations

import threading
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

log = getLogger(__name__)


class ScanScheduler:
    """Run a scan after an initial delay and then on a fixed interval.

    An interval of ``0`` minutes disables the periodic runs; the initial run still
    happens. Runs never overlap: the next wait starts only once a run has returned.
    A failing run is logged and the schedule continues.
    """

    def __init__(
        self,
        run: Callable[[], object],
        *,
        interval_minutes: float,
        initial_delay_seconds: float,
    ) -> None:
        if interval_minutes < 0:
            raise ValueError("interval_minutes must be non-negative")
        if initial_delay_seconds < 0:
            raise ValueError("initial_delay_seconds must be non-negative")
        self._run = run
        self.interval_seconds = interval_minutes * 60
        self.initial_delay_seconds = initial_delay_seconds
        self._stop = threading.Event()
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None

    @property
    def periodic(self) -> bool:
        return self.interval_seconds > 0

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            raise RuntimeError("Scheduler already started")
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._loop, name="dupefinder-scheduler", daemon=True
        )
        self._thread.start()
        if self.periodic:
            log.info(
                "Scheduled duplicate detection every %s minutes (first run in %ss)",
                self.interval_seconds / 60,
                self.initial_delay_seconds,
            )
        else:
            log.info("Periodic duplicate detection disabled; running once")

    def stop(self, *, timeout: float | None = None) -> None:
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the scheduler thread exits; return whether it did."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def run_once(self) -> bool:
        """Run the scan now, returning ``False`` if it raised or another run is active."""
        if not self._lock.acquire(blocking=False):
            log.warning("Duplicate detection already running; skipping this tick")
            return False
        try:
            self._run()
        except Exception:
            log.exception("Error during duplicate detection")
            return False
        finally:
            self._lock.release()
        return True

    def _loop(self) -> None:
        if self._stop.wait(self.initial_delay_seconds):
            return
        self.run_once()
        if not self.periodic:
            return
        while not self._stop.wait(self.interval_seconds):
            self.run_once()
