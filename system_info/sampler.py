"""Background CPU sampler."""
from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional

import psutil

from .state import CpuReadingCell

logger = logging.getLogger(__name__)

# CPU usage is a delta over a time window; shorter windows give meaningless readings.
MINIMUM_CPU_UPDATE_INTERVAL = 0.2


def measure_per_core() -> List[float]:
    """Per-core usage since the previous call."""
    return psutil.cpu_percent(interval=None, percpu=True)


class CpuSampler:
    """
    Measures total CPU usage on a fixed cadence and publishes it to a cell.

    Runs in a daemon thread. Each cycle waits for the sampling interval,
    measures all logical cores, sums them and publishes the total. A failed
    measurement leaves the previous value in place and the next cycle retries.
    """

    def __init__(
        self,
        cell: CpuReadingCell,
        measure: Callable[[], List[float]] = measure_per_core,
        interval: float = MINIMUM_CPU_UPDATE_INTERVAL,
    ) -> None:
        self._cell = cell
        self._measure = measure
        self._interval = interval
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return

        # Prime the counters; the first call has no window to compare against.
        self._sample()
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, daemon=True, name="CpuSampler")
        self._thread.start()
        logger.info("CPU sampler started (interval %.2fs)", self._interval)

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                # Keep the handle so start() cannot launch a second writer.
                logger.warning("CPU sampler did not stop within %ss", timeout)
                return
            self._thread = None
            logger.info("CPU sampler stopped")

    def _run(self) -> None:
        while not self._stop_event.wait(timeout=self._interval):
            try:
                total = self._sample()
                if total is not None:
                    self._cell.publish(total)
            except Exception:  # pylint: disable=broad-except
                logger.exception("CPU sampling cycle failed")

    def _sample(self) -> Optional[float]:
        try:
            per_core = self._measure()
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("CPU measurement failed: %s", exc)
            return None

        total = float(sum(per_core))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Per-core CPU usage: %s", ", ".join(f"{usage:.1f}%" for usage in per_core))
            logger.debug("Total CPU usage: %.1f", total)
        return total
