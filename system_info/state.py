"""Shared state between the CPU sampler and request handlers."""
from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator

import psutil

from .metrics import detect_cpu_model
from .models import CpuReading


class ReadWriteLock:
    """
    Multiple-reader / single-writer lock.

    Readers share the lock and never block each other. A writer waits for
    active readers to drain and holds the lock exclusively. Pending writers
    stop new readers from entering so a busy endpoint cannot starve the
    sampler.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class CpuReadingCell:
    """Holds the most recently published CPU reading."""

    def __init__(self, model: str) -> None:
        self._lock = ReadWriteLock()
        self._reading = CpuReading(model=model, usage=0.0)
        self._samples = 0

    @property
    def samples(self) -> int:
        """Number of completed publishes."""
        with self._lock.read_locked():
            return self._samples

    def read(self) -> CpuReading:
        """Return a private copy of the current reading."""
        with self._lock.read_locked():
            return replace(self._reading)

    def publish(self, usage: float) -> None:
        with self._lock.write_locked():
            self._reading.usage = usage
            self._samples += 1


class SystemBaseline:
    """Long-lived host facts read by every request: CPU model and core count."""

    def __init__(self, cpu_model: str, num_cores: int) -> None:
        self._lock = ReadWriteLock()
        self._cpu_model = cpu_model
        self._num_cores = num_cores

    @classmethod
    def detect(cls) -> "SystemBaseline":
        baseline = cls(cpu_model=detect_cpu_model(), num_cores=0)
        baseline.refresh()
        return baseline

    @property
    def cpu_model(self) -> str:
        with self._lock.read_locked():
            return self._cpu_model

    @property
    def num_cores(self) -> int:
        with self._lock.read_locked():
            return self._num_cores

    def refresh(self) -> None:
        """Re-read the logical core count."""
        try:
            count = psutil.cpu_count(logical=True) or 0
        except (psutil.Error, OSError):
            count = 0
        with self._lock.write_locked():
            self._num_cores = count


@dataclass(frozen=True)
class MonitorState:
    """State built once at startup and handed to the sampler and the API."""

    baseline: SystemBaseline
    cpu: CpuReadingCell

    @classmethod
    def create(cls) -> "MonitorState":
        baseline = SystemBaseline.detect()
        return cls(baseline=baseline, cpu=CpuReadingCell(baseline.cpu_model))
