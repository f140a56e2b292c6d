"""Shared fixtures and helpers for the system info tests."""

import time

import pytest

from system_info.state import CpuReadingCell, MonitorState, SystemBaseline


def wait_for(predicate, timeout: float = 5.0, step: float = 0.01) -> bool:
    """Poll ``predicate`` until it returns True or the timeout expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(step)
    return predicate()


@pytest.fixture
def baseline() -> SystemBaseline:
    return SystemBaseline(cpu_model="Test CPU @ 3.00GHz", num_cores=4)


@pytest.fixture
def monitor_state(baseline: SystemBaseline) -> MonitorState:
    return MonitorState(baseline=baseline, cpu=CpuReadingCell(baseline.cpu_model))
