"""Assembles one system snapshot per request."""
from __future__ import annotations

from .metrics import collect_disks, collect_memory, collect_network, read_hostname, read_uptime_seconds
from .models import SystemSnapshot
from .state import MonitorState


def format_uptime(seconds: int) -> str:
    """Render seconds since boot as ``DD:HH:MM:SS``."""
    seconds = int(max(0, seconds))
    days, remainder = divmod(seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{days:02}:{hours:02}:{minutes:02}:{seconds:02}"


def collect_system_snapshot(state: MonitorState) -> SystemSnapshot:
    """Merge the cached CPU reading with freshly queried host data."""
    cpu_info = state.cpu.read()
    num_cores = state.baseline.num_cores

    return SystemSnapshot(
        cpu_info=cpu_info,
        num_cores=num_cores,
        uptime=format_uptime(read_uptime_seconds()),
        hostname=read_hostname(),
        memory=collect_memory(),
        disks=collect_disks(),
        network=collect_network(),
    )
