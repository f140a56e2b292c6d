"""Helpers for collecting host system metrics."""
from __future__ import annotations

import logging
import platform
import socket
import subprocess
import time
from pathlib import Path
from typing import List, Optional

import psutil

from .models import UNKNOWN, DiskSnapshot, MemorySnapshot, NetworkSnapshot

logger = logging.getLogger(__name__)

CPUINFO_PATH = Path("/proc/cpuinfo")


def _read_linux_cpu_model() -> Optional[str]:
    if not CPUINFO_PATH.exists():
        return None
    for line in CPUINFO_PATH.read_text(encoding="utf-8", errors="ignore").splitlines():
        key, sep, value = line.partition(":")
        if sep and key.strip() in ("model name", "Hardware", "Processor"):
            return value.strip() or None
    return None


def detect_cpu_model() -> str:
    """Brand string of the first processor, or ``"Unknown"``."""
    system_name = platform.system()
    try:
        if system_name == "Darwin":
            result = subprocess.run(
                ["/usr/sbin/sysctl", "-n", "machdep.cpu.brand_string"],
                capture_output=True,
                text=True,
                check=True,
            )
            model = result.stdout.strip() or None
        elif system_name == "Linux":
            model = _read_linux_cpu_model()
        else:
            model = None
    except (OSError, subprocess.SubprocessError) as exc:
        logger.warning("CPU model detection failed: %s", exc)
        model = None
    return model or platform.processor() or UNKNOWN


def read_hostname() -> str:
    try:
        return socket.gethostname() or UNKNOWN
    except OSError:
        return UNKNOWN


def read_uptime_seconds() -> int:
    try:
        return int(max(0, time.time() - psutil.boot_time()))
    except (psutil.Error, OSError) as exc:
        logger.warning("Reading boot time failed: %s", exc)
        return 0


def collect_memory() -> MemorySnapshot:
    try:
        memory = psutil.virtual_memory()
    except (psutil.Error, OSError) as exc:
        logger.warning("Reading memory failed: %s", exc)
        return MemorySnapshot(total=0, used=0, free=0)
    total = int(memory.total)
    free = int(memory.available)
    return MemorySnapshot(total=total, used=max(0, total - free), free=free)


def collect_disks() -> List[DiskSnapshot]:
    """Enumerate mounted volumes; volumes that cannot be queried are skipped."""
    try:
        partitions = psutil.disk_partitions(all=False)
    except (psutil.Error, OSError) as exc:
        logger.warning("Listing disk partitions failed: %s", exc)
        return []

    disks: List[DiskSnapshot] = []
    for partition in partitions:
        try:
            usage = psutil.disk_usage(partition.mountpoint)
        except (psutil.Error, OSError):
            logger.debug("Skipping unreadable mount %s", partition.mountpoint)
            continue
        disks.append(
            DiskSnapshot(
                name=partition.device or partition.mountpoint,
                total_space=int(usage.total),
                available_space=int(usage.free),
            )
        )
    return disks


def collect_network() -> List[NetworkSnapshot]:
    """Cumulative byte counters for every network interface."""
    try:
        counters = psutil.net_io_counters(pernic=True)
    except (psutil.Error, OSError) as exc:
        logger.warning("Reading network counters failed: %s", exc)
        return []
    return [
        NetworkSnapshot(name=name, received=int(stats.bytes_recv), transmitted=int(stats.bytes_sent))
        for name, stats in counters.items()
    ]
