"""Data records returned by the system info endpoint."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

UNKNOWN = "Unknown"


@dataclass
class CpuReading:
    """Latest CPU measurement. ``usage`` is rewritten by the sampler."""

    model: str = UNKNOWN
    usage: float = 0.0


@dataclass(frozen=True)
class MemorySnapshot:
    total: int
    used: int
    free: int


@dataclass(frozen=True)
class DiskSnapshot:
    name: str
    total_space: int
    available_space: int


@dataclass(frozen=True)
class NetworkSnapshot:
    name: str
    received: int
    transmitted: int


@dataclass(frozen=True)
class SystemSnapshot:
    cpu_info: CpuReading
    num_cores: int
    uptime: str
    hostname: str
    memory: MemorySnapshot
    disks: List[DiskSnapshot] = field(default_factory=list)
    network: List[NetworkSnapshot] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
