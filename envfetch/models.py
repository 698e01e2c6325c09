"""Host fact value objects.

Every value is a frozen snapshot built fresh by a probe call.
"""

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "CPUInfo",
    "DisplayInfo",
    "GPUInfo",
    "HostReport",
    "MemoryReading",
    "PowerState",
    "ToolchainInfo",
]

UINT16_MAX = 0xFFFF


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True)


class DisplayInfo(_Snapshot):
    """An attached screen, in OS enumeration order."""

    width: int = Field(ge=0, le=UINT16_MAX)
    height: int = Field(ge=0, le=UINT16_MAX)
    refresh_rate: int | None = Field(default=None, gt=0, le=UINT16_MAX)
    index: int = Field(ge=0)


class GPUInfo(_Snapshot):
    """A graphics device found in the PCI registry.

    ``integrated`` is a name-based heuristic, see ``probes.gpu.is_integrated``.
    """

    name: str
    integrated: bool


class MemoryReading(_Snapshot):
    """Point-in-time physical memory usage."""

    used_bytes: int | None = None  # None when the VM statistics query failed
    total_bytes: int

    @property
    def used_within_total(self) -> bool | None:
        if self.used_bytes is None:
            return None
        return self.used_bytes <= self.total_bytes


class PowerState(_Snapshot):
    """Battery state of the first power source."""

    level: float | None = Field(default=None, ge=0.0, le=1.0)
    charging: bool | None = None


class ToolchainInfo(_Snapshot):
    """Fields parsed from a toolchain ``--version`` banner."""

    version: str | None = None
    target_triple: str | None = None


class CPUInfo(_Snapshot):
    """Processor identity."""

    name: str | None = None
    cores: int | None = None
    frequency_ghz: float | None = None  # None where hw.cpufrequency is not exposed


class HostReport(_Snapshot):
    """Everything one invocation knows about the host."""

    toolchain: ToolchainInfo
    kernel_name: str | None = None
    kernel_version: str | None = None
    hostname: str | None = None
    uptime_seconds: float | None = None
    os_name: str
    os_version: str
    os_version_short: str
    architecture: str
    cpu: CPUInfo
    gpus: list[GPUInfo] | None = None
    displays: list[DisplayInfo] | None = None
    memory: MemoryReading
    power: PowerState
