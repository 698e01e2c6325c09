"""HostFacts: one entry point for every probe."""

import platform
from collections.abc import Callable
from typing import TypeVar

from loguru import logger

from envfetch.config import SUPPORTED_PLATFORMS
from envfetch.errors import UnsupportedPlatformError
from envfetch.models import (
    CPUInfo,
    DisplayInfo,
    GPUInfo,
    HostReport,
    MemoryReading,
    PowerState,
    ToolchainInfo,
)
from envfetch.probes import cpu, display, gpu, memory, power, system
from envfetch.probes.toolchain import ToolchainProbe

T = TypeVar("T")


def _unless_unsupported(probe: Callable[[], T], default: T) -> T:
    """Run *probe*, turning UnsupportedPlatformError into *default*."""
    try:
        return probe()
    except UnsupportedPlatformError as e:
        logger.debug(str(e))
        return default


class HostFacts:
    """Stateless accessors for every host fact.

    Each call queries the OS afresh; nothing is cached between calls.
    """

    # Toolchain

    def toolchain(self, command: str | None = None) -> ToolchainInfo:
        """Version and target triple, parsed from a single banner invocation."""
        return ToolchainProbe(command).info

    # Kernel / OS

    def kernel_name(self) -> str | None:
        return system.kernel_name()

    def kernel_version(self) -> str | None:
        return system.kernel_version()

    def hostname(self) -> str | None:
        return system.hostname()

    def uptime_seconds(self) -> float | None:
        return system.uptime_seconds()

    def os_display_name(self) -> str:
        return system.os_display_name()

    def os_version(self) -> str:
        return system.os_version()

    def os_version_short(self) -> str:
        return system.os_version_short()

    def architecture(self) -> str:
        return system.architecture()

    # Hardware

    def displays(self) -> list[DisplayInfo]:
        return display.enumerate_displays()

    def cpu_name(self) -> str | None:
        return cpu.cpu_name()

    def core_count(self) -> int | None:
        return cpu.core_count()

    def base_frequency_ghz(self) -> float | None:
        return cpu.base_frequency_ghz()

    def gpus(self) -> list[GPUInfo]:
        return gpu.enumerate_gpus()

    def total_physical_bytes(self) -> int:
        return memory.total_physical_bytes()

    def used_bytes(self) -> int | None:
        return memory.used_bytes()

    def memory_reading(self) -> MemoryReading:
        return memory.reading()

    def battery_level(self) -> float | None:
        return power.battery_level()

    def is_charging(self) -> bool | None:
        return power.is_charging()

    def power_state(self) -> PowerState:
        return power.power_state()

    def collect(self) -> HostReport:
        """Run every probe once, in report order.

        Hardware probes unsupported on this platform come back as None.
        """
        system_name = platform.system()
        if system_name not in SUPPORTED_PLATFORMS:
            logger.warning(
                f"{system_name or 'This platform'} is not supported "
                f"(supported: {', '.join(SUPPORTED_PLATFORMS)}); hardware facts will be missing"
            )

        return HostReport(
            toolchain=self.toolchain(),
            kernel_name=self.kernel_name(),
            kernel_version=self.kernel_version(),
            hostname=self.hostname(),
            uptime_seconds=self.uptime_seconds(),
            os_name=self.os_display_name(),
            os_version=self.os_version(),
            os_version_short=self.os_version_short(),
            architecture=self.architecture(),
            cpu=CPUInfo(
                name=_unless_unsupported(self.cpu_name, None),
                cores=_unless_unsupported(self.core_count, None),
                frequency_ghz=_unless_unsupported(self.base_frequency_ghz, None),
            ),
            gpus=_unless_unsupported(self.gpus, None),
            displays=_unless_unsupported(self.displays, None),
            memory=self.memory_reading(),
            power=_unless_unsupported(self.power_state, PowerState()),
        )


host_facts = HostFacts()
