"""CPU identity probe (sysctl on macOS, psutil for the core count)."""

import psutil
from loguru import logger

from envfetch.probes._shell import require_supported_platform, sysctl, sysctl_int

HZ_PER_GHZ = 1_000_000_000


def cpu_name() -> str | None:
    """Marketing name, e.g. ``Apple M2 Pro`` or ``Intel(R) Core(TM) i7-9750H``."""
    require_supported_platform("cpu_name")
    return sysctl("machdep.cpu.brand_string")


def core_count() -> int | None:
    """Logical core count."""
    try:
        count = psutil.cpu_count(logical=True)
    except psutil.Error as e:
        logger.debug(f"psutil.cpu_count failed: {e}")
        count = None
    if count:
        return count
    require_supported_platform("core_count")
    return sysctl_int("hw.ncpu")


def base_frequency_ghz() -> float | None:
    """Nominal frequency in GHz.

    Apple Silicon does not expose hw.cpufrequency, so None there is expected.
    """
    require_supported_platform("base_frequency_ghz")
    hz = sysctl_int("hw.cpufrequency")
    if not hz or hz <= 0:
        return None
    return hz / HZ_PER_GHZ
