"""envfetch - snapshot of the local host's hardware and software facts."""

from envfetch.errors import ShellError, UnsupportedPlatformError
from envfetch.facts import HostFacts
from envfetch.models import (
    CPUInfo,
    DisplayInfo,
    GPUInfo,
    HostReport,
    MemoryReading,
    PowerState,
    ToolchainInfo,
)

__version__ = "0.1.0"

__all__ = [
    "CPUInfo",
    "DisplayInfo",
    "GPUInfo",
    "HostFacts",
    "HostReport",
    "MemoryReading",
    "PowerState",
    "ShellError",
    "ToolchainInfo",
    "UnsupportedPlatformError",
    "__version__",
]
