"""Kernel and operating system probes.

None of these raise: absent data is None, or "unknown" for the fields the
report always shows.
"""

import os
import platform
import re
import socket
import time

import psutil
from loguru import logger

from envfetch.errors import ShellError
from envfetch.probes._shell import run_command

UNKNOWN = "unknown"

OS_DISPLAY_NAMES = {"Darwin": "macOS"}

# Closed set of architecture tags, keyed by lowercased platform.machine()
ARCHITECTURES = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "x64": "x86_64",
    "arm64": "arm64",
    "aarch64": "arm64",
}

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def _clean(value: str) -> str | None:
    cleaned = _CONTROL_CHARS.sub("", value).strip()
    return cleaned or None


def kernel_name() -> str | None:
    """Kernel name, e.g. ``Darwin``."""
    try:
        return _clean(os.uname().sysname)
    except (AttributeError, OSError) as e:
        logger.debug(f"uname unavailable: {e}")
        return None


def kernel_version() -> str | None:
    """Kernel release, e.g. ``23.2.0``."""
    try:
        return _clean(os.uname().release)
    except (AttributeError, OSError) as e:
        logger.debug(f"uname unavailable: {e}")
        return None


def hostname() -> str | None:
    """User-facing computer name, falling back to the network host name."""
    if platform.system() == "Darwin":
        try:
            name = _clean(run_command(["scutil", "--get", "ComputerName"]))
            if name:
                return name
        except ShellError as e:
            logger.debug(f"scutil failed, falling back to gethostname: {e}")
    try:
        return _clean(socket.gethostname())
    except OSError as e:
        logger.debug(f"gethostname failed: {e}")
        return None


def uptime_seconds() -> float | None:
    """Seconds since boot."""
    try:
        return max(0.0, time.time() - psutil.boot_time())
    except (psutil.Error, OSError) as e:
        logger.debug(f"Boot time unavailable: {e}")
        return None


def os_display_name() -> str:
    return OS_DISPLAY_NAMES.get(platform.system(), UNKNOWN)


def os_version() -> str:
    """Version and build in the OS's own style, e.g. ``14.2.1 (Build 23C71)``."""
    if platform.system() != "Darwin":
        return UNKNOWN
    try:
        output = run_command(["sw_vers"])
    except ShellError as e:
        logger.debug(f"sw_vers failed: {e}")
        return os_version_short()

    version_match = re.search(r"ProductVersion:\s*(\S+)", output)
    build_match = re.search(r"BuildVersion:\s*(\S+)", output)
    if not version_match:
        return os_version_short()
    if not build_match:
        return version_match.group(1)
    return f"{version_match.group(1)} (Build {build_match.group(1)})"


def os_version_short() -> str:
    """``major.minor.patch``, missing components padded with 0."""
    release = platform.mac_ver()[0]
    if not release:
        return UNKNOWN
    parts = release.split(".")[:3]
    parts += ["0"] * (3 - len(parts))
    return ".".join(parts)


def architecture() -> str:
    return ARCHITECTURES.get(platform.machine().lower(), UNKNOWN)
