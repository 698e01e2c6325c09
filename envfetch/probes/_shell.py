"""Helpers shared by the probes: subprocess execution, sysctl, plist output."""

import platform
import plistlib
import subprocess
from typing import Any
from xml.parsers.expat import ExpatError

from loguru import logger

from envfetch.config import SUPPORTED_PLATFORMS, settings
from envfetch.errors import ShellError, UnsupportedPlatformError


def require_supported_platform(probe: str) -> None:
    """Raise UnsupportedPlatformError unless running on a supported OS."""
    system = platform.system()
    if system not in SUPPORTED_PLATFORMS:
        raise UnsupportedPlatformError(system, probe)


def run_command(cmd: list[str], *, text: bool = True) -> Any:
    """Run a command and return its stdout.

    With *text*, output is decoded as UTF-8 and undecodable bytes become
    U+FFFD. stderr is discarded. Raises ShellError if the command cannot be
    spawned, exits non-zero, or outlives ``settings.command_timeout``.
    """
    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            timeout=settings.command_timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        raise ShellError(cmd, reason=f"timed out after {e.timeout}s") from e
    except (OSError, subprocess.SubprocessError) as e:
        raise ShellError(cmd, reason=str(e)) from e

    if result.returncode != 0:
        raise ShellError(cmd, result.returncode)
    if text:
        return result.stdout.decode("utf-8", errors="replace")
    return result.stdout


def sysctl(key: str) -> str | None:
    """Read a sysctl value by name, None when the key is absent."""
    try:
        value = run_command(["sysctl", "-n", key]).strip()
    except ShellError as e:
        logger.debug(f"sysctl {key} unavailable: {e}")
        return None
    return value or None


def sysctl_int(key: str) -> int | None:
    value = sysctl(key)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.debug(f"sysctl {key} is not an integer: {value!r}")
        return None


def ioreg_entries(io_class: str) -> list[dict[str, Any]]:
    """Return the registry subtrees rooted at every object of *io_class*.

    Uses ``ioreg -a`` (plist output); an empty list means no object matched.
    Raises ShellError if ioreg itself fails.
    """
    raw = run_command(["ioreg", "-a", "-r", "-c", io_class], text=False)
    if not raw.strip():
        return []
    try:
        entries = plistlib.loads(raw)
    except (plistlib.InvalidFileException, ExpatError, ValueError) as e:
        logger.debug(f"Could not parse ioreg output for {io_class}: {e}")
        return []
    if isinstance(entries, dict):
        return [entries]
    return [entry for entry in entries if isinstance(entry, dict)]
