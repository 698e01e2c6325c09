"""Physical memory probe.

Used memory is (active + inactive + wired) pages times the page size the
kernel reports, so the result is right on both 4 KiB (Intel) and 16 KiB
(Apple Silicon) hosts.
"""

import mmap
import platform
import re

import psutil
from loguru import logger

from envfetch.errors import ShellError, UnsupportedPlatformError
from envfetch.models import MemoryReading
from envfetch.probes._shell import require_supported_platform, run_command, sysctl_int

_PAGE_SIZE_RE = re.compile(r"page size of (\d+) bytes")
_COUNTED_PAGES = ("Pages active", "Pages inactive", "Pages wired down")


def total_physical_bytes() -> int:
    """Installed physical memory in bytes.

    On macOS, psutil.virtual_memory().total can be inflated by compressed
    memory, so hw.memsize is preferred there.
    """
    if platform.system() == "Darwin":
        memsize = sysctl_int("hw.memsize")
        if memsize:
            return memsize
        logger.debug("hw.memsize unavailable, falling back to psutil")
    return psutil.virtual_memory().total


def page_size() -> int:
    """The host's VM page size in bytes."""
    return mmap.PAGESIZE


def parse_vm_stat(output: str) -> tuple[int, dict[str, int]]:
    """Parse ``vm_stat`` output into (page size, {label: page count}).

    The header line carries the page size, e.g.
    ``Mach Virtual Memory Statistics: (page size of 16384 bytes)``.
    """
    size_match = _PAGE_SIZE_RE.search(output)
    size = int(size_match.group(1)) if size_match else page_size()

    counts: dict[str, int] = {}
    for line in output.splitlines():
        label, sep, value = line.partition(":")
        if not sep:
            continue
        try:
            counts[label.strip().strip('"')] = int(value.strip().rstrip("."))
        except ValueError:
            continue
    return size, counts


def used_bytes() -> int | None:
    """Active + inactive + wired memory, None when vm_stat is unavailable."""
    require_supported_platform("used_bytes")
    try:
        output = run_command(["vm_stat"])
    except ShellError as e:
        logger.warning(f"VM statistics unavailable: {e}")
        return None

    size, counts = parse_vm_stat(output)
    missing = [label for label in _COUNTED_PAGES if label not in counts]
    if missing:
        logger.warning(f"vm_stat output lacks {', '.join(missing)}")
        return None
    return sum(counts[label] for label in _COUNTED_PAGES) * size


def reading() -> MemoryReading:
    """Total and used memory; off macOS only the total is known."""
    total = total_physical_bytes()
    try:
        used = used_bytes()
    except UnsupportedPlatformError as e:
        logger.debug(str(e))
        used = None
    if used is not None and used > total:
        logger.warning(f"Used memory {used} exceeds physical memory {total}")
    return MemoryReading(used_bytes=used, total_bytes=total)
