"""Display probe.

Reads ``system_profiler SPDisplaysDataType -json``. Each graphics entry lists
its screens under ``spdisplays_ndrvs``; a screen's ``_spdisplays_resolution``
reads like ``"1512 x 982 @ 120.00Hz"`` (point size and refresh rate).
"""

import json
import re
from typing import Any

from loguru import logger

from envfetch.errors import ShellError
from envfetch.models import UINT16_MAX, DisplayInfo
from envfetch.probes._shell import require_supported_platform, run_command

_SIZE_RE = re.compile(r"(\d+)\s*x\s*(\d+)")
_REFRESH_RE = re.compile(r"@\s*(-?[\d.]+)\s*Hz", re.IGNORECASE)


def _clamp_uint16(value: float) -> int:
    return min(max(int(value), 0), UINT16_MAX)


def parse_resolution(text: str) -> tuple[int, int, int | None] | None:
    """Parse ``"W x H [@ R Hz]"`` into (width, height, refresh rate)."""
    size = _SIZE_RE.search(text)
    if not size:
        return None
    width, height = (_clamp_uint16(float(v)) for v in size.groups())

    refresh_rate = None
    refresh = _REFRESH_RE.search(text)
    if refresh:
        try:
            rate = int(float(refresh.group(1)))
        except ValueError:
            rate = 0
        if rate > 0:
            refresh_rate = _clamp_uint16(rate)
    return width, height, refresh_rate


def screens_from(profile: dict[str, Any]) -> list[dict[str, Any]]:
    """Flatten every graphics entry's screen list, keeping OS order."""
    screens: list[dict[str, Any]] = []
    if not isinstance(profile, dict):
        return screens
    adapters = profile.get("SPDisplaysDataType")
    if not isinstance(adapters, list):
        return screens
    for adapter in adapters:
        if not isinstance(adapter, dict):
            continue
        adapter_screens = adapter.get("spdisplays_ndrvs")
        if not isinstance(adapter_screens, list):
            continue
        screens.extend(screen for screen in adapter_screens if isinstance(screen, dict))
    return screens


def enumerate_displays() -> list[DisplayInfo]:
    require_supported_platform("enumerate_displays")
    try:
        profile = json.loads(run_command(["system_profiler", "SPDisplaysDataType", "-json"]))
    except (ShellError, json.JSONDecodeError) as e:
        logger.warning(f"Display list unavailable: {e}")
        return []

    displays: list[DisplayInfo] = []
    for index, screen in enumerate(screens_from(profile)):
        text = screen.get("_spdisplays_resolution") or screen.get("_spdisplays_pixels") or ""
        parsed = parse_resolution(str(text))
        if parsed is None:
            logger.debug(f"Skipping display {screen.get('_name', index)!r} without a size")
            continue
        width, height, refresh_rate = parsed
        displays.append(
            DisplayInfo(width=width, height=height, refresh_rate=refresh_rate, index=index)
        )
    return displays
