"""Battery probe.

Reads the AppleSmartBattery registry entries. A desktop Mac has none, which
is reported as an all-None PowerState rather than an error.
"""

from typing import Any

from loguru import logger

from envfetch.errors import ShellError
from envfetch.models import PowerState
from envfetch.probes._shell import ioreg_entries, require_supported_platform


def power_sources() -> list[dict[str, Any]]:
    """Description dictionaries of every power source, possibly empty."""
    require_supported_platform("power_sources")
    try:
        return ioreg_entries("AppleSmartBattery")
    except ShellError as e:
        logger.debug(f"Power source registry unavailable: {e}")
        return []


def _int_value(description: dict[str, Any], key: str) -> int | None:
    value = description.get(key)
    # plist booleans are ints in Python; a capacity never is one
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def level_from(description: dict[str, Any]) -> float | None:
    current = _int_value(description, "CurrentCapacity")
    maximum = _int_value(description, "MaxCapacity")
    if current is None or maximum is None or maximum <= 0:
        return None
    # CurrentCapacity may report above MaxCapacity
    return min(1.0, max(0.0, current / maximum))


def charging_from(description: dict[str, Any]) -> bool | None:
    value = description.get("IsCharging")
    return value if isinstance(value, bool) else None


def power_state() -> PowerState:
    sources = power_sources()
    if not sources:
        return PowerState()
    first = sources[0]
    return PowerState(level=level_from(first), charging=charging_from(first))


def battery_level() -> float | None:
    """Charge as a fraction of capacity, None without a battery."""
    return power_state().level


def is_charging() -> bool | None:
    return power_state().charging
