"""Pure conversions from probe values to display strings."""

import math

_BYTE_UNITS = ("KB", "MB", "GB", "TB", "PB")


def human_bytes(count: int) -> str:
    """Binary memory-style size: ``"16 GB"``, ``"1.5 GB"``, ``"512 bytes"``."""
    if count < 0:
        raise ValueError(f"byte count must be non-negative, got {count}")
    if count < 1024:
        return "1 byte" if count == 1 else f"{count} bytes"

    value = float(count)
    unit = _BYTE_UNITS[0]
    for unit in _BYTE_UNITS:
        value /= 1024
        # Compare after rounding so 1048575 bytes reads "1 MB", not "1024 KB"
        if round(value, 1) < 1024:
            break
    text = f"{value:.1f}".removesuffix(".0")
    return f"{text} {unit}"


def human_duration(seconds: float) -> str:
    """``HHh:MMm:SSs``; hours are unbounded and fractions truncated."""
    if seconds < 0:
        raise ValueError(f"duration must be non-negative, got {seconds}")
    total = int(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}h:{minutes:02d}m:{secs:02d}s"


def percent(fraction: float | None) -> str | None:
    """Nearest whole percent (halves round up); None stays None."""
    if fraction is None:
        return None
    return f"{math.floor(fraction * 100 + 0.5)}%"


def frequency(ghz: float | None) -> str | None:
    if ghz is None:
        return None
    return f"{ghz:.2f} GHz"
