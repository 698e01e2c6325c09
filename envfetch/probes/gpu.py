"""GPU probe backed by the IOKit registry.

Every IOPCIDevice subtree is searched for a ``model`` property, the same
lookup System Information performs. Apple Silicon GPUs are not PCI devices,
so on those machines the list is usually empty.
"""

from collections.abc import Iterator
from typing import Any

from loguru import logger

from envfetch.errors import ShellError
from envfetch.models import GPUInfo
from envfetch.probes._shell import ioreg_entries, require_supported_platform

# Substrings of model names that denote a GPU sharing die and memory with the CPU.
# A naming heuristic only; callers wanting better can inspect GPUInfo.name.
INTEGRATED_MARKERS = ("Intel", "Apple")

_CHILDREN_KEY = "IORegistryEntryChildren"


def is_integrated(name: str) -> bool:
    return any(marker in name for marker in INTEGRATED_MARKERS)


def _walk(entry: dict[str, Any]) -> Iterator[dict[str, Any]]:
    """Yield *entry* then its descendants, depth-first."""
    yield entry
    for child in entry.get(_CHILDREN_KEY, ()):
        if isinstance(child, dict):
            yield from _walk(child)


def _decode_model(value: Any) -> str | None:
    if isinstance(value, bytes):
        value = value.rstrip(b"\x00").decode("utf-8", errors="replace")
    if not isinstance(value, str):
        return None
    return value.strip() or None


def find_model(entry: dict[str, Any]) -> str | None:
    """First ``model`` property found in the registry subtree of *entry*."""
    for node in _walk(entry):
        if "model" in node:
            model = _decode_model(node["model"])
            if model:
                return model
    return None


def enumerate_gpus() -> list[GPUInfo]:
    require_supported_platform("enumerate_gpus")
    try:
        devices = ioreg_entries("IOPCIDevice")
    except ShellError as e:
        logger.warning(f"PCI registry unavailable: {e}")
        return []

    gpus: list[GPUInfo] = []
    for device in devices:
        model = find_model(device)
        if model is None:
            continue
        gpus.append(GPUInfo(name=model, integrated=is_integrated(model)))
    logger.debug(f"Found {len(gpus)} GPU(s) among {len(devices)} PCI devices")
    return gpus
