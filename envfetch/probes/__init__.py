"""Host fact probes.

Each module wraps one OS facility and returns typed values. Probes are
independent of each other; ``envfetch.facts.HostFacts`` composes them.

Probes backed by macOS-only tools raise UnsupportedPlatformError on other
systems. Every other failure degrades to None or an empty list.
"""

from .toolchain import ToolchainProbe

__all__ = ["ToolchainProbe"]
