"""Toolchain version probe.

Runs the configured toolchain binary (``swift --version`` by default) once and
parses the version and target triple out of its banner, e.g.::

    swift-driver version: 1.90.11.1 Apple Swift version 5.10 (swiftlang-5.10.0.13 clang-1500.3.9.4)
    Target: arm64-apple-macosx14.0

Parsing is phrase-anchored text matching. A banner that changes shape yields
None for the affected field rather than an error.
"""

from functools import cached_property

from loguru import logger

from envfetch.config import settings
from envfetch.errors import ShellError
from envfetch.models import ToolchainInfo
from envfetch.probes._shell import run_command


def parse_version(banner: str, marker: str) -> str | None:
    """Return the token following the last occurrence of *marker*."""
    _, found, rest = banner.rpartition(marker)
    if not found:
        return None
    tokens = rest.split()
    return tokens[0].strip() if tokens else None


def parse_target_triple(banner: str, marker: str) -> str | None:
    """Return the rest of the line following the last occurrence of *marker*."""
    _, found, rest = banner.rpartition(marker)
    if not found:
        return None
    line = rest.splitlines()[0] if rest else ""
    return line.strip() or None


class ToolchainProbe:
    """Reads the toolchain banner once per instance.

    Both fields come from the same captured output, so a report never mixes
    the version of one invocation with the target of another.
    """

    def __init__(self, command: str | None = None):
        self.command = command or settings.toolchain_command

    @cached_property
    def banner(self) -> str | None:
        try:
            return run_command([self.command, settings.toolchain_version_flag])
        except ShellError as e:
            logger.debug(f"Toolchain banner unavailable: {e}")
            return None

    @cached_property
    def info(self) -> ToolchainInfo:
        banner = self.banner
        if banner is None:
            return ToolchainInfo()
        version = parse_version(banner, settings.toolchain_version_marker)
        target = parse_target_triple(banner, settings.toolchain_target_marker)
        if version is None or target is None:
            logger.debug(f"Unrecognized {self.command} banner: {banner[:200]!r}")
        return ToolchainInfo(version=version, target_triple=target)

    def version_string(self) -> str | None:
        return self.info.version

    def target_triple(self) -> str | None:
        return self.info.target_triple
