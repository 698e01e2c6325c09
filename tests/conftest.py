"""Pytest fixtures for envfetch tests.

Probes talk to the OS only through ``subprocess.run``, ``platform``, ``os``
and ``psutil``; the fixtures here replace those with canned macOS output.
"""

import json
import subprocess
from typing import Any

import pytest

from tests.fixtures.host_outputs import (
    BATTERY_SOURCES,
    DISPLAYS_PROFILE,
    GIB,
    PCI_DEVICES,
    SW_VERS_OUTPUT,
    SWIFT_MACOS_BANNER,
    VM_STAT_OUTPUT,
    plist_bytes,
)


class FakeCommands:
    """Stand-in for ``subprocess.run`` that answers from a table of outputs.

    Commands are looked up by their full argument tuple first, then by the
    program name. Unknown programs behave like a missing binary.
    """

    def __init__(self) -> None:
        self.outputs: dict[tuple[str, ...] | str, tuple[Any, int]] = {}
        self.calls: list[list[str]] = []

    def add(self, cmd: tuple[str, ...] | str, stdout: Any = "", returncode: int = 0) -> None:
        self.outputs[cmd] = (stdout, returncode)

    def calls_to(self, program: str) -> list[list[str]]:
        return [call for call in self.calls if call[0] == program]

    def __call__(self, cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
        self.calls.append(list(cmd))
        entry = self.outputs.get(tuple(cmd)) or self.outputs.get(cmd[0])
        if entry is None:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])

        stdout, returncode = entry
        if isinstance(stdout, BaseException):
            raise stdout
        if isinstance(stdout, str):
            stdout = stdout.encode()
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=None)


@pytest.fixture
def commands(monkeypatch) -> FakeCommands:
    """Route every probe subprocess through a FakeCommands table."""
    fake = FakeCommands()
    monkeypatch.setattr("envfetch.probes._shell.subprocess.run", fake)
    return fake


@pytest.fixture
def on_macos(monkeypatch):
    monkeypatch.setattr("platform.system", lambda: "Darwin")


@pytest.fixture
def on_linux(monkeypatch):
    monkeypatch.setattr("platform.system", lambda: "Linux")


@pytest.fixture
def macbook(commands, on_macos) -> FakeCommands:
    """An Intel MacBook Pro with a discrete GPU, two displays and a battery."""
    commands.add("swift", SWIFT_MACOS_BANNER)
    commands.add("sw_vers", SW_VERS_OUTPUT)
    commands.add(("scutil", "--get", "ComputerName"), "Studio MacBook\n")
    commands.add(
        ("sysctl", "-n", "machdep.cpu.brand_string"),
        "Intel(R) Core(TM) i9-9880H CPU @ 2.30GHz\n",
    )
    commands.add(("sysctl", "-n", "hw.cpufrequency"), "2300000000\n")
    commands.add(("sysctl", "-n", "hw.ncpu"), "16\n")
    commands.add(("sysctl", "-n", "hw.memsize"), f"{16 * GIB}\n")
    commands.add("vm_stat", VM_STAT_OUTPUT)
    commands.add(("ioreg", "-a", "-r", "-c", "IOPCIDevice"), plist_bytes(PCI_DEVICES))
    commands.add(("ioreg", "-a", "-r", "-c", "AppleSmartBattery"), plist_bytes(BATTERY_SOURCES))
    commands.add("system_profiler", json.dumps(DISPLAYS_PROFILE))
    return commands
