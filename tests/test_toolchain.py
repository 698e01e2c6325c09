"""Tests for the toolchain banner probe."""

import subprocess

import pytest

from envfetch.config import settings
from envfetch.models import ToolchainInfo
from envfetch.probes.toolchain import ToolchainProbe, parse_target_triple, parse_version
from tests.fixtures.host_outputs import SWIFT_LINUX_BANNER, SWIFT_MACOS_BANNER


class TestParsing:
    @pytest.mark.parametrize(
        ("banner", "version", "target"),
        [
            (SWIFT_MACOS_BANNER, "5.10", "arm64-apple-macosx14.0"),
            (SWIFT_LINUX_BANNER, "5.10.1", "x86_64-unknown-linux-gnu"),
        ],
    )
    def test_known_banners(self, banner, version, target):
        assert parse_version(banner, "Swift version ") == version
        assert parse_target_triple(banner, "Target: ") == target

    def test_missing_markers(self):
        banner = "clang version 17.0.6\nInstalledDir: /usr/bin\n"
        assert parse_version(banner, "Swift version ") is None
        assert parse_target_triple(banner, "Target: ") is None

    def test_marker_at_end_of_output(self):
        assert parse_version("Apple Swift version ", "Swift version ") is None
        assert parse_target_triple("Target: \n", "Target: ") is None

    def test_target_stops_at_end_of_line(self):
        banner = "Swift version 6.0\nTarget: arm64-apple-macosx15.0\nThread model: posix\n"
        assert parse_target_triple(banner, "Target: ") == "arm64-apple-macosx15.0"


class TestToolchainProbe:
    def test_parses_both_fields_from_one_invocation(self, commands):
        commands.add("swift", SWIFT_MACOS_BANNER)

        probe = ToolchainProbe()
        assert probe.version_string() == "5.10"
        assert probe.target_triple() == "arm64-apple-macosx14.0"
        assert commands.calls_to("swift") == [["swift", "--version"]]

    def test_missing_binary_yields_nothing(self, commands):
        probe = ToolchainProbe("definitely-not-a-toolchain")

        assert probe.info == ToolchainInfo(version=None, target_triple=None)
        assert (probe.version_string(), probe.target_triple()) == (None, None)
        assert len(commands.calls) == 1

    def test_nonzero_exit_yields_nothing(self, commands):
        commands.add("swift", SWIFT_MACOS_BANNER, returncode=1)

        assert ToolchainProbe().info == ToolchainInfo()

    def test_timeout_yields_nothing(self, commands):
        commands.add("swift", subprocess.TimeoutExpired(["swift", "--version"], 10.0))

        assert ToolchainProbe().info == ToolchainInfo()

    def test_undecodable_banner_bytes(self, commands):
        commands.add("swift", b"Swift version 5.10 \xff\nTarget: arm64-apple-macosx14.0\n")

        info = ToolchainProbe().info

        assert info == ToolchainInfo(version="5.10", target_triple="arm64-apple-macosx14.0")

    def test_unrecognized_banner(self, commands):
        commands.add("swift", "something else entirely\n")

        assert ToolchainProbe().info == ToolchainInfo()

    def test_configured_command_and_markers(self, commands, monkeypatch):
        monkeypatch.setattr(settings, "toolchain_command", "rustc")
        monkeypatch.setattr(settings, "toolchain_version_flag", "-vV")
        monkeypatch.setattr(settings, "toolchain_version_marker", "release: ")
        monkeypatch.setattr(settings, "toolchain_target_marker", "host: ")
        commands.add(
            ("rustc", "-vV"),
            "rustc 1.78.0 (9b00956e5 2024-04-29)\nhost: aarch64-apple-darwin\nrelease: 1.78.0\n",
        )

        info = ToolchainProbe().info

        assert info.version == "1.78.0"
        assert info.target_triple == "aarch64-apple-darwin"

    def test_each_probe_reads_fresh(self, commands):
        commands.add("swift", SWIFT_MACOS_BANNER)

        assert ToolchainProbe().info == ToolchainProbe().info
        assert len(commands.calls_to("swift")) == 2
