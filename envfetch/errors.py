"""Exceptions raised by the probe layer."""


class ShellError(RuntimeError):
    """A helper command could not be spawned, exited non-zero, or timed out."""

    def __init__(self, command: list[str], returncode: int | None = None, reason: str = ""):
        self.command = command
        self.returncode = returncode
        detail = reason or f"exit status {returncode}"
        super().__init__(f"{' '.join(command)}: {detail}")


class UnsupportedPlatformError(RuntimeError):
    """A macOS-only probe was called on another operating system."""

    def __init__(self, platform: str, probe: str = ""):
        self.platform = platform
        self.probe = probe
        target = f"{probe} is" if probe else "this probe is"
        super().__init__(f"{target} not supported on {platform or 'unknown platform'}")
