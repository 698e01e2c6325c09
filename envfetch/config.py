"""Application configuration.

Environment Variables:
    ENVFETCH_TOOLCHAIN_COMMAND: Toolchain binary to query (default: swift)
    ENVFETCH_TOOLCHAIN_VERSION_FLAG: Flag printing the banner (default: --version)
    ENVFETCH_TOOLCHAIN_VERSION_MARKER: Phrase preceding the version token
    ENVFETCH_TOOLCHAIN_TARGET_MARKER: Phrase preceding the target triple
    ENVFETCH_COMMAND_TIMEOUT: Seconds before a helper command is abandoned (default: 10)
    ENVFETCH_PLACEHOLDER: Text printed for unavailable facts (default: unknown)
    ENVFETCH_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR). Default: WARNING
    ENVFETCH_LOG_DIR: Directory for a rotated log file (default: no file)
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Platforms whose OS facilities the hardware probes know how to read
SUPPORTED_PLATFORMS = ("Darwin",)


class Settings(BaseSettings):
    """envfetch settings.

    All settings can be configured via environment variables with the
    ENVFETCH_ prefix. For example, ENVFETCH_TOOLCHAIN_COMMAND=swiftc.

    Logging is configured separately via ENVFETCH_LOG_LEVEL and
    ENVFETCH_LOG_DIR (see logging_config.py).
    """

    model_config = SettingsConfigDict(env_prefix="ENVFETCH_")

    # Toolchain banner
    toolchain_command: str = "swift"
    toolchain_version_flag: str = "--version"
    # "Swift version " matches both "Apple Swift version 5.10" and "Swift version 5.10"
    toolchain_version_marker: str = "Swift version "
    toolchain_target_marker: str = "Target: "

    # Subprocess
    command_timeout: float = Field(default=10.0, gt=0)

    # Report
    placeholder: str = "unknown"


settings = Settings()
