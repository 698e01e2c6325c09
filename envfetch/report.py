"""Render a HostReport for people (text lines) or programs (JSON)."""

from envfetch.config import settings
from envfetch.formatting import frequency, human_bytes, human_duration, percent
from envfetch.models import DisplayInfo, GPUInfo, HostReport


def _or(value: object | None, placeholder: str) -> str:
    return placeholder if value is None else str(value)


def _gpu_label(gpu: GPUInfo) -> str:
    return f"{gpu.name} ({'integrated' if gpu.integrated else 'discrete'})"


def _display_label(display: DisplayInfo) -> str:
    label = f"#{display.index} {display.width}x{display.height}"
    if display.refresh_rate is not None:
        label += f" @ {display.refresh_rate} Hz"
    return label


def _join(items: list[str] | None, placeholder: str) -> str:
    if items is None:
        return placeholder
    return ", ".join(items) if items else "none"


def _yes_no(flag: bool | None, placeholder: str) -> str:
    if flag is None:
        return placeholder
    return "yes" if flag else "no"


def render_lines(report: HostReport, placeholder: str | None = None) -> list[str]:
    """One line per fact; anything absent prints as *placeholder*."""
    missing = placeholder if placeholder is not None else settings.placeholder

    toolchain_label = settings.toolchain_command.capitalize()
    kernel = " ".join(v for v in (report.kernel_name, report.kernel_version) if v) or missing
    uptime = human_duration(report.uptime_seconds) if report.uptime_seconds is not None else None
    cpu = report.cpu

    memory = report.memory
    used = human_bytes(memory.used_bytes) if memory.used_bytes is not None else None

    gpus = [_gpu_label(g) for g in report.gpus] if report.gpus is not None else None
    displays = (
        [_display_label(d) for d in report.displays] if report.displays is not None else None
    )

    return [
        f"{toolchain_label} {_or(report.toolchain.version, missing)}",
        f"Kernel: {kernel}",
        f"Hostname: {_or(report.hostname, missing)}",
        f"Uptime: {_or(uptime, missing)}",
        f"OS: {report.os_name} {report.os_version} {report.architecture}",
        f"CPU: {_or(cpu.name, missing)} ({_or(cpu.cores, missing)}) "
        f"@ {_or(frequency(cpu.frequency_ghz), missing)}",
        f"GPUs: {_join(gpus, missing)}",
        f"Displays: {_join(displays, missing)}",
        f"Memory: {_or(used, missing)} / {human_bytes(memory.total_bytes)}",
        f"Battery: {_or(percent(report.power.level), missing)}",
        f"Battery Charging: {_yes_no(report.power.charging, missing)}",
    ]


def render_json(report: HostReport) -> str:
    return report.model_dump_json(indent=2)
