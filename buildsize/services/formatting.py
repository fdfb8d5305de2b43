from __future__ import annotations

UNITS = ["B", "KB", "MB", "GB", "TB"]


def format_bytes(size: int) -> str:
    if size <= 0:
        return "0 B"
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(UNITS) - 1:
        value /= 1024.0
        unit += 1
    if unit == 0:
        return f"{int(value)} {UNITS[unit]}"
    return f"{value:.1f} {UNITS[unit]}"


def relative_bar(percent: float, width: int = 16) -> str:
    if width <= 0:
        return ""
    ratio = min(1.0, max(0.0, percent / 100.0))
    filled = int(round(ratio * width))
    return "█" * filled + "░" * max(0, width - filled)


def truncate_path(path: str, max_width: int = 110) -> str:
    if len(path) <= max_width:
        return path
    keep = max_width - 3
    return f"...{path[-keep:]}"
