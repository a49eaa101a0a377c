"""
Helper functions for formatting data into human-readable strings.
"""


def format_size(bytes_size: int) -> str:
    """Formats bytes into a human-readable size string (e.g., '17.4 MB')."""
    if bytes_size <= 0:
        return "0 B"
    units = ["B", "KB", "MB", "GB", "TB"]
    i = 0
    while bytes_size >= 1024 and i < len(units) - 1:
        bytes_size /= 1024
        i += 1
    return f"{bytes_size:.1f} {units[i]}"


def format_count(count: int) -> str:
    """Formats a geometry count with thousands separators (e.g., '871,306')."""
    return f"{count:,}"


def truncate(text: str, width: int = 60) -> str:
    """Shortens text to ``width`` characters, ending with an ellipsis if cut."""
    if len(text) <= width:
        return text
    return text[: width - 1].rstrip() + "…"
