"""Timestamp formatting utilities."""

from datetime import datetime, timedelta


def format_age(mtime: float, reference: datetime = None) -> str:
    """
    Format a file modification time as a compact relative age.

    Matches the style of `ls`-like listings:
    - Seconds: "30s ago"
    - Minutes: "15m ago"
    - Hours: "2h ago"
    - Days: "5d ago"

    Args:
        mtime: POSIX timestamp (e.g. from Path.stat().st_mtime)
        reference: Point in time to measure from (default: now)

    Returns:
        Compact relative time string
    """
    reference = reference or datetime.now()
    diff = reference - datetime.fromtimestamp(mtime)

    # Future times
    if diff.total_seconds() < 0:
        diff = -diff
        suffix = "from now"
    else:
        suffix = "ago"

    seconds = int(diff.total_seconds())
    minutes = seconds // 60
    hours = minutes // 60
    days = diff.days

    if seconds < 60:
        return f"{seconds}s {suffix}"
    elif minutes < 60:
        return f"{minutes}m {suffix}"
    elif hours < 24:
        return f"{hours}h {suffix}"
    else:
        return f"{days}d {suffix}"


def is_older_than(mtime: float, days: float, reference: datetime = None) -> bool:
    """Whether a modification time lies more than `days` before `reference`."""
    reference = reference or datetime.now()
    return reference - datetime.fromtimestamp(mtime) > timedelta(days=days)
