"""Markdown helpers: relative links and human-readable durations."""

from __future__ import annotations

from os import PathLike
from pathlib import PurePosixPath

__all__ = ["relative_link", "duration"]


def _starts_with(path: PurePosixPath, prefix: PurePosixPath) -> bool:
    return path.parts[: len(prefix.parts)] == prefix.parts


def relative_link(doc_path: str | PathLike[str], target_path: str | PathLike[str]) -> str:
    """Return a link to ``target_path`` relative to the document at ``doc_path``."""
    doc = PurePosixPath(doc_path)
    target = PurePosixPath(target_path)

    dotdot = -1
    for parent in (doc, *doc.parents):
        if _starts_with(target, parent):
            break
        dotdot += 1
    if dotdot > 0:
        return "../" * dotdot + target.as_posix()
    return f"./{target.as_posix()}"


def duration(minutes: int) -> str:
    """Describe a duration in words, rounding past 5 minutes up to a multiple of 5."""
    if minutes < 0:
        raise ValueError("duration cannot be negative")
    if minutes > 5:
        minutes += 4
        minutes -= minutes % 5

    hours, minutes = divmod(minutes, 60)
    if hours == 0:
        return "1 minute" if minutes == 1 else f"{minutes} minutes"
    hour_text = "1 hour" if hours == 1 else f"{hours} hours"
    if minutes == 0:
        return hour_text
    return f"{hour_text} and {minutes} minutes"