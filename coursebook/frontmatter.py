"""Frontmatter carried at the top of each chapter."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

import yaml

from coursebook.book import Chapter

__all__ = ["Frontmatter", "FrontmatterError", "split_frontmatter"]

_MATTER = re.compile(
    r"\A\s*---[ \t]*\r?\n(?:(?P<matter>.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)(?P<content>.*)\Z",
    re.DOTALL,
)


class FrontmatterError(ValueError):
    """Raised when a chapter's frontmatter cannot be parsed."""


@dataclass(frozen=True)
class Frontmatter:
    """Course annotations of a chapter."""

    minutes: int | None = None
    target_minutes: int | None = None
    course: str | None = None
    session: str | None = None


def _optional_int(data: dict[str, Any], key: str, where: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise FrontmatterError(
            f"error parsing frontmatter in {where}: "
            f"{key} must be a non-negative integer, got {value!r}"
        )
    return value


def _optional_str(data: dict[str, Any], key: str, where: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise FrontmatterError(
            f"error parsing frontmatter in {where}: "
            f"{key} must be a string, got {value!r}"
        )
    return value


def split_frontmatter(chapter: Chapter) -> tuple[Frontmatter, str]:
    """Split a chapter's content into its frontmatter and the remaining text."""
    match = _MATTER.match(chapter.content)
    if match is None:
        return Frontmatter(), chapter.content

    where = repr(None if chapter.source_path is None else chapter.source_path.as_posix())
    try:
        data = yaml.safe_load(match["matter"] or "")
    except yaml.YAMLError as error:
        raise FrontmatterError(f"error parsing frontmatter in {where}: {error}") from error
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontmatterError(f"error parsing frontmatter in {where}: expected a mapping")

    frontmatter = Frontmatter(
        minutes=_optional_int(data, "minutes", where),
        target_minutes=_optional_int(data, "target_minutes", where),
        course=_optional_str(data, "course", where),
        session=_optional_str(data, "session", where),
    )
    return frontmatter, match["content"]