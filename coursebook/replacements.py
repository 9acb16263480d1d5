"""Expansion of ``{{% ... }}`` directives in chapter content."""

from __future__ import annotations

import re

from coursebook.book import Chapter
from coursebook.course import Course, Courses, Segment, Session

__all__ = ["replace"]

_DIRECTIVE = re.compile(r"\{\{%([^}]*)}}")


def replace(
    courses: Courses,
    course: Course | None,
    session: Session | None,
    segment: Segment | None,
    chapter: Chapter,
) -> None:
    """Expand the first directive in ``chapter`` with the matching outline."""
    source_path = chapter.source_path
    if source_path is None:
        return

    def expand(match: re.Match[str]) -> str:
        directive = match[1].strip()
        words = directive.split()
        if words == ["session", "outline"] and session is not None:
            return session.outline(source_path)
        if words == ["segment", "outline"] and segment is not None:
            return segment.outline(source_path)
        if words == ["course", "outline"] and course is not None:
            return course.schedule(source_path)
        if len(words) == 3 and words[:2] == ["course", "outline"]:
            named = courses.find_course(words[2])
            if named is None:
                return match[0]
            return named.schedule(source_path)
        return directive

    chapter.content = _DIRECTIVE.sub(expand, chapter.content, count=1)