"""Dump of all course material in course order."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from coursebook.book import load_book
from coursebook.course import Courses

__all__ = ["render_content", "main"]


def render_content(courses: Courses, src_dir: str | Path) -> str:
    """Return every slide's source text, headed by its course, session and segment."""
    src = Path(src_dir)
    parts: list[str] = []
    for course in courses:
        parts.append(f"# COURSE: {course.name}\n")
        for session in course:
            parts.append(f"# SESSION: {session.name}\n")
            for segment in session:
                parts.append(f"# SEGMENT: {segment.name}\n")
                for slide in segment:
                    parts.append(f"# SLIDE: {slide.name}\n")
                    for path in slide.source_paths:
                        parts.append((src / path).read_text(encoding="utf-8") + "\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Print the course content of the book rooted at the given directory."""
    parser = argparse.ArgumentParser(description="Print all course content in order.")
    parser.add_argument("root", nargs="?", default=".", type=Path)
    args = parser.parse_args(argv)

    try:
        courses, _ = Courses.extract_structure(load_book(args.root))
        text = render_content(courses, args.root / "src")
    except (ValueError, OSError) as error:
        print(f"Unable to extract course content: {error}", file=sys.stderr)
        return 1
    print(text, end="")
    return 0