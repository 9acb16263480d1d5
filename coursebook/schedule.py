"""Summary of course durations against their targets."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from coursebook.book import load_book
from coursebook.course import Course, Courses
from coursebook.markdown import duration

__all__ = ["timediff", "format_summary", "main"]


def timediff(actual: int, target: int, slop: int) -> str:
    """Describe ``actual`` minutes, noting when it misses ``target`` by more than ``slop``."""
    if actual > target + slop:
        return f"{duration(actual)} (\u23f0 *{duration(actual - target)} too long*)"
    if actual < target - slop:
        return f"{duration(actual)}: ({duration(target - actual)} short)"
    return duration(actual)


def format_summary(course: Course) -> str:
    """Markdown summary of a course and its sessions; empty if it has no target."""
    if course.target_minutes() == 0:
        return ""
    lines = [
        f"### {course.name}",
        f"_{timediff(course.minutes(), course.target_minutes(), 15)}_",
    ]
    lines.extend(
        f"* {session.name} - _{timediff(session.minutes(), session.target_minutes(), 5)}_"
        for session in course
    )
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Print the schedule summary of the book rooted at the given directory."""
    parser = argparse.ArgumentParser(description="Summarise the course schedule.")
    parser.add_argument("root", nargs="?", default=".", type=Path)
    args = parser.parse_args(argv)

    try:
        courses, _ = Courses.extract_structure(load_book(args.root))
    except (ValueError, OSError) as error:
        print(f"Unable to extract course structure: {error}", file=sys.stderr)
        return 1

    print("## Course Schedule")
    print("With this pull request applied, the course schedule is as follows:")
    for course in courses:
        print(format_summary(course), end="")
    return 0