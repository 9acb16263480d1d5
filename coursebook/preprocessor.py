"""Book preprocessor that adds course outlines and slide timings."""

from __future__ import annotations

import argparse
import json
import sys

from coursebook.book import Book, parse_preprocessor_input
from coursebook.course import Courses
from coursebook.replacements import replace
from coursebook.timing_info import insert_timing_info

__all__ = ["preprocess", "main"]


def preprocess(book: Book) -> Book:
    """Strip frontmatter, insert timing notes and expand directives in ``book``."""
    courses, book = Courses.extract_structure(book)
    for chapter in book.iter_chapters():
        found = courses.find_slide(chapter)
        if found is None:
            # Outside of a course only the directives are expanded.
            replace(courses, None, None, None, chapter)
            continue
        course, session, segment, slide = found
        insert_timing_info(slide, chapter)
        replace(courses, course, session, segment, chapter)
    return book


def main(argv: list[str] | None = None) -> int:
    """Run as a book preprocessor: read the book on stdin, write it to stdout."""
    parser = argparse.ArgumentParser(
        prog="coursebook-preprocess",
        description="Book preprocessor for course material.",
    )
    commands = parser.add_subparsers(dest="command")
    supports = commands.add_parser("supports", help="report support for a renderer")
    supports.add_argument("renderer")
    args = parser.parse_args(argv)

    if args.command == "supports":
        # Every renderer is supported.
        return 0

    try:
        _, book = parse_preprocessor_input(sys.stdin)
        book = preprocess(book)
    except (ValueError, OSError) as error:
        print(error, file=sys.stderr)
        return 1

    json.dump(book.to_dict(), sys.stdout)
    return 0