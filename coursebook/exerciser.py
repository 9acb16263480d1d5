"""Extraction of exercise files from code blocks in chapters.

A code block preceded by an HTML comment of the form ``<!-- File NAME -->``
is written to ``NAME`` below the output directory.
"""

from __future__ import annotations

import argparse
import json
import logging
import shutil
import sys
from pathlib import Path
from typing import Any, Iterator

from markdown_it import MarkdownIt

from coursebook.book import Book

__all__ = ["process", "process_all", "main"]

_log = logging.getLogger(__name__)

_FILENAME_START = "<!-- File "
_FILENAME_END = " -->"
_CODE_BLOCKS = frozenset({"fence", "code_block"})


def _events(text: str) -> Iterator[tuple[str, str]]:
    """Yield ("html", text) and ("code", text) events in document order."""
    for token in MarkdownIt("commonmark").parse(text):
        if token.type == "html_block":
            yield "html", token.content
        elif token.type in _CODE_BLOCKS:
            yield "code", token.content
        elif token.type == "inline":
            for child in token.children or []:
                if child.type == "html_inline":
                    yield "html", child.content


def process(output_directory: str | Path, input_contents: str) -> None:
    """Write each code block that follows a file-name comment to its file."""
    output = Path(output_directory)
    next_filename: str | None = None
    for kind, text in _events(input_contents):
        if kind == "html":
            html = text.strip()
            if (
                html.startswith(_FILENAME_START)
                and html.endswith(_FILENAME_END)
                and len(html) >= len(_FILENAME_START) + len(_FILENAME_END)
            ):
                next_filename = html[len(_FILENAME_START) : len(html) - len(_FILENAME_END)]
                _log.info("Next file: %r", next_filename)
        elif next_filename is not None:
            target = output / next_filename
            _log.info("Writing %s", target)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(text.encode("utf-8"))
            next_filename = None


def process_all(book: Book, output_directory: str | Path) -> None:
    """Extract the exercises of every chapter into a directory named after it."""
    output = Path(output_directory)
    for chapter in book.iter_chapters():
        _log.debug("Chapter %s / %s", chapter.path, chapter.source_path)
        if chapter.path is None:
            continue
        stem = chapter.path.stem
        if not stem:
            raise ValueError(f"Chapter {chapter.path.as_posix()!r} has no file stem")
        process(output / stem, chapter.content)


def _output_directory(context: dict[str, Any]) -> Path:
    renderers = (context.get("config") or {}).get("output") or {}
    config = renderers.get("exerciser")
    if not isinstance(config, dict):
        raise ValueError("Missing output.exerciser configuration")
    value = config.get("output-directory")
    if value is None:
        raise ValueError("Missing output.exerciser.output-directory configuration value")
    if not isinstance(value, str):
        raise ValueError("Expected a string for output.exerciser.output-directory")
    return Path(value)


def main(argv: list[str] | None = None) -> int:
    """Run as a book renderer: read the render context on stdin and write exercises."""
    parser = argparse.ArgumentParser(description="Extract exercise files from a book.")
    parser.parse_args(argv)

    try:
        context = json.load(sys.stdin)
        if not isinstance(context, dict) or "book" not in context:
            raise ValueError("Parsing stdin: expected a render context with a book")
        output_directory = _output_directory(context)
        shutil.rmtree(output_directory, ignore_errors=True)
        try:
            output_directory.mkdir()
        except OSError as error:
            raise OSError(
                f"Failed to create output directory {str(output_directory)!r}: {error}"
            ) from error
        process_all(Book.from_dict(context["book"]), output_directory)
    except (ValueError, OSError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0