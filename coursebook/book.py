"""In-memory model of a book: chapters, separators and part titles.

The dictionary form matches the JSON that book preprocessors exchange on
standard input and output.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import IO, Any, Iterator, Union

__all__ = [
    "Separator",
    "PartTitle",
    "Chapter",
    "Book",
    "BookItem",
    "load_book",
    "parse_preprocessor_input",
]


@dataclass(frozen=True)
class Separator:
    """A horizontal separator between groups of chapters."""


@dataclass(frozen=True)
class PartTitle:
    """A heading that introduces a part of the book."""

    title: str


def _as_path(value: Any) -> PurePosixPath | None:
    if value is None:
        return None
    return PurePosixPath(value)


def _path_to_json(value: PurePosixPath | None) -> str | None:
    return None if value is None else value.as_posix()


@dataclass
class Chapter:
    """A single chapter, possibly holding nested items."""

    name: str
    content: str = ""
    number: list[int] | None = None
    sub_items: list["BookItem"] = field(default_factory=list)
    path: PurePosixPath | None = None
    source_path: PurePosixPath | None = None
    parent_names: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.path = _as_path(self.path)
        self.source_path = _as_path(self.source_path)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Chapter":
        """Build a chapter from its JSON dictionary form."""
        number = data.get("number")
        return cls(
            name=data["name"],
            content=data.get("content", ""),
            number=list(number) if number is not None else None,
            sub_items=[_item_from_json(item) for item in data.get("sub_items", [])],
            path=data.get("path"),
            source_path=data.get("source_path"),
            parent_names=list(data.get("parent_names", [])),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON dictionary form of this chapter."""
        return {
            "name": self.name,
            "content": self.content,
            "number": list(self.number) if self.number is not None else None,
            "sub_items": [_item_to_json(item) for item in self.sub_items],
            "path": _path_to_json(self.path),
            "source_path": _path_to_json(self.source_path),
            "parent_names": list(self.parent_names),
        }


BookItem = Union[Chapter, Separator, PartTitle]


def _item_from_json(data: Any) -> BookItem:
    if data == "Separator":
        return Separator()
    if isinstance(data, dict):
        if "Chapter" in data:
            return Chapter.from_dict(data["Chapter"])
        if "PartTitle" in data:
            return PartTitle(data["PartTitle"])
    raise ValueError(f"unrecognised book item: {data!r}")


def _item_to_json(item: BookItem) -> Any:
    if isinstance(item, Chapter):
        return {"Chapter": item.to_dict()}
    if isinstance(item, PartTitle):
        return {"PartTitle": item.title}
    return "Separator"


def _walk(items: list[BookItem]) -> Iterator[Chapter]:
    for item in items:
        if isinstance(item, Chapter):
            yield item
            yield from _walk(item.sub_items)


@dataclass
class Book:
    """An ordered collection of book items."""

    sections: list[BookItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Book":
        """Build a book from its JSON dictionary form."""
        items = data.get("sections", data.get("items", []))
        return cls([_item_from_json(item) for item in items])

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON dictionary form of this book."""
        return {
            "sections": [_item_to_json(item) for item in self.sections],
            "__non_exhaustive": None,
        }

    def iter_chapters(self) -> Iterator[Chapter]:
        """Yield every chapter, depth first, in reading order."""
        yield from _walk(self.sections)


_SEPARATOR = re.compile(r"^\s*(?:-{3,}|\*{3,}|_{3,})\s*$")
_HEADING = re.compile(r"^\s*#{1,6}\s+(?P<title>.+?)\s*#*\s*$")
_LINK = re.compile(
    r"^(?P<indent>[ \t]*)(?:(?P<bullet>[-*+])\s+)?"
    r"\[(?P<name>[^\]]*)\]\((?P<target>[^)]*)\)\s*$"
)
_SRC_SETTING = re.compile(r"""^\s*src\s*=\s*["'](?P<src>[^"']*)["']\s*$""")


def _source_directory(root: Path) -> Path:
    config = root / "book.toml"
    src = "src"
    if config.is_file():
        section = ""
        for line in config.read_text(encoding="utf-8").splitlines():
            stripped = line.strip()
            if stripped.startswith("["):
                section = stripped.strip("[]").strip()
                continue
            match = _SRC_SETTING.match(line)
            if match and section == "book":
                src = match["src"]
    return root / src


def _indent_width(indent: str) -> int:
    return len(indent.expandtabs(4))


def _make_chapter(
    src_dir: Path,
    name: str,
    target: str,
    number: list[int] | None,
    parent_names: list[str],
) -> Chapter:
    target = target.strip()
    if not target:
        return Chapter(name=name, number=number, parent_names=parent_names)
    path = PurePosixPath(target)
    content = (src_dir / path).read_text(encoding="utf-8")
    return Chapter(
        name=name,
        content=content,
        number=number,
        path=path,
        source_path=path,
        parent_names=parent_names,
    )


def _parse_summary(text: str, src_dir: Path) -> Book:
    book = Book()
    stack: list[tuple[int, Chapter]] = []
    top_number = 0
    seen_title = False

    for line in text.splitlines():
        if not line.strip():
            continue
        if _SEPARATOR.match(line):
            stack.clear()
            book.sections.append(Separator())
            continue
        heading = _HEADING.match(line)
        if heading:
            stack.clear()
            if not seen_title and not book.sections:
                seen_title = True
            else:
                book.sections.append(PartTitle(heading["title"]))
            continue
        link = _LINK.match(line)
        if not link:
            continue
        name, target = link["name"], link["target"]
        if link["bullet"] is None:
            stack.clear()
            book.sections.append(_make_chapter(src_dir, name, target, None, []))
            continue

        indent = _indent_width(link["indent"])
        while stack and stack[-1][0] >= indent:
            stack.pop()
        if stack:
            parent = stack[-1][1]
            siblings = sum(isinstance(item, Chapter) for item in parent.sub_items)
            number = [*(parent.number or []), siblings + 1]
            chapter = _make_chapter(
                src_dir, name, target, number, [c.name for _, c in stack]
            )
            parent.sub_items.append(chapter)
        else:
            top_number += 1
            chapter = _make_chapter(src_dir, name, target, [top_number], [])
            book.sections.append(chapter)
        stack.append((indent, chapter))
    return book


def load_book(root: str | Path = ".") -> Book:
    """Load the book rooted at ``root`` from its SUMMARY.md and sources."""
    src_dir = _source_directory(Path(root))
    summary = (src_dir / "SUMMARY.md").read_text(encoding="utf-8")
    return _parse_summary(summary, src_dir)


def parse_preprocessor_input(stream: IO[str]) -> tuple[dict[str, Any], Book]:
    """Read the ``[context, book]`` pair a preprocessor receives."""
    data = json.load(stream)
    if not isinstance(data, list) or len(data) != 2:
        raise ValueError("preprocessor input must be a [context, book] pair")
    context, book = data
    return context, Book.from_dict(book)