"""The course hierarchy: courses, sessions, segments and slides.

The structure is read from the order of chapters in a book together with the
frontmatter of each chapter. A top-level chapter whose frontmatter names a
``course`` starts that course, and ``session`` starts a session. Every
top-level chapter inside a course and session becomes a segment. The chapter
itself is the segment's first slide, and each of its sub-chapters becomes
another slide. Sub-chapters of those slides are folded into the slide.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import PurePosixPath
from typing import Iterator

from coursebook.book import Book, Chapter
from coursebook.frontmatter import Frontmatter, split_frontmatter
from coursebook.markdown import duration, relative_link

__all__ = [
    "BREAK_DURATION",
    "CourseStructureError",
    "Slide",
    "Segment",
    "Session",
    "Course",
    "Courses",
]

BREAK_DURATION = 10
"""Minutes of break between segments of a session."""


class CourseStructureError(ValueError):
    """Raised when chapter frontmatter does not describe a valid course."""


def _describe(path: PurePosixPath | None) -> str:
    return "None" if path is None else repr(path.as_posix())


def _strip_frontmatter(chapter: Chapter) -> Frontmatter:
    frontmatter, content = split_frontmatter(chapter)
    chapter.content = content
    return frontmatter


@dataclass
class Slide:
    """A single topic, possibly spread over several chapters."""

    name: str
    minutes: int = 0
    source_paths: list[PurePosixPath] = field(default_factory=list)

    @classmethod
    def _from_chapter(cls, frontmatter: Frontmatter, chapter: Chapter) -> "Slide":
        slide = cls(chapter.name)
        slide._add_frontmatter(frontmatter)
        slide._push_source_path(chapter.source_path)
        return slide

    def _add_frontmatter(self, frontmatter: Frontmatter) -> None:
        self.minutes += frontmatter.minutes or 0

    def _push_source_path(self, source_path: PurePosixPath | None) -> None:
        if source_path is not None:
            self.source_paths.append(source_path)

    def _add_sub_chapters(self, chapter: Chapter) -> None:
        for sub in chapter.sub_items:
            if not isinstance(sub, Chapter):
                continue
            frontmatter = _strip_frontmatter(sub)
            if frontmatter.course is not None or frontmatter.session is not None:
                raise CourseStructureError(
                    f"{_describe(sub.path)}: sub-slides may not have 'course' or 'session' set"
                )
            self._add_frontmatter(frontmatter)
            self._push_source_path(sub.source_path)
            self._add_sub_chapters(sub)

    def is_sub_chapter(self, chapter: Chapter) -> bool:
        """Whether ``chapter`` is one of this slide's sub-chapters rather than its first."""
        first = self.source_paths[0] if self.source_paths else None
        return chapter.source_path != first


@dataclass
class Segment:
    """A collection of slides with a related theme."""

    name: str
    slides: list[Slide] = field(default_factory=list)

    def __iter__(self) -> Iterator[Slide]:
        return iter(self.slides)

    def _add_slide(self, frontmatter: Frontmatter, chapter: Chapter, recurse: bool) -> None:
        slide = Slide._from_chapter(frontmatter, chapter)
        if recurse:
            slide._add_sub_chapters(chapter)
        self.slides.append(slide)

    def minutes(self) -> int:
        """Total minutes of the slides in this segment."""
        return sum(slide.minutes for slide in self.slides)

    def outline(self, at_source_path: str | PathLike[str]) -> str:
        """Markdown outline of this segment, linked from ``at_source_path``."""
        lines = ["In this segment:"]
        lines.extend(
            f" * [{slide.name}]({relative_link(at_source_path, slide.source_paths[0])})"
            f" ({duration(slide.minutes)})"
            for slide in self.slides
            if slide.minutes
        )
        lines.append("")
        lines.append(f"This segment should take about {duration(self.minutes())}")
        return "\n".join(lines) + "\n"


@dataclass
class Session:
    """A block of instructional time made of segments."""

    name: str
    segments: list[Segment] = field(default_factory=list)
    _target: int = field(default=0, init=False, repr=False)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def _add_segment(self, frontmatter: Frontmatter, chapter: Chapter) -> None:
        segment = Segment(chapter.name)
        segment._add_slide(frontmatter, chapter, recurse=False)
        for sub in chapter.sub_items:
            if not isinstance(sub, Chapter):
                continue
            sub_frontmatter = _strip_frontmatter(sub)
            segment._add_slide(sub_frontmatter, sub, recurse=True)
        self.segments.append(segment)

    def minutes(self) -> int:
        """Total minutes of this session, including breaks between segments."""
        timed = [segment.minutes() for segment in self.segments if segment.minutes() > 0]
        if not timed:
            return 0
        return sum(timed) + (len(timed) - 1) * BREAK_DURATION

    def target_minutes(self) -> int:
        """Target minutes from the frontmatter, or the actual minutes if none."""
        return self._target if self._target > 0 else self.minutes()

    def outline(self, at_source_path: str | PathLike[str]) -> str:
        """Markdown outline of this session, linked from ``at_source_path``."""
        lines = ["In this session:"]
        lines.extend(
            f" * [{segment.name}]"
            f"({relative_link(at_source_path, segment.slides[0].source_paths[0])})"
            f" ({duration(segment.minutes())})"
            for segment in self.segments
            if segment.minutes()
        )
        lines.append("")
        lines.append(
            f"Including {BREAK_DURATION} minute breaks, "
            f"this session should take about {duration(self.minutes())}"
        )
        return "\n".join(lines) + "\n"


@dataclass
class Course:
    """The level of content at which students enroll."""

    name: str
    sessions: list[Session] = field(default_factory=list)

    def __iter__(self) -> Iterator[Session]:
        return iter(self.sessions)

    def _session(self, name: str) -> Session:
        for session in self.sessions:
            if session.name == name:
                return session
        session = Session(name)
        self.sessions.append(session)
        return session

    def minutes(self) -> int:
        """Sum of the session durations, breaks included."""
        return sum(session.minutes() for session in self.sessions)

    def target_minutes(self) -> int:
        """Sum of the session target durations."""
        return sum(session.target_minutes() for session in self.sessions)

    def schedule(self, at_source_path: str | PathLike[str]) -> str:
        """Markdown schedule of this course, linked from ``at_source_path``."""
        lines = ["Course schedule:"]
        for session in self.sessions:
            lines.append(
                f" * {session.name} ({duration(session.minutes())}, including breaks)"
            )
            lines.extend(
                f"   * [{segment.name}]"
                f"({relative_link(at_source_path, segment.slides[0].source_paths[0])})"
                f" ({duration(segment.minutes())})"
                for segment in session.segments
                if segment.minutes()
            )
        return "\n".join(lines) + "\n"


@dataclass
class Courses:
    """All courses of a book, in order of first appearance."""

    courses: list[Course] = field(default_factory=list)

    def __iter__(self) -> Iterator[Course]:
        return iter(self.courses)

    def _course(self, name: str) -> Course:
        found = self.find_course(name)
        if found is not None:
            return found
        course = Course(name)
        self.courses.append(course)
        return course

    @classmethod
    def extract_structure(cls, book: Book) -> tuple["Courses", Book]:
        """Read the course structure from ``book``, stripping frontmatter as it goes."""
        courses = cls()
        course_name: str | None = None
        session_name: str | None = None

        for item in book.sections:
            if not isinstance(item, Chapter):
                continue
            frontmatter = _strip_frontmatter(item)

            if frontmatter.course is not None:
                session_name = None
                course_name = None if frontmatter.course == "none" else frontmatter.course
            if frontmatter.session is not None:
                session_name = frontmatter.session

            if course_name is not None and session_name is None:
                raise CourseStructureError(
                    f"{_describe(item.path)}: 'session' must appear in frontmatter "
                    "when 'course' appears"
                )

            if course_name is not None and session_name is not None:
                session = courses._course(course_name)._session(session_name)
                session._target += frontmatter.target_minutes or 0
                session._add_segment(frontmatter, item)

        return courses, book

    def find_course(self, name: str) -> Course | None:
        """Return the course called ``name``, or None."""
        return next((course for course in self.courses if course.name == name), None)

    def find_slide(
        self, chapter: Chapter
    ) -> tuple[Course, Session, Segment, Slide] | None:
        """Return the course, session, segment and slide that hold ``chapter``."""
        if chapter.source_path is None:
            return None
        for course in self.courses:
            for session in course.sessions:
                for segment in session.segments:
                    for slide in segment.slides:
                        if chapter.source_path in slide.source_paths:
                            return course, session, segment, slide
        return None