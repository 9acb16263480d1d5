from pathlib import PurePosixPath

import pytest

from coursebook.book import Book, Chapter, PartTitle, Separator
from coursebook.course import (
    BREAK_DURATION,
    CourseStructureError,
    Courses,
    Segment,
    Session,
    Slide,
)
from coursebook.frontmatter import FrontmatterError
from coursebook.markdown import duration


def with_fm(body="", **fields):
    lines = "".join(f"{key}: {value}\n" for key, value in fields.items())
    return f"---\n{lines}---\n{body}"


def chap(name, path, content="", sub_items=()):
    return Chapter(
        name=name, content=content, path=path, source_path=path, sub_items=list(sub_items)
    )


def make_book():
    intro = chap("Welcome", "welcome.md", with_fm("Welcome!", course="none"))
    hello = chap(
        "Hello",
        "hello.md",
        with_fm(
            "<details>notes</details>",
            course="Fundamentals",
            session="Morning",
            minutes=5,
            target_minutes=60,
        ),
        sub_items=[
            chap(
                "Types",
                "hello/types.md",
                with_fm("types", minutes=10),
                sub_items=[chap("Ints", "hello/types/ints.md", with_fm("ints", minutes=3))],
            ),
            Separator(),
        ],
    )
    loops = chap("Loops", "loops.md", with_fm("loops", minutes=20))
    android = chap(
        "Android",
        "android.md",
        with_fm("android", course="Android", session="Afternoon", minutes=15),
    )
    return Book([intro, PartTitle("Part"), hello, loops, Separator(), android])


@pytest.fixture
def extracted():
    return Courses.extract_structure(make_book())


def test_courses_in_order(extracted):
    courses, _ = extracted
    assert [course.name for course in courses] == ["Fundamentals", "Android"]


def test_sessions_and_segments(extracted):
    courses, _ = extracted
    fundamentals = courses.find_course("Fundamentals")
    assert [s.name for s in fundamentals] == ["Morning"]
    assert [seg.name for seg in fundamentals.sessions[0]] == ["Hello", "Loops"]


def test_slides_collect_sub_chapters(extracted):
    courses, _ = extracted
    hello = courses.find_course("Fundamentals").sessions[0].segments[0]
    assert [slide.name for slide in hello] == ["Hello", "Types"]
    types = hello.slides[1]
    assert types.source_paths == [
        PurePosixPath("hello/types.md"),
        PurePosixPath("hello/types/ints.md"),
    ]
    assert types.minutes == 10 + 3
    assert hello.slides[0].source_paths == [PurePosixPath("hello.md")]


def test_frontmatter_stripped(extracted):
    _, book = extracted
    for chapter in book.iter_chapters():
        assert not chapter.content.startswith("---")
    assert book.sections[0].content == "Welcome!"
    assert book.sections[2].content == "<details>notes</details>"


def test_session_minutes_include_breaks(extracted):
    courses, _ = extracted
    session = courses.find_course("Fundamentals").sessions[0]
    assert session.minutes() == 48
    assert session.target_minutes() == 60


def test_target_falls_back_to_minutes(extracted):
    courses, _ = extracted
    android = courses.find_course("Android")
    assert android.sessions[0].target_minutes() == 15
    assert android.minutes() == 15
    assert android.target_minutes() == android.minutes()


def test_course_minutes_sum_sessions():
    book = Book(
        [
            chap("A", "a.md", with_fm(course="C", session="S1", minutes=20)),
            chap("B", "b.md", with_fm(session="S2", minutes=30)),
        ]
    )
    courses, _ = Courses.extract_structure(book)
    course = courses.find_course("C")
    assert [s.name for s in course] == ["S1", "S2"]
    assert course.minutes() == sum(s.minutes() for s in course)
    assert course.minutes() == 20 + 30


def test_zero_minute_segments_add_no_break():
    session = Session("S", [Segment("Welcome", [Slide("Welcome", 0, [PurePosixPath("w.md")])]),
                            Segment("Work", [Slide("Work", 20, [PurePosixPath("x.md")])])])
    assert session.minutes() == 20


def test_empty_session_has_no_minutes():
    assert Session("Empty").minutes() == 0
    assert Session("Empty").target_minutes() == 0


def test_breaks_between_three_segments():
    session = Session(
        "S",
        [
            Segment("A", [Slide("A", 10, [PurePosixPath("a.md")])]),
            Segment("B", [Slide("B", 20, [PurePosixPath("b.md")])]),
            Segment("C", [Slide("C", 10, [PurePosixPath("c.md")])]),
        ],
    )
    assert session.minutes() == 60
    assert BREAK_DURATION == 10


def test_same_names_merge():
    book = Book(
        [
            chap("A", "a.md", with_fm(course="C", session="S", minutes=5, target_minutes=20)),
            chap("B", "b.md", with_fm(course="D", session="S")),
            chap("E", "e.md", with_fm(course="C", session="S", target_minutes=30)),
        ]
    )
    courses, _ = Courses.extract_structure(book)
    assert [c.name for c in courses] == ["C", "D"]
    course = courses.find_course("C")
    assert len(course.sessions) == 1
    assert [seg.name for seg in course.sessions[0]] == ["A", "E"]
    assert course.sessions[0].target_minutes() == 20 + 30


def test_course_without_session_fails():
    book = Book([chap("A", "a.md", with_fm(course="C"))])
    with pytest.raises(CourseStructureError, match="'session' must appear"):
        Courses.extract_structure(book)


def test_course_resets_session():
    book = Book(
        [
            chap("A", "a.md", with_fm(course="C", session="S")),
            chap("B", "b.md", with_fm(course="D")),
        ]
    )
    with pytest.raises(CourseStructureError):
        Courses.extract_structure(book)


def test_course_none_ends_course():
    book = Book(
        [
            chap("A", "a.md", with_fm(course="C", session="S", minutes=5)),
            chap("B", "b.md", with_fm(course="none")),
            chap("C", "c.md", with_fm(minutes=7)),
        ]
    )
    courses, _ = Courses.extract_structure(book)
    assert [seg.name for seg in courses.find_course("C").sessions[0]] == ["A"]


def test_sub_slide_may_not_set_course():
    book = Book(
        [
            chap(
                "A",
                "a.md",
                with_fm(course="C", session="S"),
                sub_items=[
                    chap("B", "a/b.md", sub_items=[chap("X", "a/b/x.md", with_fm(session="T"))])
                ],
            )
        ]
    )
    with pytest.raises(CourseStructureError, match="sub-slides"):
        Courses.extract_structure(book)


def test_bad_frontmatter_propagates():
    book = Book([chap("A", "a.md", "---\nminutes: [1\n---\n")])
    with pytest.raises(FrontmatterError):
        Courses.extract_structure(book)


def test_find_course_missing(extracted):
    courses, _ = extracted
    assert courses.find_course("Nope") is None


def test_find_slide(extracted):
    courses, book = extracted
    ints = book.sections[2].sub_items[0].sub_items[0]
    course, session, segment, slide = courses.find_slide(ints)
    assert (course.name, session.name, segment.name, slide.name) == (
        "Fundamentals",
        "Morning",
        "Hello",
        "Types",
    )
    assert slide.is_sub_chapter(ints)
    assert not slide.is_sub_chapter(book.sections[2].sub_items[0])


def test_find_slide_outside_course(extracted):
    courses, book = extracted
    assert courses.find_slide(book.sections[0]) is None
    assert courses.find_slide(Chapter(name="No path")) is None


def test_segment_outline():
    segment = Segment(
        "Seg",
        [
            Slide("Intro", 0, [PurePosixPath("seg.md")]),
            Slide("A", 10, [PurePosixPath("a.md")]),
        ],
    )
    assert segment.outline("intro.md") == (
        "In this segment:\n * [A](./a.md) (10 minutes)\n\n"
        "This segment should take about 10 minutes\n"
    )


def test_session_outline():
    session = Session("Morning", [Segment("Seg", [Slide("Seg", 10, [PurePosixPath("seg.md")])])])
    assert session.outline("intro.md") == (
        "In this session:\n * [Seg](./seg.md) (10 minutes)\n\n"
        "Including 10 minute breaks, this session should take about 10 minutes\n"
    )


def test_course_schedule(extracted):
    courses, _ = extracted
    android = courses.find_course("Android")
    schedule = android.schedule("intro.md")
    assert schedule.startswith("Course schedule:\n * Afternoon (")
    assert f"   * [Android](./android.md) ({duration(15)})\n" in schedule