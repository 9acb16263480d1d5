from pathlib import PurePosixPath

from coursebook.book import Chapter
from coursebook.course import Slide
from coursebook.timing_info import insert_timing_info


def chapter(path, content):
    return Chapter(name="C", content=content, source_path=path)


def test_inserts_plural_minutes():
    slide = Slide("S", 5, [PurePosixPath("s.md")])
    ch = chapter("s.md", "Body\n<details>\nNotes")
    insert_timing_info(slide, ch)
    assert ch.content == "Body\n<details>\nThis slide should take about 5 minutes. \nNotes"


def test_single_minute():
    slide = Slide("S", 1, [PurePosixPath("s.md")])
    ch = chapter("s.md", "<details>")
    insert_timing_info(slide, ch)
    assert ch.content == "<details>\nThis slide should take about 1 minute. "


def test_mentions_sub_slides():
    slide = Slide("S", 7, [PurePosixPath("s.md"), PurePosixPath("s/t.md")])
    ch = chapter("s.md", "<details>")
    insert_timing_info(slide, ch)
    assert "and its sub-slides should take about 7 minutes. " in ch.content


def test_skips_sub_chapter():
    slide = Slide("S", 7, [PurePosixPath("s.md"), PurePosixPath("s/t.md")])
    ch = chapter("s/t.md", "<details>")
    insert_timing_info(slide, ch)
    assert ch.content == "<details>"


def test_skips_zero_minutes():
    slide = Slide("S", 0, [PurePosixPath("s.md")])
    ch = chapter("s.md", "<details>")
    insert_timing_info(slide, ch)
    assert ch.content == "<details>"


def test_skips_without_details():
    slide = Slide("S", 3, [PurePosixPath("s.md")])
    ch = chapter("s.md", "No notes here")
    insert_timing_info(slide, ch)
    assert ch.content == "No notes here"