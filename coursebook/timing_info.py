"""Timing notes added to a slide's speaker notes."""

from __future__ import annotations

from coursebook.book import Chapter
from coursebook.course import Slide

__all__ = ["insert_timing_info"]

_DETAILS = "<details>"


def insert_timing_info(slide: Slide, chapter: Chapter) -> None:
    """Prepend the slide's expected duration to the speaker notes of ``chapter``."""
    if slide.minutes <= 0 or slide.is_sub_chapter(chapter) or _DETAILS not in chapter.content:
        return
    plural = "minute" if slide.minutes == 1 else "minutes"
    subslides = "and its sub-slides " if len(slide.source_paths) > 1 else ""
    message = f"This slide {subslides}should take about {slide.minutes} {plural}. "
    chapter.content = chapter.content.replace(_DETAILS, f"{_DETAILS}\n{message}")