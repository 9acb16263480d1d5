"""Course structure, schedules, slide timings and exercise extraction for mdBook books."""

__version__ = "0.1.0"