"""devblog: a personal developer blog with table-of-contents outlines."""

__version__ = "0.1.0"
