"""Repository Tracker - in-memory catalog of code repositories with likes/dislikes."""

__version__ = "0.1.0"
