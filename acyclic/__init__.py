"""Directed acyclic graphs with cached ancestry, walks, flows and JSON storage."""

__version__ = "1.0.0"

__all__ = [
    "cli",
    "dag",
    "errors",
    "flow",
    "marshal",
    "options",
    "relatives",
    "storage",
    "visitor",
    "walk",
]