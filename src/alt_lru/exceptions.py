"""Custom exception classes.

Separates construction, configuration and script errors so callers can
handle each category explicitly.
"""

from __future__ import annotations


class CacheError(Exception):
    """Base class for alt-lru errors."""


class InvalidCapacityError(CacheError, ValueError):
    """Capacity error

    Raised when a cache is constructed with a capacity below 1.
    """

    def __init__(self, capacity: object) -> None:
        self.capacity = capacity
        super().__init__(f"capacity must be a positive integer, got {capacity!r}")


class ConfigurationError(CacheError):
    """Raised when an environment variable cannot be parsed."""


class ScriptError(CacheError):
    """Script error

    Raised for a malformed line in an operation script.
    """

    def __init__(self, line_no: int, message: str) -> None:
        self.line_no = line_no
        super().__init__(f"[line {line_no}] {message}")
