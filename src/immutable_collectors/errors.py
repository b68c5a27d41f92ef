"""Errors raised while building immutable collections."""

from __future__ import annotations
from typing import Any


class CollectorError(Exception):
    """Base class for errors raised by immutable_collectors."""


class NullElementError(CollectorError, ValueError):
    """A None element, key or value reached a builder that forbids it."""

    def __init__(self, role: str = "element"):
        self.role = role
        super().__init__(f"null {role} is not allowed in an immutable collection")


class DuplicateKeyError(CollectorError, ValueError):
    """Two entries of an immutable map have equal keys."""

    def __init__(self, key: Any, first: Any, second: Any):
        self.key = key
        self.first = first
        self.second = second
        super().__init__(
            f"Multiple entries with same key: {key!r}={first!r} and {key!r}={second!r}"
        )
