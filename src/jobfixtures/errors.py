"""Error types raised by fixture generation."""

from __future__ import annotations


class FixtureError(Exception):
    """Base class for fixture generation failures."""


class InvalidArgumentError(FixtureError, ValueError):
    """Caller passed an argument outside the accepted domain."""


class FixtureIOError(FixtureError, OSError):
    """Filesystem failure detected by the fixture code itself."""


class ClassNotFoundOnDiskError(FixtureIOError):
    """The compiled class file for a requested class name does not exist."""

    def __init__(self, class_name: str, class_file: object) -> None:
        super().__init__(f"compiled class {class_name!r} not found at {class_file}")
        self.class_name = class_name
        self.class_file = class_file
