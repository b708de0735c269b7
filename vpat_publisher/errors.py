"""Exceptions raised while publishing a VPAT."""
from __future__ import annotations

from typing import Optional


class VpatError(Exception):
    """Base class for failures detected by the publisher itself."""


class MissingConfiguration(VpatError):
    """A required action input is absent or empty."""

    def __init__(self, name: str, message: Optional[str] = None) -> None:
        self.name = name
        super().__init__(message or f"Input {name} is required")


class MissingCredentialField(MissingConfiguration):
    """One of the S3 credential or location inputs is empty."""

    def __init__(self, name: str, label: str) -> None:
        self.label = label
        super().__init__(name, f"Missing {label}")


class NotADirectory(VpatError):
    """The report location does not point at a directory."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"VPAT location is not a directory: {location}")


class EmptyDirectory(VpatError):
    """The report location contains no entries."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"VPAT location contains no files: {location}")


class StylesheetNotFound(VpatError):
    """The stylesheet path does not point at a regular file."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"Stylesheet location is not a file: {location}")


__all__ = [
    "EmptyDirectory",
    "MissingConfiguration",
    "MissingCredentialField",
    "NotADirectory",
    "StylesheetNotFound",
    "VpatError",
]
