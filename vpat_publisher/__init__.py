"""Publish the most recent Markdown VPAT as a styled HTML document."""

from __future__ import annotations

from .errors import (
    EmptyDirectory,
    MissingConfiguration,
    MissingCredentialField,
    NotADirectory,
    StylesheetNotFound,
    VpatError,
)
from .inputs import get_required_value, load_convert_settings, load_upload_settings
from .render import MarkdownRenderer, load_stylesheet, render
from .reports import read_report, select_most_recent
from .sinks import object_key, upload_remote, write_local

__all__ = [
    "EmptyDirectory",
    "MarkdownRenderer",
    "MissingConfiguration",
    "MissingCredentialField",
    "NotADirectory",
    "StylesheetNotFound",
    "VpatError",
    "get_required_value",
    "load_convert_settings",
    "load_stylesheet",
    "load_upload_settings",
    "object_key",
    "read_report",
    "render",
    "select_most_recent",
    "upload_remote",
    "write_local",
]
