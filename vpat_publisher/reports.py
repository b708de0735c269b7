"""Locate and read the most recently created VPAT report."""
from __future__ import annotations

import os
from typing import Callable

from .errors import EmptyDirectory, NotADirectory

TimestampFunc = Callable[[str], float]


def creation_time(path: str) -> float:
    """Return the creation timestamp of *path* in seconds.

    ``st_birthtime`` is only reported on some platforms (macOS, the BSDs and
    Windows on newer interpreters); elsewhere ``st_ctime`` is the closest
    available value.
    """

    stat = os.stat(path)
    birthtime = getattr(stat, "st_birthtime", None)
    if birthtime:
        return birthtime
    return stat.st_ctime


def select_most_recent(directory: str, *, timestamp: TimestampFunc = creation_time) -> str:
    """Return the path of the newest entry directly inside *directory*.

    *directory* itself must be a real directory, not a symlink to one.  Every
    entry is a candidate regardless of its name or type.  Entries are
    stably sorted by ascending *timestamp*, so among entries sharing the newest
    timestamp the one enumerated last wins.
    """

    if os.path.islink(directory) or not os.path.isdir(directory):
        raise NotADirectory(directory)

    entries = os.listdir(directory)
    if not entries:
        raise EmptyDirectory(directory)

    ordered = sorted(entries, key=lambda name: timestamp(os.path.join(directory, name)))
    return os.path.join(directory, ordered[-1])


def read_report(path: str) -> str:
    """Return the contents of the report at *path* decoded as UTF-8."""

    with open(path, "r", encoding="utf-8") as fh:
        return fh.read()


__all__ = ["creation_time", "read_report", "select_most_recent"]
