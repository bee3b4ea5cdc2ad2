"""
Entry domain entity: one item reported by a backend listing call.
"""

import posixpath
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EntryKind(str, Enum):
    """Type of a storage entry."""

    FILE = "file"
    DIRECTORY = "dir"


def normalize_path(path: Optional[str]) -> str:
    """
    Normalize a disk path to its absolute, slash-separated form.

    Args:
        path: Path as typed by the user or produced by a backend

    Returns:
        Path starting with "/" and without a trailing slash ("/" for the root)
    """
    raw = (path or "").strip().replace("\\", "/")
    if raw in ("", ".", "/"):
        return "/"
    return posixpath.normpath("/" + raw.lstrip("/"))


def join_path(directory: str, name: str) -> str:
    """Join a directory path and a child name."""
    if directory == "/":
        return "/" + name
    return f"{directory}/{name}"


@dataclass(frozen=True)
class Entry:
    """
    Raw file-or-directory item as produced by a storage backend.

    ``size`` and ``modified_at`` are only set when the backend supplied them
    during the listing call itself.
    """

    path: str
    kind: EntryKind
    size: Optional[int] = None
    modified_at: Optional[int] = None

    def __post_init__(self):
        if not self.path.startswith("/"):
            raise ValueError(f"Entry path must be absolute: {self.path!r}")
        if self.size is not None and self.size < 0:
            raise ValueError(f"Entry size must be non-negative: {self.size}")

    @property
    def dirname(self) -> str:
        return self.path.rsplit("/", 1)[0]

    @property
    def basename(self) -> str:
        return self.path.rsplit("/", 1)[1]

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY
