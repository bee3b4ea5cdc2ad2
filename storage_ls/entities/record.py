"""
Record domain entity: an entry whose metadata has been resolved.
"""

from dataclasses import dataclass
from typing import Optional

from storage_ls.entities.entry import Entry, EntryKind


@dataclass(frozen=True)
class Record:
    """
    Canonical listing record ready for rendering.

    ``None`` in ``size`` or ``modified_at`` means the value is unavailable:
    the backend could not report it. It never stands for zero.
    """

    path: str
    kind: EntryKind
    size: Optional[int] = None
    modified_at: Optional[int] = None

    @classmethod
    def from_entry(
        cls,
        entry: Entry,
        size: Optional[int] = None,
        modified_at: Optional[int] = None,
    ) -> "Record":
        return cls(path=entry.path, kind=entry.kind, size=size, modified_at=modified_at)

    @property
    def basename(self) -> str:
        return self.path.rsplit("/", 1)[1]

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class RenderedLine:
    """One line of listing output.

    ``kind`` is set for entry lines and ``None`` for headers and separators,
    so callers can style directories without parsing the text.
    """

    text: str
    kind: Optional[EntryKind] = None

    def __str__(self) -> str:
        return self.text
