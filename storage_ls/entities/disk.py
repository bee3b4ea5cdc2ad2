"""
Disk domain entities.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DiskConfig:
    """A named, configured root within a storage driver."""

    name: str
    driver: str
    options: dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class DiskSummary:
    """One row of the available disks table."""

    name: str
    driver: str
    is_default: bool = False

    @property
    def label(self) -> str:
        return self.name + (" [*]" if self.is_default else "")
