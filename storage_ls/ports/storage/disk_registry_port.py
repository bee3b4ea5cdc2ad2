"""
Disk registry port interface: which disks exist and how they are configured.
"""

from abc import ABC, abstractmethod
from typing import Optional

from storage_ls.entities.disk import DiskConfig


class DiskRegistryPort(ABC):
    """Port interface for disk configuration lookups."""

    @abstractmethod
    def disks(self) -> list[DiskConfig]:
        """
        Get every configured disk, in configuration order.

        Returns:
            List of DiskConfig entities (empty when nothing is configured)
        """
        pass

    @abstractmethod
    def lookup(self, name: str) -> Optional[DiskConfig]:
        """
        Find a disk by name.

        Args:
            name: Disk name

        Returns:
            The disk configuration, or None if no such disk exists
        """
        pass

    @abstractmethod
    def default_disk(self) -> Optional[str]:
        """Name of the default disk, if one is configured."""
        pass
