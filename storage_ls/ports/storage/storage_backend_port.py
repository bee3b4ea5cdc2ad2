"""
Storage backend port interface defining the contract for read-only listings.
"""

from abc import ABC, abstractmethod

from storage_ls.entities.entry import Entry


class StorageBackendPort(ABC):
    """
    Port interface for a storage driver behind a disk.

    Drivers differ in what a listing call reports. They declare it through
    two capability flags instead of letting callers probe with failing calls:

    - ``supports_eager_metadata``: ``list_entries`` already fills in every
      size and timestamp the driver knows; an absent value is unavailable.
    - ``supports_directory_metadata``: ``file_size``/``last_modified`` can
      answer for directories, not only files.
    """

    supports_eager_metadata: bool = False
    supports_directory_metadata: bool = False

    @abstractmethod
    def list_entries(self, path: str) -> list[Entry]:
        """
        List the direct children of a directory.

        Args:
            path: Absolute, normalized directory path within the disk

        Returns:
            Entries in the driver's own order

        Raises:
            PathNotFoundError: If the directory does not exist
            BackendListingError: If listing fails for any other reason
        """
        pass

    @abstractmethod
    def file_size(self, path: str) -> int:
        """
        Get the size of an entry in bytes.

        Raises:
            MetadataFetchError: If the size cannot be determined
        """
        pass

    @abstractmethod
    def last_modified(self, path: str) -> int:
        """
        Get the modification time of an entry as a Unix timestamp (UTC).

        Raises:
            MetadataFetchError: If the timestamp cannot be determined
        """
        pass
