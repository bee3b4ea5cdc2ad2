"""
Use case for listing the contents of a storage disk.
"""

import logging
from typing import Callable, Iterator, Optional

from storage_ls.adapters.storage.backend_factory import create_storage_backend
from storage_ls.entities.disk import DiskConfig, DiskSummary
from storage_ls.entities.entry import normalize_path
from storage_ls.entities.listing_request import ListingRequest
from storage_ls.entities.record import RenderedLine
from storage_ls.exceptions import ConfigurationError, InvalidDiskError
from storage_ls.ports.storage.disk_registry_port import DiskRegistryPort
from storage_ls.ports.storage.storage_backend_port import StorageBackendPort
from storage_ls.use_cases.listing.directory_walker import (
    DirectoryWalker,
    ListingErrorHandler,
)

BackendFactory = Callable[[DiskConfig, Optional[logging.Logger]], StorageBackendPort]


class ListStorageUseCase:
    """Use case for listing the contents of a storage disk."""

    def __init__(
        self,
        disk_registry: DiskRegistryPort,
        backend_factory: BackendFactory = create_storage_backend,
        walker: Optional[DirectoryWalker] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            disk_registry: Registry of configured disks
            backend_factory: Builds the storage backend of a disk
            walker: Traversal engine
            logger: Logger instance to use for logging
        """
        self._disk_registry = disk_registry
        self._backend_factory = backend_factory
        self._logger = logger or logging.getLogger(__name__)
        self._walker = walker or DirectoryWalker(logger=self._logger)

    def ensure_configured(self) -> None:
        """
        Check that at least one disk is configured.

        Raises:
            ConfigurationError: If no disks are defined
        """
        if not self._disk_registry.disks():
            raise ConfigurationError("No disks defined on this system")

    def available_disks(self) -> list[DiskSummary]:
        """
        Summarize the configured disks for display.

        Returns:
            One DiskSummary per disk, the default one flagged
        """
        default = self._disk_registry.default_disk()
        return [
            DiskSummary(name=d.name, driver=d.driver, is_default=d.name == default)
            for d in self._disk_registry.disks()
        ]

    def resolve_request(
        self,
        path: Optional[str] = None,
        disk: Optional[str] = None,
        recursive: bool = False,
        long_format: bool = False,
    ) -> Optional[ListingRequest]:
        """
        Work out which disk and directory to list.

        Without an explicit disk, a ``disk:path`` argument whose prefix names
        a configured disk selects that disk. Otherwise a given path is listed
        on the default disk.

        Args:
            path: Directory argument, possibly in ``disk:path`` form
            disk: Explicitly selected disk name
            recursive: Whether to descend into subdirectories
            long_format: Whether to show type, size and timestamp

        Returns:
            The ListingRequest, or None when no disk was selected and the
            caller should show the available disks instead

        Raises:
            ConfigurationError: If no disks are defined
            InvalidDiskError: If the selected disk does not exist
        """
        self.ensure_configured()

        name = disk or ""
        if not name and path:
            prefix, separator, rest = path.partition(":")
            if separator and self._disk_registry.lookup(prefix) is not None:
                name, path = prefix, rest
            else:
                name = self._disk_registry.default_disk() or ""

        if not name:
            return None

        config = self._disk_registry.lookup(name)
        if config is None:
            raise InvalidDiskError(name)

        return ListingRequest(
            disk=config,
            path=normalize_path(path),
            recursive=recursive,
            long_format=long_format,
        )

    def execute(
        self,
        request: ListingRequest,
        on_error: Optional[ListingErrorHandler] = None,
    ) -> Iterator[RenderedLine]:
        """
        List a disk directory.

        Args:
            request: What to list and how
            on_error: Receives directories that could not be listed

        Returns:
            Lazy iterator of output lines

        Raises:
            ConfigurationError: If the disk's backend cannot be built
        """
        self._logger.info(
            f"Listing disk {request.disk.name} ({request.disk.driver}) at {request.path}"
        )
        backend = self._backend_factory(request.disk, self._logger)
        return self._walker.walk(
            backend,
            request.path,
            recursive=request.recursive,
            long_format=request.long_format,
            on_error=on_error,
        )
