"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from storage_ls.adapters.storage.backend_factory import create_storage_backend
from storage_ls.adapters.storage.config_disk_registry import ConfigDiskRegistry
from storage_ls.config.settings import Settings
from storage_ls.ports.storage.disk_registry_port import DiskRegistryPort
from storage_ls.use_cases.listing.directory_walker import DirectoryWalker
from storage_ls.use_cases.listing.list_storage import ListStorageUseCase
from storage_ls.use_cases.listing.metadata_resolver import MetadataResolver


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._instances = {}
        self._settings = settings
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get application settings.

        Returns:
            Settings instance
        """
        if self._settings is None:
            from storage_ls.config.settings import settings

            self._settings = settings
        return self._settings

    def get_disk_registry(self) -> DiskRegistryPort:
        """
        Get disk registry adapter instance.

        Returns:
            DiskRegistryPort implementation

        Raises:
            ConfigurationError: If the disk configuration cannot be loaded
        """
        if "disk_registry" not in self._instances:
            self._instances["disk_registry"] = ConfigDiskRegistry.from_file(
                self.get_settings().config_path, self._logger
            )
        return self._instances["disk_registry"]

    def get_directory_walker(self) -> DirectoryWalker:
        """
        Get the traversal engine with its metadata resolver.

        Returns:
            Configured DirectoryWalker
        """
        if "directory_walker" not in self._instances:
            self._instances["directory_walker"] = DirectoryWalker(
                MetadataResolver(self._logger), self._logger
            )
        return self._instances["directory_walker"]

    def get_list_storage_use_case(self) -> ListStorageUseCase:
        """
        Get list storage use case with injected dependencies.

        Returns:
            Configured ListStorageUseCase
        """
        if "list_storage_use_case" not in self._instances:
            self._instances["list_storage_use_case"] = ListStorageUseCase(
                self.get_disk_registry(),
                create_storage_backend,
                self.get_directory_walker(),
                self._logger,
            )
        return self._instances["list_storage_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
