"""
Factory building a storage backend from a disk configuration.
"""

import logging
from typing import Optional

from storage_ls.adapters.storage.local_fs_adapter import LocalFileSystemAdapter
from storage_ls.adapters.storage.memory_adapter import InMemoryStorageAdapter
from storage_ls.entities.disk import DiskConfig
from storage_ls.exceptions import ConfigurationError
from storage_ls.ports.storage.storage_backend_port import StorageBackendPort


def _as_bool(value: object, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() not in ("0", "false", "no", "off")
    return bool(value)


def create_storage_backend(
    disk: DiskConfig, logger: Optional[logging.Logger] = None
) -> StorageBackendPort:
    """
    Build the backend for a disk according to its driver.

    Raises:
        ConfigurationError: If the driver is unknown or misconfigured
    """
    options = disk.options
    eager = _as_bool(options.get("eager_metadata"), True)

    if disk.driver == "local":
        root = options.get("root")
        if not root:
            raise ConfigurationError(f'Disk "{disk.name}" has no root configured')
        return LocalFileSystemAdapter(str(root), eager_metadata=eager, logger=logger)

    if disk.driver == "memory":
        tree = options.get("tree") or {}
        if not isinstance(tree, dict):
            raise ConfigurationError(f'Disk "{disk.name}" tree must be a mapping')
        try:
            return InMemoryStorageAdapter(
                tree,
                eager_metadata=eager,
                directory_metadata=_as_bool(options.get("directory_metadata"), False),
            )
        except Exception as e:
            raise ConfigurationError(f'Disk "{disk.name}" tree is invalid: {e}')

    raise ConfigurationError(
        f'Disk "{disk.name}" uses unsupported driver "{disk.driver}"'
    )
