"""
Disk registry adapter backed by a ``filesystems`` configuration mapping.
"""

import logging
import os
from typing import Any, Mapping, Optional

import yaml
from typing_extensions import override

from storage_ls.entities.disk import DiskConfig
from storage_ls.exceptions import ConfigurationError
from storage_ls.ports.storage.disk_registry_port import DiskRegistryPort


class ConfigDiskRegistry(DiskRegistryPort):
    """
    Disk registry reading the ``filesystems`` section of a configuration.

    Expected shape::

        filesystems:
          default: local
          disks:
            local:
              driver: local
              root: /var/data
    """

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the registry.

        Args:
            config: Parsed configuration (the document containing ``filesystems``)
            logger: Logger instance to use for logging

        Raises:
            ConfigurationError: If the ``filesystems`` section is malformed
        """
        self._logger = logger or logging.getLogger(__name__)
        filesystems = (config or {}).get("filesystems") or {}
        if not isinstance(filesystems, Mapping):
            raise ConfigurationError("'filesystems' must be a mapping")

        disks = filesystems.get("disks") or {}
        if not isinstance(disks, Mapping):
            raise ConfigurationError("'filesystems.disks' must be a mapping")

        self._disks: dict[str, DiskConfig] = {}
        for name, options in disks.items():
            if options is not None and not isinstance(options, Mapping):
                raise ConfigurationError(f'Disk "{name}" must be a mapping')
            options = dict(options or {})
            driver = str(options.pop("driver", None) or "unknown")
            self._disks[str(name)] = DiskConfig(
                name=str(name), driver=driver, options=options
            )

        default = filesystems.get("default")
        self._default: Optional[str] = str(default) if default else None

    @classmethod
    def from_file(
        cls, path: str, logger: Optional[logging.Logger] = None
    ) -> "ConfigDiskRegistry":
        """
        Load the registry from a YAML file.

        A missing file yields an empty registry.

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        log = logger or logging.getLogger(__name__)
        path = os.path.expanduser(path)
        if not os.path.exists(path):
            log.info(f"No disk configuration found at {path}")
            return cls({}, logger)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot load disk configuration {path}: {e}")
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"Disk configuration {path} must be a mapping")
        log.info(f"Loaded disk configuration from {path}")
        return cls(data, logger)

    @override
    def disks(self) -> list[DiskConfig]:
        return list(self._disks.values())

    @override
    def lookup(self, name: str) -> Optional[DiskConfig]:
        return self._disks.get(name)

    @override
    def default_disk(self) -> Optional[str]:
        return self._default
