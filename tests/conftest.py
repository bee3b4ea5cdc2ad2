"""
Pytest configuration and shared fixtures.
"""

import os
from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest

from storage_ls.adapters.storage.memory_adapter import InMemoryStorageAdapter
from storage_ls.container import DependencyContainer
from storage_ls.entities.entry import Entry
from storage_ls.ports.storage.storage_backend_port import StorageBackendPort

A_TXT_MTIME = 1700000000


@pytest.fixture
def temp_directory(tmp_path):
    """
    Create a temporary directory tree for testing the local adapter.

    Returns:
        Path to the temporary directory
    """
    temp_dir = str(tmp_path / "disk")
    os.makedirs(temp_dir)
    with open(os.path.join(temp_dir, "test1.txt"), "w") as f:
        f.write("This is a test file.")

    with open(os.path.join(temp_dir, "empty.txt"), "w"):
        pass

    subdir = os.path.join(temp_dir, "subdir")
    os.makedirs(subdir)
    with open(os.path.join(subdir, "test3.md"), "w") as f:
        f.write("# Test Markdown\n\nThis is a test.")

    os.utime(os.path.join(temp_dir, "test1.txt"), (A_TXT_MTIME, A_TXT_MTIME))
    return temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def scenario_backend():
    """
    Disk with ``/a.txt`` (10 bytes) and ``/sub`` holding ``/sub/b.txt`` (5 bytes).

    Returns:
        Eager in-memory backend
    """
    backend = InMemoryStorageAdapter()
    backend.add_file("/a.txt", size=10, modified_at=A_TXT_MTIME)
    backend.add_directory("/sub")
    backend.add_file("/sub/b.txt", size=5, modified_at=A_TXT_MTIME)
    return backend


@pytest.fixture
def make_backend() -> Callable[..., MagicMock]:
    """
    Build a mocked backend from a ``{directory: [entries]}`` listing map.

    Follow-up calls fail unless side effects are configured by the test.
    """

    def _make(
        listing: dict[str, list[Entry]],
        eager: bool = False,
        directory_metadata: bool = False,
        file_size: Optional[Callable[[str], int]] = None,
    ) -> MagicMock:
        backend = MagicMock(spec=StorageBackendPort)
        backend.supports_eager_metadata = eager
        backend.supports_directory_metadata = directory_metadata
        backend.list_entries.side_effect = lambda path: list(listing[path])
        backend.file_size.side_effect = file_size or RuntimeError("no size")
        backend.last_modified.side_effect = RuntimeError("no mtime")
        return backend

    return _make


@pytest.fixture
def disk_config_file(tmp_path, temp_directory):
    """
    Write a disk configuration with a local disk and an in-memory disk.

    Returns:
        Path to the YAML file
    """
    path = tmp_path / "storage.yaml"
    path.write_text(
        "filesystems:\n"
        "  default: local\n"
        "  disks:\n"
        "    local:\n"
        "      driver: local\n"
        f"      root: {temp_directory}\n"
        "    scratch:\n"
        "      driver: memory\n"
        "      tree:\n"
        "        notes.txt: 12\n"
        "        logs:\n"
        "          app.log: 300\n",
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
