"""
In-memory storage adapter: a configurable tree of files and directories.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from typing_extensions import override

from storage_ls.entities.entry import Entry, EntryKind, join_path, normalize_path
from storage_ls.exceptions import MetadataFetchError, PathNotFoundError
from storage_ls.ports.storage.storage_backend_port import StorageBackendPort


@dataclass
class _Node:
    kind: EntryKind
    size: Optional[int] = None
    modified_at: Optional[int] = None
    children: list[str] = field(default_factory=list)


class InMemoryStorageAdapter(StorageBackendPort):
    """
    Storage backend holding its tree in memory.

    Children are listed in insertion order. The capability flags are set per
    instance so the same adapter can stand in for an eager driver, a driver
    that needs follow-up calls, or one that knows nothing about directories.
    """

    def __init__(
        self,
        tree: Optional[Mapping[str, Any]] = None,
        eager_metadata: bool = True,
        directory_metadata: bool = False,
    ):
        """
        Initialize the adapter.

        Args:
            tree: Nested mapping; a mapping (or null) value is a directory, an int is a file size
            eager_metadata: Whether listings carry sizes and timestamps
            directory_metadata: Whether follow-up calls answer for directories
        """
        self.supports_eager_metadata = eager_metadata
        self.supports_directory_metadata = directory_metadata
        self._nodes: dict[str, _Node] = {"/": _Node(EntryKind.DIRECTORY)}
        if tree:
            self._load_tree("/", tree)

    def _load_tree(self, directory: str, tree: Mapping[str, Any]) -> None:
        for name, value in tree.items():
            path = join_path(directory, str(name))
            if value is None or isinstance(value, Mapping):
                self.add_directory(path)
                self._load_tree(path, value or {})
            else:
                size = int(value)
                if size < 0:
                    raise ValueError(f"Negative size for {path}: {size}")
                self.add_file(path, size=size)

    def _attach(self, path: str, node: _Node) -> None:
        parent, name = path.rsplit("/", 1)
        parent = parent or "/"
        if parent not in self._nodes:
            self.add_directory(parent)
        parent_node = self._nodes[parent]
        if parent_node.kind is not EntryKind.DIRECTORY:
            raise ValueError(f"Parent is not a directory: {parent}")
        if path not in self._nodes:
            parent_node.children.append(name)
        self._nodes[path] = node

    def add_file(
        self, path: str, size: Optional[int] = None, modified_at: Optional[int] = None
    ) -> None:
        """Add (or replace) a file, creating missing parent directories."""
        self._attach(normalize_path(path), _Node(EntryKind.FILE, size, modified_at))

    def add_directory(
        self,
        path: str,
        size: Optional[int] = None,
        modified_at: Optional[int] = None,
    ) -> None:
        """Add a directory, creating missing parent directories."""
        path = normalize_path(path)
        if path == "/":
            return
        existing = self._nodes.get(path)
        node = _Node(EntryKind.DIRECTORY, size, modified_at)
        if existing is not None and existing.kind is EntryKind.DIRECTORY:
            node.children = existing.children
        self._attach(path, node)

    def _node(self, path: str) -> _Node:
        node = self._nodes.get(normalize_path(path))
        if node is None:
            raise PathNotFoundError(f"Directory does not exist: {path}")
        return node

    @override
    def list_entries(self, path: str) -> list[Entry]:
        directory = normalize_path(path)
        node = self._node(directory)
        if node.kind is not EntryKind.DIRECTORY:
            raise PathNotFoundError(f"Path is not a directory: {directory}")

        entries: list[Entry] = []
        for name in node.children:
            child_path = join_path(directory, name)
            child = self._nodes[child_path]
            if self.supports_eager_metadata:
                entries.append(
                    Entry(child_path, child.kind, child.size, child.modified_at)
                )
            else:
                entries.append(Entry(child_path, child.kind))
        return entries

    @override
    def file_size(self, path: str) -> int:
        node = self._nodes.get(normalize_path(path))
        if node is None or node.size is None:
            raise MetadataFetchError(f"Cannot get file size of {path}")
        return node.size

    @override
    def last_modified(self, path: str) -> int:
        node = self._nodes.get(normalize_path(path))
        if node is None or node.modified_at is None:
            raise MetadataFetchError(f"Cannot get modification time of {path}")
        return node.modified_at
