"""
Traversal engine producing the lines of a (possibly recursive) listing.
"""

import logging
from typing import Callable, Iterator, Optional

from storage_ls.entities.entry import Entry, normalize_path
from storage_ls.entities.record import RenderedLine
from storage_ls.exceptions import BackendListingError
from storage_ls.ports.storage.storage_backend_port import StorageBackendPort
from storage_ls.use_cases.listing.metadata_resolver import MetadataResolver
from storage_ls.use_cases.listing.renderer import header, render

ListingErrorHandler = Callable[[str, BackendListingError], None]


class DirectoryWalker:
    """
    Walks a directory tree level by level.

    All entries of a directory are rendered, in backend order, before any of
    its subdirectories is visited; subdirectories are then visited depth-first
    in the order they were encountered. Pending directories are kept on an
    explicit stack, so tree depth is not limited by the interpreter's
    recursion limit.
    """

    def __init__(
        self,
        resolver: Optional[MetadataResolver] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._logger = logger or logging.getLogger(__name__)
        self._resolver = resolver or MetadataResolver(self._logger)

    def walk(
        self,
        backend: StorageBackendPort,
        path: str,
        recursive: bool = False,
        long_format: bool = False,
        on_error: Optional[ListingErrorHandler] = None,
    ) -> Iterator[RenderedLine]:
        """
        Lazily list ``path`` and, when recursive, every directory below it.

        Args:
            backend: Storage backend of the disk
            path: Directory to start from
            recursive: Whether to descend into subdirectories
            long_format: Whether to render type, size and timestamp
            on_error: Called with the path and error when a directory cannot
                be listed; the walk then goes on with the next directory.
                Without it the error propagates to the consumer.

        Yields:
            RenderedLine for every header, separator and entry

        Raises:
            BackendListingError: If a directory cannot be listed and no
                ``on_error`` callback is given
        """
        pending = [normalize_path(path)]
        visited = 0

        while pending:
            directory = pending.pop()

            if recursive:
                if visited:
                    yield RenderedLine("")
                yield RenderedLine(header(directory))
            visited += 1

            try:
                entries = self._list(backend, directory)
            except BackendListingError as e:
                self._logger.error(f"Error listing {directory}: {e}")
                if on_error is None:
                    raise
                on_error(directory, e)
                continue

            subdirectories: list[str] = []
            for entry in entries:
                record = self._resolver.resolve(entry, backend, long_format)
                yield RenderedLine(render(record, long_format), record.kind)
                if entry.is_dir:
                    subdirectories.append(entry.path)
            self._logger.info(f"Listed {len(entries)} entries in {directory}")

            if recursive:
                # reversed so the first subdirectory is popped first
                pending.extend(reversed(subdirectories))

    def _list(self, backend: StorageBackendPort, directory: str) -> list[Entry]:
        try:
            self._logger.info(f"Listing directory: {directory}")
            return list(backend.list_entries(directory))
        except BackendListingError:
            raise
        except Exception as e:
            raise BackendListingError(f"Failed to list {directory}: {str(e)}")
