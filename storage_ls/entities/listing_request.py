"""
Listing request value object.
"""

from dataclasses import dataclass

from storage_ls.entities.disk import DiskConfig


@dataclass(frozen=True)
class ListingRequest:
    """Parameters of one walk invocation."""

    disk: DiskConfig
    path: str = "/"
    recursive: bool = False
    long_format: bool = False
