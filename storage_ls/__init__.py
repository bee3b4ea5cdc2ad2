"""storage_ls package: list configured storage disks, recursively and in long format.

Submodules are imported directly (``storage_ls.cli``, ``storage_ls.container``);
nothing is re-exported at package level.
"""

__all__: list[str] = []
