import argparse
import logging
import sys

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from storage_ls.config.settings import Settings
from storage_ls.container import DependencyContainer
from storage_ls.entities.entry import EntryKind
from storage_ls.exceptions import (
    BackendListingError,
    ConfigurationError,
    InvalidDiskError,
)
from storage_ls.use_cases.listing.list_storage import ListStorageUseCase


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storage-ls",
        description="List the contents of a file storage disk.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to list; 'disk:path' selects a disk when --disk is not given",
    )
    parser.add_argument("-d", "--disk", default=None, help="Select the storage disk")
    parser.add_argument(
        "-l",
        "--long",
        action="store_true",
        help="Long format: type, size, modification time (UTC) and name",
    )
    parser.add_argument(
        "-R",
        "--recursive",
        action="store_true",
        help="List subdirectories recursively",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Disk configuration file (default: $STORAGE_LS_CONFIG or storage.yaml)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Do not highlight directories in short listings",
    )
    return parser


def print_disk_table(console: Console, use_case: ListStorageUseCase) -> None:
    console.print("Available disks:")
    table = Table(box=box.ASCII, show_edge=True)
    table.add_column("name")
    table.add_column("driver")
    for disk in use_case.available_disks():
        table.add_row(Text(disk.label), Text(disk.driver))
    console.print(table)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    err = Console(stderr=True, highlight=False, soft_wrap=True)

    settings = Settings()
    if args.config:
        settings.config_path = args.config
    try:
        level = settings.log_level_value()
    except ConfigurationError as e:
        err.print(Text(str(e), style="red"))
        return 1

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    out = Console(highlight=False, soft_wrap=True, no_color=args.no_color)
    container = DependencyContainer(settings)

    try:
        use_case = container.get_list_storage_use_case()
        request = use_case.resolve_request(
            args.path,
            disk=args.disk,
            recursive=args.recursive,
            long_format=args.long,
        )
    except ConfigurationError as e:
        err.print(Text(str(e), style="red"))
        return 1
    except InvalidDiskError as e:
        err.print(Text(str(e), style="red"))
        request = None

    if request is None:
        print_disk_table(out, use_case)
        return 0

    failures: list[str] = []

    def on_error(path: str, error: BackendListingError) -> None:
        failures.append(path)
        err.print(
            Text(f"Cannot list {request.disk.name}:{path}: {error}", style="red")
        )

    try:
        for line in use_case.execute(request, on_error=on_error):
            style = ""
            if line.kind is EntryKind.DIRECTORY and not request.long_format:
                style = "bold blue"
            out.print(Text(line.text, style=style))
    except ConfigurationError as e:
        err.print(Text(str(e), style="red"))
        return 1

    return 1 if failures else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
