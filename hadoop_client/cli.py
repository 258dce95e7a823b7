"""``hadoop-client-probe`` -- report the Hadoop version seen by the client."""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table

from .config.settings import cfg
from .testing.errors import VersionResolutionError
from .testing.version import VersionProbe

console = Console()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hadoop-client-probe",
        description="Detect the Hadoop version from the artifact providing a Hadoop class",
    )
    parser.add_argument(
        "--class",
        dest="class_name",
        default=None,
        help=f"Dotted class name to locate (default: {cfg.hadoop_class})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    probe = VersionProbe(args.class_name or cfg.hadoop_class)
    try:
        path = probe.artifact_path()
        version = probe.version()
    except VersionResolutionError as exc:
        console.print(f"[bold red]error:[/bold red] {exc}")
        return 1

    table = Table(show_header=False, box=None)
    table.add_row("class", probe.class_name)
    table.add_row("artifact", str(path))
    table.add_row("version", f"[bold green]{version}[/bold green]")
    table.add_row("hadoop 1.x", str(version.startswith("1")))
    table.add_row("hadoop 2.x", str(version.startswith("2")))
    console.print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
