"""Command-line entry point for pg-scaffold.

Asks for a project name and a database port, then writes the Docker Compose
file, the Taskfile and the empty SQL placeholders under the target
directory.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence

from src.config import PgConfig, Settings
from src.scaffolder import (
    ConsolePrompter,
    DiskFileSystem,
    FileSystem,
    ProjectScaffolder,
    Prompter,
)
from src.utils import (
    console,
    print_success,
    print_summary_table,
    print_warning,
    resolve_target_dir,
)

PROJECT_NAME_QUESTION = "What is project name? > "
DB_PORT_QUESTION = "DB Port? > "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pg-scaffold",
        description="Scaffold a Postgres dev setup: Docker Compose file, Taskfile and SQL stubs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "The target directory is resolved relative to the directory holding the\n"
            "program being run. For the installed command that is the directory of the\n"
            "pg-scaffold script itself (e.g. a virtualenv's bin/), not the current\n"
            "working directory. Set PG_SCAFFOLD_BASE_DIR to use another base.\n"
            "\n"
            "Examples:\n"
            "  pg-scaffold\n"
            "  pg-scaffold ../my-service\n"
        ),
    )
    parser.add_argument(
        "target",
        nargs="?",
        default="",
        help="Target subdirectory, relative to the base directory (default: the base directory itself)",
    )
    return parser


def run(
    argv: Sequence[str],
    prompter: Prompter,
    fs: FileSystem,
    settings: Settings,
) -> int:
    """Run one scaffolding session and return the process exit code.

    Both questions are asked before either answer is checked.  If either was
    cancelled nothing is written.
    """
    args = build_parser().parse_args(list(argv))
    target_dir = resolve_target_dir(args.target, settings.base_dir)

    project_name = prompter.ask(PROJECT_NAME_QUESTION)
    db_port = prompter.ask(DB_PORT_QUESTION)

    if project_name is None or db_port is None:
        print_warning("Cancelled, nothing written.")
        return 0

    pg = PgConfig.for_project(project_name, db_port, version=settings.pg_version)
    scaffolder = ProjectScaffolder(project_name, pg, fs)
    written = asyncio.run(scaffolder.generate(target_dir))

    print_summary_table(
        {
            "Target": str(target_dir),
            "Database": pg.db_name,
            "Port": pg.port,
            "Postgres": pg.version,
            "Files": "\n".join(str(p.relative_to(target_dir)) for p in written),
        },
        title=f"Scaffolded {project_name}",
    )
    print_success("Done. Run `task --list-all` to see the generated tasks.")
    return 0


def main() -> None:
    """CLI entry point for ``pg-scaffold`` and ``python -m src.cli``."""
    console.print("[bold]pg-scaffold[/bold]")
    sys.exit(
        run(
            sys.argv[1:],
            ConsolePrompter(console),
            DiskFileSystem(),
            Settings.from_env(),
        )
    )


if __name__ == "__main__":
    main()
