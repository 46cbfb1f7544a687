"""Main scaffolding orchestrator.

Takes a project name and its ``PgConfig`` and writes the Docker Compose
document, the Taskfile and the empty SQL placeholders under a target
directory.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from src.config import PgConfig

from .compose_gen import render_compose
from .io import FileSystem
from .taskfile_gen import render_taskfile
from .templates import TemplateRenderer


DOCKER_DIR = "docker"
COMPOSE_FILE = "compose.yaml"
DB_DIR = "db"
SQL_PLACEHOLDERS: tuple[str, ...] = ("schema.sql", "reset.sql", "seed.sql")
TASKFILE = "Taskfile.yaml"


class ProjectScaffolder:
    """Writes the scaffold for one project.

    Produces, relative to the target directory::

        docker/compose.yaml
        db/schema.sql
        db/reset.sql
        db/seed.sql
        Taskfile.yaml

    Nothing is checked beforehand: an existing ``docker/`` or ``db/``
    directory, or a permission problem, surfaces as the ``OSError`` raised
    by the filesystem.
    """

    def __init__(
        self,
        project_name: str,
        pg: PgConfig,
        fs: FileSystem,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.project_name = project_name
        self.pg = pg
        self.fs = fs
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(self, target_dir: str | Path) -> list[Path]:
        """Write every scaffold file under *target_dir*.

        Returns:
            The written file paths, in write order.
        """
        root = Path(target_dir)
        written: list[Path] = []

        # 1. Docker Compose
        docker_dir = root / DOCKER_DIR
        await asyncio.to_thread(self.fs.mkdir, docker_dir)
        compose = render_compose(self.project_name, self.pg, self.renderer)
        written.append(await self._write(docker_dir / COMPOSE_FILE, compose))

        # 2. SQL placeholders
        db_dir = root / DB_DIR
        await asyncio.to_thread(self.fs.mkdir, db_dir)
        for name in SQL_PLACEHOLDERS:
            written.append(await self._write(db_dir / name, ""))

        # 3. Taskfile
        taskfile = render_taskfile(self.project_name, self.pg, self.renderer)
        written.append(await self._write(root / TASKFILE, taskfile))

        return written

    # -- Internal helpers --------------------------------------------------

    async def _write(self, path: Path, content: str) -> Path:
        await asyncio.to_thread(self.fs.write_text, path, content)
        return path
