"""pg-scaffold scaffolder -- renders and writes the project skeleton.

Quick usage::

    from src.config import PgConfig
    from src.scaffolder import DiskFileSystem, ProjectScaffolder

    pg = PgConfig.for_project("my-app", "5433")
    scaffolder = ProjectScaffolder("my-app", pg, DiskFileSystem())
    written = await scaffolder.generate("/tmp/my-app")
"""

from src.scaffolder.compose_gen import render_compose
from src.scaffolder.generator import ProjectScaffolder
from src.scaffolder.io import (
    ConsolePrompter,
    DiskFileSystem,
    FileSystem,
    MemoryFileSystem,
    Prompter,
    ScriptedPrompter,
)
from src.scaffolder.taskfile_gen import render_taskfile
from src.scaffolder.templates import TemplateRenderer

__all__ = [
    "ConsolePrompter",
    "DiskFileSystem",
    "FileSystem",
    "MemoryFileSystem",
    "ProjectScaffolder",
    "Prompter",
    "ScriptedPrompter",
    "TemplateRenderer",
    "render_compose",
    "render_taskfile",
]
