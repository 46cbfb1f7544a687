"""Taskfile (taskfile.dev) document generation.

Renders ``Taskfile.yaml.j2`` into a Task v3 document with database,
migration, seeding and tracing tasks.  Task-runner variables are written
as ``{{.NAME}}`` references and resolved by ``task`` at run time, not here.
"""

from __future__ import annotations

from typing import Any

from src.config import DocumentDefaults, PgConfig

from .templates import TemplateRenderer, task_var

TASKFILE_TEMPLATE = "Taskfile.yaml.j2"

# Every task in the generated document, in output order.
TASK_NAMES: tuple[str, ...] = (
    "default",
    "docker",
    "db",
    "db-reset",
    "db-migrate",
    "db-seed",
    "db-migrate-apply",
    "db-init",
    "jaeger",
)

# Sub-tasks of ``db-init``; Task runs ``cmds`` one after another.
INIT_STEPS: tuple[str, ...] = ("db-reset", "db-migrate-apply", "db-seed")


def _psql_command() -> str:
    """``psql`` invocation shared by the ``db``, ``db-reset`` and ``db-seed`` tasks."""
    user = task_var("DB_USER")
    port = task_var("DB_PORT")
    name = task_var("DB_NAME")
    return f"psql -h localhost -U {user} -p {port} {name}"


def taskfile_context(
    project_name: str,
    pg: PgConfig,
    defaults: DocumentDefaults | None = None,
) -> dict[str, Any]:
    """Build the template context for the task document."""
    return {
        "project_name": project_name,
        "pg": pg,
        "doc": defaults or DocumentDefaults(),
        "psql": _psql_command(),
        "init_steps": INIT_STEPS,
    }


def render_taskfile(
    project_name: str,
    pg: PgConfig,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render the Taskfile for *project_name*.

    Only ``pg`` varies between runs; credentials, images and flags come from
    :class:`~src.config.DocumentDefaults`.
    """
    renderer = renderer or TemplateRenderer()
    return renderer.render(TASKFILE_TEMPLATE, taskfile_context(project_name, pg))
