"""Docker Compose document generation.

Renders ``compose.yaml.j2`` into a single-service Postgres stack named
after the project.  Rendering is pure; writing the result is left to
:class:`~src.scaffolder.generator.ProjectScaffolder`.
"""

from __future__ import annotations

from typing import Any

from src.config import DocumentDefaults, PgConfig

from .templates import TemplateRenderer

COMPOSE_TEMPLATE = "compose.yaml.j2"


def compose_context(
    project_name: str,
    pg: PgConfig,
    defaults: DocumentDefaults | None = None,
) -> dict[str, Any]:
    """Build the template context for the compose document."""
    return {
        "project_name": project_name,
        "pg": pg,
        "doc": defaults or DocumentDefaults(),
    }


def render_compose(
    project_name: str,
    pg: PgConfig,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render the compose document for *project_name*.

    The service and container are both named ``{project_name}-db`` and the
    host port ``pg.port`` is mapped onto the container's Postgres port.
    """
    renderer = renderer or TemplateRenderer()
    return renderer.render(COMPOSE_TEMPLATE, compose_context(project_name, pg))
