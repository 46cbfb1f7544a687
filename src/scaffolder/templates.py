"""Jinja2 rendering for the compose and Taskfile documents.

``TemplateRenderer`` loads ``.j2`` files from ``src/scaffolder/templates/``.
The Taskfile needs literal Task placeholders such as ``{{.DB_NAME}}``, which
clash with Jinja2's own delimiters, so templates produce them through the
``task_var`` filter instead of escaping.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined


_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Renders the packaged document templates.

    Output depends only on the template and the context passed in.  A
    context key the template needs but does not get raises
    :class:`jinja2.UndefinedError`.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        self.template_dir = Path(template_dir or _DEFAULT_TEMPLATE_DIR)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["task_var"] = task_var

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render *template_path* (relative to :attr:`template_dir`)."""
        return self.env.get_template(template_path).render(**context)


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

def task_var(name: str, default: str | None = None) -> str:
    """Emit a Task (taskfile.dev) variable reference.

    ``"DB_NAME" | task_var`` gives ``{{.DB_NAME}}``;
    ``"FLAGS" | task_var("--dry-run")`` gives ``{{default "--dry-run" .FLAGS}}``.
    """
    if default is None:
        return "{{." + name + "}}"
    return '{{default "' + default + '" .' + name + "}}"
