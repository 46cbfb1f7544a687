"""pg-scaffold configuration.

Typed configuration for a scaffolding run. All settings use Pydantic v2
models so they are validated at construction time and can be built from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


DB_NAME_SEPARATOR = "-"
DB_NAME_REPLACEMENT = "_"


def derive_db_name(project_name: str) -> str:
    """Derive the database name from a project name.

    Only the first ``-`` is replaced::

        derive_db_name("my-app")   -> "my_app"
        derive_db_name("a-b-c")    -> "a_b-c"
        derive_db_name("simple")   -> "simple"
    """
    return project_name.replace(DB_NAME_SEPARATOR, DB_NAME_REPLACEMENT, 1)


class PgConfig(BaseModel):
    """Postgres settings shared by the compose and task documents."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(default="latest", description="Postgres image tag")
    db_name: str = Field(..., description="Database name")
    port: str = Field(..., description="Host port mapped to the container")

    @classmethod
    def for_project(
        cls,
        project_name: str,
        port: str,
        version: str = "latest",
    ) -> "PgConfig":
        """Build the record for *project_name*, deriving ``db_name``."""
        return cls(version=version, db_name=derive_db_name(project_name), port=port)


class TracingConfig(BaseModel):
    """Observability sidecar launched by the ``jaeger`` task."""

    model_config = ConfigDict(frozen=True)

    image: str = Field(default="jaegertracing/all-in-one:latest")
    ports: list[int] = Field(default=[16686, 4317, 4318, 9411])
    environment: dict[str, str] = Field(
        default={"COLLECTOR_ZIPKIN_HOST_PORT": ":9411"}
    )


class DocumentDefaults(BaseModel):
    """Fixed values embedded in every generated document."""

    model_config = ConfigDict(frozen=True)

    db_user: str = Field(default="devuser")
    db_password: str = Field(default="devuser")
    compose_image: str = Field(default="postgres:latest")
    container_port: int = Field(default=5432, description="Postgres port inside the container")
    data_volume: str = Field(default="./data:/var/lib/postgresql/data")
    init_volume: str = Field(default="./init:/docker-entrypoint-initdb.d")
    dry_run_flag: str = Field(default="--dry-run")
    apply_flag: str = Field(default="--enable-drop-table")
    tracing: TracingConfig = Field(default_factory=TracingConfig)


def program_dir() -> Path:
    """Directory holding the running program (``sys.argv[0]``).

    For the installed ``pg-scaffold`` command this is the directory of the
    console-script shim, e.g. a virtualenv's ``bin/``.
    """
    return Path(os.path.abspath(sys.argv[0])).parent


class Settings(BaseModel):
    """Run-level settings.

    Instances are created once by the CLI entry point and handed to
    :func:`src.cli.run`.
    """

    pg_version: str = Field(default="latest")
    base_dir: Path = Field(default_factory=program_dir)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            PG_SCAFFOLD_PG_VERSION, PG_SCAFFOLD_BASE_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("PG_SCAFFOLD_PG_VERSION"):
            kwargs["pg_version"] = os.environ["PG_SCAFFOLD_PG_VERSION"]
        if os.environ.get("PG_SCAFFOLD_BASE_DIR"):
            kwargs["base_dir"] = Path(os.environ["PG_SCAFFOLD_BASE_DIR"])
        return cls(**kwargs)
