"""Unit tests for the configuration models (src.config).

Tests cover:
- derive_db_name (first-separator replacement)
- PgConfig defaults, for_project, immutability, validation
- DocumentDefaults / TracingConfig fixed values
- Settings defaults and from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.config import (
    DocumentDefaults,
    PgConfig,
    Settings,
    TracingConfig,
    derive_db_name,
    program_dir,
)


# ---------------------------------------------------------------------------
# derive_db_name
# ---------------------------------------------------------------------------


class TestDeriveDbName:
    @pytest.mark.unit
    def test_single_hyphen(self):
        assert derive_db_name("my-app") == "my_app"

    @pytest.mark.unit
    def test_no_separator(self):
        assert derive_db_name("simple") == "simple"

    @pytest.mark.unit
    def test_only_first_hyphen_replaced(self):
        assert derive_db_name("a-b-c") == "a_b-c"

    @pytest.mark.unit
    def test_leading_hyphen(self):
        assert derive_db_name("-app") == "_app"

    @pytest.mark.unit
    def test_empty(self):
        assert derive_db_name("") == ""

    @pytest.mark.unit
    def test_existing_underscores_untouched(self):
        assert derive_db_name("my_app-x") == "my_app_x"


# ---------------------------------------------------------------------------
# PgConfig
# ---------------------------------------------------------------------------


class TestPgConfig:
    @pytest.mark.unit
    def test_version_defaults_to_latest(self):
        pg = PgConfig(db_name="app", port="5432")
        assert pg.version == "latest"

    @pytest.mark.unit
    def test_for_project_derives_db_name(self):
        pg = PgConfig.for_project("my-app", "5433")
        assert pg.db_name == "my_app"
        assert pg.port == "5433"
        assert pg.version == "latest"

    @pytest.mark.unit
    def test_for_project_custom_version(self):
        pg = PgConfig.for_project("simple", "5432", version="16-alpine")
        assert pg.version == "16-alpine"
        assert pg.db_name == "simple"

    @pytest.mark.unit
    def test_port_is_not_validated(self):
        pg = PgConfig.for_project("app", "not-a-port")
        assert pg.port == "not-a-port"

    @pytest.mark.unit
    def test_frozen(self):
        pg = PgConfig.for_project("app", "5432")
        with pytest.raises(ValidationError):
            pg.port = "6543"

    @pytest.mark.unit
    def test_missing_fields_raise(self):
        with pytest.raises(ValidationError):
            PgConfig(version="latest")

    @pytest.mark.unit
    def test_non_string_port_rejected(self):
        with pytest.raises(ValidationError):
            PgConfig(db_name="app", port=5432)

    @pytest.mark.unit
    def test_equal_records_compare_equal(self):
        assert PgConfig.for_project("my-app", "5433") == PgConfig.for_project("my-app", "5433")


# ---------------------------------------------------------------------------
# DocumentDefaults
# ---------------------------------------------------------------------------


class TestDocumentDefaults:
    @pytest.mark.unit
    def test_credentials(self):
        doc = DocumentDefaults()
        assert doc.db_user == "devuser"
        assert doc.db_password == "devuser"

    @pytest.mark.unit
    def test_compose_values(self):
        doc = DocumentDefaults()
        assert doc.compose_image == "postgres:latest"
        assert doc.container_port == 5432
        assert doc.data_volume == "./data:/var/lib/postgresql/data"
        assert doc.init_volume == "./init:/docker-entrypoint-initdb.d"

    @pytest.mark.unit
    def test_migration_flags(self):
        doc = DocumentDefaults()
        assert doc.dry_run_flag == "--dry-run"
        assert doc.apply_flag == "--enable-drop-table"

    @pytest.mark.unit
    def test_tracing_defaults(self):
        tracing = TracingConfig()
        assert tracing.image == "jaegertracing/all-in-one:latest"
        assert tracing.ports == [16686, 4317, 4318, 9411]
        assert tracing.environment == {"COLLECTOR_ZIPKIN_HOST_PORT": ":9411"}


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class TestSettings:
    @pytest.mark.unit
    def test_defaults(self):
        settings = Settings()
        assert settings.pg_version == "latest"
        assert settings.base_dir == program_dir()

    @pytest.mark.unit
    def test_program_dir_is_absolute(self):
        assert program_dir().is_absolute()

    @pytest.mark.unit
    def test_from_env_empty(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()
        assert settings.pg_version == "latest"

    @pytest.mark.unit
    def test_from_env_overrides(self, tmp_path):
        env = {
            "PG_SCAFFOLD_PG_VERSION": "16",
            "PG_SCAFFOLD_BASE_DIR": str(tmp_path),
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.pg_version == "16"
        assert settings.base_dir == Path(tmp_path)

    @pytest.mark.unit
    def test_from_env_ignores_empty_values(self):
        with patch.dict(os.environ, {"PG_SCAFFOLD_PG_VERSION": ""}, clear=True):
            settings = Settings.from_env()
        assert settings.pg_version == "latest"
