"""Unit tests for application settings configuration."""

import json
from pathlib import Path

import pytest

from catalog_admin.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-level .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CATALOG_API_BASE_URL", raising=False)
    monkeypatch.delenv("DEFAULT_PAGE_SIZE", raising=False)

    settings = Settings(_env_file=None)

    assert settings.catalog_api_base_url == "http://localhost:5000/api"
    assert settings.default_page_size == 20


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CATALOG_API_BASE_URL", "https://catalog.example.com/api")
    monkeypatch.setenv("LOG_LEVEL_HTTP", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.catalog_api_base_url == "https://catalog.example.com/api"
    assert settings.log_level_http == "DEBUG"


def test_settings_json_overrides_are_applied(monkeypatch, tmp_path):
    """data/settings.json overrides known keys whose type matches."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CATALOG_API_BASE_URL", raising=False)
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "settings.json").write_text(
        json.dumps(
            {
                "catalog_api_base_url": "http://override:9000/api",
                "default_page_size": "not-a-number",
                "app_title": "ignored",
            }
        ),
        encoding="utf-8",
    )

    settings = Settings(_env_file=None)

    assert settings.catalog_api_base_url == "http://override:9000/api"
    assert settings.default_page_size == 20
    assert settings.app_title == "Catalog Admin"


@pytest.mark.parametrize(("override", "expected"), [(True, 20), (50, 50)])
def test_settings_json_page_size_must_be_a_real_int(monkeypatch, tmp_path, override, expected):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DEFAULT_PAGE_SIZE", raising=False)
    (tmp_path / "data").mkdir()
    (tmp_path / "data" / "settings.json").write_text(
        json.dumps({"default_page_size": override}), encoding="utf-8"
    )

    settings = Settings(_env_file=None)

    assert settings.default_page_size == expected


def test_corrupt_settings_json_falls_back_to_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CATALOG_API_BASE_URL", raising=False)
    (tmp_path / "data").mkdir()
    (tmp_path / "data" / "settings.json").write_text("{not json", encoding="utf-8")

    settings = Settings(_env_file=None)

    assert settings.catalog_api_base_url == "http://localhost:5000/api"
