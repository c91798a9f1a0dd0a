"""Tests for settings loading and validation."""

import json

import pytest

from nuget_audit.config import (
    CONFIG_PATH_ENV_VAR,
    DEFAULT_HOSTING_API_BASE,
    DEFAULT_REGISTRY_API_BASE,
    Settings,
    load_settings,
)
from nuget_audit.errors import ConfigError


def test_defaults_with_token_from_environment():
    settings = load_settings(environ={"GITHUB_TOKEN": "abc"})
    assert settings.token == "abc"
    assert settings.hosting_api_base == DEFAULT_HOSTING_API_BASE
    assert settings.registry_api_base == DEFAULT_REGISTRY_API_BASE
    assert settings.page_size == 100
    assert settings.descriptor_suffixes == (".csproj",)
    assert settings.inclusive_range_bounds is False
    assert settings.strict_version_match is False


def test_gh_token_is_a_fallback():
    assert load_settings(environ={"GH_TOKEN": "xyz"}).token == "xyz"


def test_missing_token_is_a_config_error():
    with pytest.raises(ConfigError, match="token"):
        load_settings(environ={})


def test_json_file_overrides_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "token": "from-file",
                "hostingApiBase": "https://ghe.example.com/api/v3/",
                "pageSize": 50,
                "descriptorSuffixes": [".csproj", ".FSPROJ"],
                "strictVersionMatch": True,
            }
        ),
        encoding="utf-8",
    )
    settings = load_settings(path, environ={})
    assert settings.token == "from-file"
    assert settings.hosting_api_base == "https://ghe.example.com/api/v3"
    assert settings.page_size == 50
    assert settings.descriptor_suffixes == (".csproj", ".fsproj")
    assert settings.strict_version_match is True


def test_environment_token_beats_file_token(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"token": "from-file"}), encoding="utf-8")
    assert load_settings(path, environ={"GITHUB_TOKEN": "from-env"}).token == "from-env"


def test_yaml_file_via_environment_variable(tmp_path):
    path = tmp_path / "settings.yml"
    path.write_text("pageSize: 25\ninclusiveRangeBounds: true\n", encoding="utf-8")
    settings = load_settings(environ={CONFIG_PATH_ENV_VAR: str(path), "GITHUB_TOKEN": "t"})
    assert settings.page_size == 25
    assert settings.inclusive_range_bounds is True


def test_schema_violations_are_listed(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"pageSize": 1000, "unknown": 1}), encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        load_settings(path, environ={"GITHUB_TOKEN": "t"})
    message = str(excinfo.value)
    assert "pageSize" in message
    assert "unknown" in message


def test_missing_file_is_a_config_error(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "absent.json", environ={"GITHUB_TOKEN": "t"})


def test_invalid_json_is_a_config_error(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_settings(path, environ={"GITHUB_TOKEN": "t"})


def test_settings_validates_page_size():
    with pytest.raises(ConfigError):
        Settings(token="t", page_size=0)
