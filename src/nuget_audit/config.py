"""Configuration loader for the audit pipeline.

Settings come from an optional JSON or YAML file (explicit path, or the
``NUGET_AUDIT_CONFIG`` environment variable) layered over built-in defaults.
The credential is read from ``GITHUB_TOKEN`` / ``GH_TOKEN`` before falling back
to the file's ``token`` key. The file is validated against
``schemas/settings.schema.json`` before any value is used.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from collections.abc import Iterable, Mapping
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from .errors import ConfigError

CONFIG_PATH_ENV_VAR = "NUGET_AUDIT_CONFIG"
TOKEN_ENV_VARS = ("GITHUB_TOKEN", "GH_TOKEN")

DEFAULT_HOSTING_API_BASE = "https://api.github.com"
DEFAULT_REGISTRY_API_BASE = "https://api.nuget.org/v3/registration5-gz-semver2"
DEFAULT_PAGE_SIZE = 100
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "nuget-audit"
DEFAULT_DESCRIPTOR_SUFFIXES = (".csproj",)

_SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "settings.schema.json"


@dataclass(slots=True, frozen=True)
class Settings:
    """Everything the pipeline needs from its environment."""

    token: str
    hosting_api_base: str = DEFAULT_HOSTING_API_BASE
    registry_api_base: str = DEFAULT_REGISTRY_API_BASE
    page_size: int = DEFAULT_PAGE_SIZE
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    descriptor_suffixes: tuple[str, ...] = DEFAULT_DESCRIPTOR_SUFFIXES
    inclusive_range_bounds: bool = False
    strict_version_match: bool = False

    def __post_init__(self) -> None:
        if not self.token:
            raise ConfigError(
                "GitHub token is missing; export GITHUB_TOKEN (or GH_TOKEN) "
                "or set 'token' in the settings file"
            )
        if not 1 <= self.page_size <= 100:
            raise ConfigError(f"page_size must be between 1 and 100, got {self.page_size}")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], token: str) -> Settings:
        """Build settings from a schema-valid mapping using camelCase keys."""
        suffixes = data.get("descriptorSuffixes", DEFAULT_DESCRIPTOR_SUFFIXES)
        return cls(
            token=token,
            hosting_api_base=str(data.get("hostingApiBase", DEFAULT_HOSTING_API_BASE)).rstrip("/"),
            registry_api_base=str(
                data.get("registryApiBase", DEFAULT_REGISTRY_API_BASE)
            ).rstrip("/"),
            page_size=int(data.get("pageSize", DEFAULT_PAGE_SIZE)),
            timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
            user_agent=str(data.get("userAgent", DEFAULT_USER_AGENT)),
            descriptor_suffixes=tuple(str(s).lower() for s in suffixes),
            inclusive_range_bounds=bool(data.get("inclusiveRangeBounds", False)),
            strict_version_match=bool(data.get("strictVersionMatch", False)),
        )


def _resolve_config_path(
    path: Path | str | None, environ: Mapping[str, str]
) -> Path | None:
    """Resolve the settings file path.

    Priority:
    1. Explicit path argument
    2. NUGET_AUDIT_CONFIG environment variable
    3. No file (defaults only)
    """
    if path is not None:
        return Path(path)

    env_path = environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def _read_document(config_path: Path) -> Any:
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    if config_path.suffix.lower() in {".yml", ".yaml"}:
        try:
            return yaml.safe_load(content) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in configuration file: {exc}") from exc

    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_document(document: Any) -> None:
    """Validate a settings document against the bundled JSON schema.

    Raises:
        ConfigError: listing every schema violation found.
    """
    schema = json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(document), key=lambda e: list(e.path))
    if errors:
        raise ConfigError("Settings failed validation:\n" + _format_errors(errors))


def _resolve_token(document: Mapping[str, Any], environ: Mapping[str, str]) -> str:
    for name in TOKEN_ENV_VARS:
        value = environ.get(name, "").strip()
        if value:
            return value
    return str(document.get("token", "")).strip()


def load_settings(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Load and validate settings.

    Args:
        path: Optional path to a JSON or YAML settings file. If not provided,
            uses the NUGET_AUDIT_CONFIG env var, or defaults when unset.
        environ: Environment mapping, ``os.environ`` when omitted.

    Returns:
        A Settings object.

    Raises:
        ConfigError: If the file cannot be read, is invalid, or no token is set.
    """
    environ = os.environ if environ is None else environ
    config_path = _resolve_config_path(path, environ)

    document: Any = {}
    if config_path is not None:
        document = _read_document(config_path)

    validate_document(document)

    return Settings.from_dict(document, token=_resolve_token(document, environ))
