"""Settings file loader service."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_MAX_LIST_DEPTH,
    DEFAULT_TOKEN_ENV,
    ConversionSettings,
    EndpointSettings,
    OutputSettings,
    Settings,
    SourceSettings,
)


class SettingsError(Exception):
    """Raised when the settings file is invalid."""


def load_settings(config_path: Path | str, environ: Mapping[str, str] | None = None) -> Settings:
    """Load and validate the settings file.

    Relative paths inside the file resolve against the file's directory. The
    endpoint token is read from the environment variable named by
    `source.endpoint.token_env` unless the file sets `token` directly.
    """
    path = Path(config_path)
    if not path.exists():
        raise SettingsError(f"Settings file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SettingsError(f"Failed to parse settings file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise SettingsError("Settings root must be a mapping.")

    environment = os.environ if environ is None else environ
    return Settings(
        path=path,
        source=_parse_source_section(parsed.get("source"), path.parent, environment),
        conversion=_parse_conversion_section(parsed.get("conversion")),
        output=_parse_output_section(parsed.get("output"), path.parent),
    )


def _parse_source_section(
    value: Any, base_path: Path, environ: Mapping[str, str]
) -> SourceSettings:
    section = _optional_mapping(value, "source")
    file_value = _optional_string(section.get("file"), "source.file")
    endpoint_value = section.get("endpoint")
    if file_value and endpoint_value:
        raise SettingsError("source must not set both file and endpoint.")
    if file_value:
        return SourceSettings(file=_resolve_path(base_path, file_value))
    if endpoint_value is None:
        return SourceSettings()
    return SourceSettings(endpoint=_parse_endpoint(endpoint_value, environ))


def _parse_endpoint(value: Any, environ: Mapping[str, str]) -> EndpointSettings:
    if isinstance(value, str):
        value = {"url": value}
    section = _optional_mapping(value, "source.endpoint")
    url = _require_non_empty_string(section.get("url"), "source.endpoint.url")
    if not url.startswith(("http://", "https://")):
        raise SettingsError("source.endpoint.url must be an http(s) URL.")
    token = _optional_string(section.get("token"), "source.endpoint.token")
    if token is None:
        token_env = _optional_string(section.get("token_env"), "source.endpoint.token_env")
        token = _optional_string(environ.get(token_env or DEFAULT_TOKEN_ENV), "token")
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", 30), "source.endpoint.timeout_seconds"
    )
    return EndpointSettings(url=url, token=token, timeout_seconds=timeout_seconds)


def _parse_conversion_section(value: Any) -> ConversionSettings:
    section = _optional_mapping(value, "conversion")
    max_list_depth = _require_non_negative_int(
        section.get("max_list_depth", DEFAULT_MAX_LIST_DEPTH), "conversion.max_list_depth"
    )
    return ConversionSettings(
        max_list_depth=max_list_depth,
        include_operation_roots=_require_bool(
            section.get("include_operation_roots", False), "conversion.include_operation_roots"
        ),
        include_unreferenced_types=_require_bool(
            section.get("include_unreferenced_types", False),
            "conversion.include_unreferenced_types",
        ),
    )


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    path_value = _optional_string(section.get("path"), "output.path")
    indent: int | None = 2
    if "indent" in section:
        raw_indent = section["indent"]
        if raw_indent is not None:
            raw_indent = _require_non_negative_int(raw_indent, "output.indent")
        indent = raw_indent
    return OutputSettings(
        path=_resolve_path(base_path, path_value) if path_value else None,
        indent=indent,
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SettingsError(f"Settings section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise SettingsError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise SettingsError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise SettingsError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise SettingsError(f"{field_name} must be true or false.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    value = _require_non_negative_int(value, field_name)
    if value == 0:
        raise SettingsError(f"{field_name} must be greater than zero.")
    return value


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingsError(f"{field_name} must be an integer.")
    if value < 0:
        raise SettingsError(f"{field_name} must not be negative.")
    return value
