"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import SettingsError, load_settings
from .runtime_settings import (
    DEFAULT_MAX_LIST_DEPTH,
    DEFAULT_TOKEN_ENV,
    ConversionSettings,
    EndpointSettings,
    OutputSettings,
    Settings,
    SourceSettings,
)

__all__ = [
    "ConversionSettings",
    "EndpointSettings",
    "OutputSettings",
    "Settings",
    "SourceSettings",
    "DEFAULT_MAX_LIST_DEPTH",
    "DEFAULT_TOKEN_ENV",
    "SettingsError",
    "load_settings",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
