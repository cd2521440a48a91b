"""Global configuration for SmartCI.

This module provides centralized configuration management with support for
environment variables and sensible defaults matching the CodeIgniter 3 layout.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class SmartCIConfig(BaseSettings):
    """SmartCI configuration settings.

    Values can be overridden via environment variables with SMARTCI_ prefix.
    Example: SMARTCI_SUBPROJECT_DIR=ci overrides subproject_dir.
    """

    # Project layout
    subproject_dir: str = Field(
        default="CI3",
        min_length=1,
        description="Subproject directory preferred as project root when present",
    )
    app_prefix: str = Field(
        default="app",
        description="Prefix identifying application directories under the project root",
    )
    common_app_dir: str = Field(
        default="app_common",
        description="Application directory that always sorts first",
    )
    default_app_dirs: list[str] = Field(
        default_factory=lambda: ["app_common", "app"],
        min_length=1,
        description="Application directories used when none are discovered",
    )
    models_dir: str = Field(
        default="models",
        min_length=1,
        description="Models directory inside each application directory",
    )
    file_extension: str = Field(
        default=".php",
        description="Source file extension appended to model file names",
    )

    # Method lookup
    declaration_line_limit: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Extra lines scanned when reconstructing a declaration header",
    )

    # Presentation
    hover_header: str = Field(
        default="Smart CI",
        description="Bold header label shown at the top of hover payloads",
    )

    log_level: str = Field(
        default="WARNING",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Root log level used by the CLI",
    )

    model_config = {
        "env_prefix": "SMARTCI_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_config() -> SmartCIConfig:
    """Get cached configuration instance.

    Returns:
        SmartCIConfig singleton instance.
    """
    return SmartCIConfig()


def reload_config() -> SmartCIConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh SmartCIConfig instance.
    """
    get_config.cache_clear()
    return get_config()
