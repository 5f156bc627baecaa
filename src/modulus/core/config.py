"""
Configuration: template store root and log level.

Resolution order for the store root:
1. MODULUS_CONFIG_DIR, when set and non-empty
2. the per-user application config directory for "modulus"
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import typer

from modulus.domain.constants import (
    APP_NAME,
    CONFIG_DIR_ENV,
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV,
)
from modulus.domain.errors import ErrorCodes, ModulusError


def default_store_root() -> Path:
    """Platform config directory (~/.config/modulus on Linux)."""
    return Path(typer.get_app_dir(APP_NAME))


def resolve_store_root(environ: Mapping[str, str] | None = None) -> Path:
    """
    Template store root for this run.

    Args:
        environ: environment mapping (defaults to os.environ)

    Returns:
        store root path (not created)
    """
    if environ is None:
        environ = os.environ

    override = environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return default_store_root()


def ensure_store_root(path: Path) -> Path:
    """
    Create the store root if it is missing.

    Raises:
        ModulusError: CONFIG_DIR_UNAVAILABLE
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ModulusError(
            ErrorCodes.CONFIG_DIR_UNAVAILABLE,
            "Could not create configuration directory",
            path=str(path),
            cause=str(e),
        ) from e
    return path


def resolve_log_level(environ: Mapping[str, str] | None = None) -> int:
    """Log level from MODULUS_LOG_LEVEL; unknown names fall back to WARNING."""
    if environ is None:
        environ = os.environ

    name = (environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)
