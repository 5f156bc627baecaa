"""Core layer: configuration and logging setup."""

from .config import (
    default_store_root,
    ensure_store_root,
    resolve_log_level,
    resolve_store_root,
)
from .logging import configure_logging

__all__ = [
    # config
    "default_store_root",
    "resolve_store_root",
    "ensure_store_root",
    "resolve_log_level",
    # logging
    "configure_logging",
]
