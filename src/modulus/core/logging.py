"""
Logging setup.

Progress and skip notices go to stderr through the standard logging module.
User-facing results are printed by the CLI, not logged.
"""

import logging
from collections.abc import Mapping

from modulus.core.config import resolve_log_level

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(environ: Mapping[str, str] | None = None) -> int:
    """
    Configure root logging once per process.

    Args:
        environ: environment mapping (defaults to os.environ)

    Returns:
        the effective log level
    """
    level = resolve_log_level(environ)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    logging.getLogger("modulus").setLevel(level)
    return level
