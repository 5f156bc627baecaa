"""
Tree materializer: copy a template tree into the destination.

- parents before children (os.walk top-down)
- directories created idempotently
- files copied byte-for-byte, existing files overwritten
- first OSError aborts the copy; partial output is left in place
- symlinked directories abort the copy (COPY_FAILED)
"""

import logging
import os
import shutil
from pathlib import Path

from modulus.domain.errors import ErrorCodes, ModulusError

logger = logging.getLogger(__name__)


def copy_directory(source: Path, destination: Path) -> list[Path]:
    """
    Recursively copy source into destination.

    Args:
        source: template root
        destination: output root (created with parents if missing)

    Returns:
        destination files written, in copy order

    Raises:
        ModulusError: COPY_FAILED
    """
    written: list[Path] = []

    def _on_walk_error(error: OSError) -> None:
        raise error

    try:
        destination.mkdir(parents=True, exist_ok=True)

        for dirpath, dirnames, filenames in os.walk(source, onerror=_on_walk_error):
            dirnames.sort()
            current = Path(dirpath)
            for dirname in dirnames:
                if (current / dirname).is_symlink():
                    raise ModulusError(
                        ErrorCodes.COPY_FAILED,
                        "Symlinked directories cannot be copied",
                        path=str(current / dirname),
                    )
            target_dir = destination / current.relative_to(source)
            target_dir.mkdir(parents=True, exist_ok=True)

            for filename in sorted(filenames):
                src_file = current / filename
                dest_file = target_dir / filename
                shutil.copy(src_file, dest_file)
                logger.debug(f"Copied {src_file} -> {dest_file}")
                written.append(dest_file)
    except OSError as e:
        raise ModulusError(
            ErrorCodes.COPY_FAILED,
            "Could not copy template to destination",
            source=str(source),
            destination=str(destination),
            cause=str(e),
        ) from e

    return written
