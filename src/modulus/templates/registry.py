"""
Template registry: scan the store and build the catalog.

Rules:
- depth exactly 1: every immediate subdirectory is one template candidate
- descriptor is <dirname>.meta.toml inside the subdirectory
- missing descriptor or unreadable subdirectory → warning, skipped
- malformed descriptor → fatal (ModulusError)
- the descriptor's own file name is always ignored for substitution
- duplicate names: last discovered (sorted order) wins
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

from modulus.domain.constants import meta_filename
from modulus.domain.errors import ErrorCodes, ModulusError
from modulus.domain.schemas import Template

logger = logging.getLogger(__name__)


# =============================================================================
# Store Inspection
# =============================================================================

def is_store_empty(store_root: Path) -> bool:
    """
    True when the store root holds no entries at all.

    Raises:
        ModulusError: CONFIG_DIR_UNAVAILABLE
    """
    try:
        return next(store_root.iterdir(), None) is None
    except OSError as e:
        raise ModulusError(
            ErrorCodes.CONFIG_DIR_UNAVAILABLE,
            "Could not read template store",
            path=str(store_root),
            cause=str(e),
        ) from e


def _iter_template_dirs(store_root: Path) -> list[Path]:
    """Immediate subdirectories, sorted by name."""
    try:
        entries = sorted(store_root.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ModulusError(
            ErrorCodes.CONFIG_DIR_UNAVAILABLE,
            "Could not read template store",
            path=str(store_root),
            cause=str(e),
        ) from e

    dirs = []
    for entry in entries:
        try:
            if entry.is_dir():
                dirs.append(entry)
        except OSError as e:
            logger.warning(f"Skipping unreadable entry {entry}: {e}")
    return dirs


# =============================================================================
# Descriptor Parsing
# =============================================================================

def _require_str(value: Any, key: str, meta_path: Path) -> str:
    if not isinstance(value, str) or not value:
        raise ModulusError(
            ErrorCodes.DESCRIPTOR_INVALID,
            f"'{key}' must be a non-empty string",
            path=str(meta_path),
        )
    return value


def _parse_ignored_files(value: Any, meta_path: Path) -> set[str]:
    if value is None:
        return set()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ModulusError(
            ErrorCodes.DESCRIPTOR_INVALID,
            "'ignored_files' must be a list of strings",
            path=str(meta_path),
        )
    return set(value)


def _parse_variables(value: Any, meta_path: Path) -> dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise ModulusError(
            ErrorCodes.DESCRIPTOR_INVALID,
            "'variables' must be a table of string prompts",
            path=str(meta_path),
        )
    # tomllib keeps declaration order
    return dict(value)


def parse_descriptor(meta_path: Path, source_path: Path) -> Template:
    """
    Parse one <id>.meta.toml into a Template.

    Args:
        meta_path: descriptor path
        source_path: template root directory

    Returns:
        Template (descriptor file name already in ignored_files)

    Raises:
        ModulusError: DESCRIPTOR_INVALID
        OSError: descriptor could not be read
    """
    # TOML must be UTF-8
    raw = meta_path.read_bytes()
    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ModulusError(
            ErrorCodes.DESCRIPTOR_INVALID,
            f"Malformed descriptor: {e}",
            path=str(meta_path),
        ) from e

    name = _require_str(data.get("name"), "name", meta_path)
    ignored_files = _parse_ignored_files(data.get("ignored_files"), meta_path)
    ignored_files.add(meta_path.name)
    variables = _parse_variables(data.get("variables"), meta_path)

    return Template(
        name=name,
        source_path=source_path,
        ignored_files=frozenset(ignored_files),
        variables=variables,
    )


def load_template(template_dir: Path) -> Template | None:
    """
    Load the template stored in one subdirectory.

    Returns:
        Template, or None when the descriptor is missing or unreadable

    Raises:
        ModulusError: DESCRIPTOR_INVALID
    """
    meta_path = template_dir / meta_filename(template_dir.name)

    try:
        if not meta_path.is_file():
            logger.warning(f"No metafile found for template at {template_dir}")
            return None
        return parse_descriptor(meta_path, template_dir)
    except OSError as e:
        logger.warning(f"Skipping unreadable template at {template_dir}: {e}")
        return None


# =============================================================================
# Catalog
# =============================================================================

def discover_templates(store_root: Path) -> dict[str, Template]:
    """
    Build the catalog for the store.

    Args:
        store_root: template store root

    Returns:
        display name → Template, in discovery order

    Raises:
        ModulusError: DESCRIPTOR_INVALID
    """
    catalog: dict[str, Template] = {}

    for template_dir in _iter_template_dirs(store_root):
        template = load_template(template_dir)
        if template is None:
            continue

        previous = catalog.get(template.name)
        if previous is not None:
            logger.warning(
                f"Template name '{template.name}' in {template_dir} "
                f"replaces the one in {previous.source_path}"
            )
        catalog[template.name] = template
        logger.debug(f"Loaded template '{template.name}' from {template_dir}")

    return catalog


def get_template(catalog: dict[str, Template], name: str) -> Template:
    """
    Look up a template by display name.

    Raises:
        ModulusError: TEMPLATE_NOT_FOUND
    """
    template = catalog.get(name)
    if template is None:
        raise ModulusError(
            ErrorCodes.TEMPLATE_NOT_FOUND,
            f"Template '{name}' not found",
            available=sorted(catalog),
        )
    return template
