"""
Token substitution engine.

Token syntax: "<" + variable.lower() + ">", matched case-insensitively.

Variables are applied one full pass at a time, in declaration order, each
pass running over the output of the previous one. A value inserted by an
earlier variable is therefore visible to later tokens:

    substitute("<a>", {"a": "<b>", "b": "x"}) == "x"

Ignore rules (name based):
- the destination-relative path equals an ignored_files entry, or
- any ancestor directory name in that relative path equals an entry
"""

import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path, PurePath

from modulus.domain.errors import ErrorCodes, ModulusError
from modulus.domain.schemas import Template

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


# =============================================================================
# Tokens
# =============================================================================

def placeholder_token(variable: str) -> str:
    """Placeholder for a variable: Name → <name>."""
    return f"<{variable.lower()}>"


def _token_pattern(variable: str) -> re.Pattern[str]:
    return re.compile(re.escape(placeholder_token(variable)), re.IGNORECASE)


def substitute(content: str, bindings: Mapping[str, str]) -> str:
    """
    Replace every placeholder occurrence with its bound value.

    Args:
        content: text to rewrite
        bindings: variable name → value, applied in iteration order

    Returns:
        rewritten text (unchanged when bindings is empty)
    """
    for variable, value in bindings.items():
        # callable replacement keeps backslashes in value literal
        content = _token_pattern(variable).sub(lambda _m, v=value: v, content)
    return content


# =============================================================================
# Ignore Rules
# =============================================================================

def is_ignored(relative_path: PurePath, ignored_files: Iterable[str]) -> bool:
    """
    Whether a destination-relative file path is excluded from substitution.

    Args:
        relative_path: file path relative to the destination root
        ignored_files: template ignore entries

    Returns:
        True for an exact relative-path match or an ancestor name match
    """
    ignored = set(ignored_files)
    if relative_path.as_posix() in ignored:
        return True
    return any(part in ignored for part in relative_path.parent.parts)


# =============================================================================
# Tree Rewrite
# =============================================================================

def _iter_files(root: Path) -> list[Path]:
    return sorted(p for p in root.rglob("*") if p.is_file())


def substitute_file(path: Path, bindings: Mapping[str, str]) -> None:
    """
    Rewrite one file in place. Line endings are preserved.

    Raises:
        ModulusError: SUBSTITUTION_FAILED
    """
    try:
        with open(path, encoding=ENCODING, newline="") as f:
            content = f.read()
        content = substitute(content, bindings)
        with open(path, "w", encoding=ENCODING, newline="") as f:
            f.write(content)
    except (OSError, UnicodeDecodeError) as e:
        raise ModulusError(
            ErrorCodes.SUBSTITUTION_FAILED,
            "Could not substitute variables in file",
            path=str(path),
            cause=str(e),
        ) from e


def substitute_tree(
    destination: Path,
    template: Template,
    bindings: Mapping[str, str],
) -> list[Path]:
    """
    Rewrite every non-ignored file under the destination.

    Args:
        destination: materialized output root
        template: selected template (for ignored_files)
        bindings: variable name → value

    Returns:
        files that were rewritten

    Raises:
        ModulusError: SUBSTITUTION_FAILED
    """
    try:
        files = _iter_files(destination)
    except OSError as e:
        raise ModulusError(
            ErrorCodes.SUBSTITUTION_FAILED,
            "Could not walk destination",
            path=str(destination),
            cause=str(e),
        ) from e

    rewritten = []
    for path in files:
        relative = path.relative_to(destination)
        if is_ignored(relative, template.ignored_files):
            logger.debug(f"Skipping ignored file {relative}")
            continue

        logger.debug(f"Substituting {relative}")
        substitute_file(path, bindings)
        rewritten.append(path)

    return rewritten
