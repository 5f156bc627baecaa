"""
Templates layer: discovery, copying and token substitution.

- registry.py      scan the store, parse <id>.meta.toml descriptors
- materializer.py  copy a template tree into the destination
- substitution.py  replace <variable> tokens in copied files
"""

from .materializer import copy_directory
from .registry import (
    discover_templates,
    get_template,
    is_store_empty,
    load_template,
    parse_descriptor,
)
from .substitution import (
    is_ignored,
    placeholder_token,
    substitute,
    substitute_file,
    substitute_tree,
)

__all__ = [
    # registry
    "discover_templates",
    "get_template",
    "is_store_empty",
    "load_template",
    "parse_descriptor",
    # materializer
    "copy_directory",
    # substitution
    "placeholder_token",
    "substitute",
    "is_ignored",
    "substitute_file",
    "substitute_tree",
]
