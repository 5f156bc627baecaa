"""
Data schemas for modulus.

A Template is built once per discovered store subdirectory and never mutated.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, eq=False)
class Template:
    """One template in the store."""

    name: str
    source_path: Path
    ignored_files: frozenset[str] = frozenset()
    # variable name -> prompt text, in declaration order
    variables: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "ignored_files", frozenset(self.ignored_files))
        object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "ignored_files": sorted(self.ignored_files),
            "variables": dict(self.variables),
            "source_path": str(self.source_path),
        }


@dataclass(frozen=True, eq=False)
class Selection:
    """Everything the user chose for one run."""

    template: Template
    destination: Path
    # variable name -> value, in the template's declaration order
    bindings: Mapping[str, str] = field(default_factory=dict)
