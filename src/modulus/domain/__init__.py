"""Domain layer: errors, schemas and constants."""

from .errors import ErrorCodes, ModulusError
from .schemas import Selection, Template

__all__ = [
    "ErrorCodes",
    "ModulusError",
    "Selection",
    "Template",
]
