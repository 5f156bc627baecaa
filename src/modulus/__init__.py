"""
modulus: scaffold projects from local directory templates.

Layers:
- domain/     errors, schemas, constants
- core/       configuration and logging setup
- templates/  registry, materializer, token substitution
- app/        interactive prompts and CLI
"""

__version__ = "0.1.0"
