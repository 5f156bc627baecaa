"""
Domain constants: names and defaults shared across modulus.
"""

# =============================================================================
# Application
# =============================================================================

APP_NAME = "modulus"

# =============================================================================
# Environment
# =============================================================================

CONFIG_DIR_ENV = "MODULUS_CONFIG_DIR"
LOG_LEVEL_ENV = "MODULUS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# =============================================================================
# Template Store Layout
# =============================================================================
# <store_root>/
# ├── <template_id>/
# │   ├── <template_id>.meta.toml   # descriptor (never substituted)
# │   └── ...                       # payload

META_FILE_SUFFIX = ".meta.toml"

# =============================================================================
# Prompts
# =============================================================================

DEFAULT_DESTINATION = "."


def meta_filename(template_id: str) -> str:
    """Descriptor file name for a template directory."""
    return f"{template_id}{META_FILE_SUFFIX}"
