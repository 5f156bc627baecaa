"""
Error definitions for modulus.

Rules:
- No silent failures: anything that must stop the run raises ModulusError
- Skippable discovery problems are logged, not raised
- Prompt cancellation is an outcome, not an error
"""

from typing import Any


class ModulusError(Exception):
    """
    Fatal error that aborts the whole run.

    Raised for:
    - store root that cannot be created
    - malformed or mis-shaped template descriptors
    - any I/O failure while copying or substituting

    Usage:
        raise ModulusError(ErrorCodes.COPY_FAILED, "Could not copy", path=str(p))
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        base = f"[{self.code}] {self.message}"
        return f"{base} ({ctx_str})" if ctx_str else base

    def to_dict(self) -> dict[str, Any]:
        """For logs / JSON output."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """Error code constants."""

    # === Setup ===
    CONFIG_DIR_UNAVAILABLE = "CONFIG_DIR_UNAVAILABLE"

    # === Registry ===
    DESCRIPTOR_INVALID = "DESCRIPTOR_INVALID"
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"

    # === Materialize / Substitute ===
    COPY_FAILED = "COPY_FAILED"
    SUBSTITUTION_FAILED = "SUBSTITUTION_FAILED"
