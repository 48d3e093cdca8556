"""
Error definitions.

One domain exception with a machine-readable code. Route handlers turn it
into an HTTP error response, the CLI entry point into a process exit.
"""

from typing import Any


class NobtError(Exception):
    """
    Raised when input cannot be accepted.

    Usage:
        raise NobtError("MISSING_REQUIRED_FIELD", field="name")
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """Serialisable form for logs and error responses."""
        return {
            "code": self.code,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """Error code constants."""

    # === Bill submission ===
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_TOTAL = "INVALID_TOTAL"

    # === Startup ===
    INVALID_PORT = "INVALID_PORT"
    FIXTURE_INVALID = "FIXTURE_INVALID"
