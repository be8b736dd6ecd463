"""Module errors: structured error taxonomy for api-fuzzkit."""
#
# PURPOSE:
# Gives every failure the toolkit can surface a stable error code, a
# human-readable message and an optional details dictionary, so the CLI and
# any embedding caller can react to them programmatically.
#
# ERROR CODE FORMAT:
# - CONFIG_XXX: Profile loading / deserialization errors
# - GUARD_XXX: Guardrail rejections raised through assert_permitted()
#
# USAGE:
#   from fuzzkit.errors import FormatError, ErrorCode
#
#   raise FormatError(
#       "invalid TOML in profile",
#       code=ErrorCode.CONFIG_PARSE_ERROR,
#       details={"line": 3},
#   )
#
# NOTE:
# Guardrail rejections are normally *values* (see fuzzkit.guardrails.Verdict).
# GuardrailViolation only exists for callers that opt into exception flow.
#
from enum import Enum
from typing import Dict, Any, Optional


class ErrorCode(Enum):
    # Config Errors
    CONFIG_INVALID = "CONFIG_001"
    CONFIG_MISSING_REQUIRED = "CONFIG_002"
    CONFIG_FILE_NOT_FOUND = "CONFIG_003"
    CONFIG_PARSE_ERROR = "CONFIG_004"

    # Guardrail Errors
    GUARD_REJECTED = "GUARD_001"


class FuzzkitError(Exception):
    """
    Base exception class for api-fuzzkit with structured error information.

    Attributes:
        code: ErrorCode enum value (e.g., "CONFIG_004")
        message: Human-readable error message
        details: Optional dictionary with additional context
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}

        # Build exception message with code for easy debugging
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message and details
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class FormatError(FuzzkitError):
    """Profile text is malformed or does not have the expected shape."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_INVALID,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code, message, details)


class ProfileReadError(FuzzkitError):
    """The profile file could not be read from disk."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            ErrorCode.CONFIG_FILE_NOT_FOUND,
            f"failed to read profile: {path}: {reason}",
            details={"path": path, "reason": reason},
        )
        self.path = path


class GuardrailViolation(FuzzkitError):
    """Raised by assert_permitted() when a profile is rejected."""

    def __init__(self, verdict: Any):
        self.verdict = verdict
        super().__init__(
            ErrorCode.GUARD_REJECTED,
            verdict.detail,
            details={"reason": verdict.reason.value if verdict.reason else None},
        )


__all__ = [
    "ErrorCode",
    "FuzzkitError",
    "FormatError",
    "ProfileReadError",
    "GuardrailViolation",
]
