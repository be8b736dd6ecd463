"""
fuzzkit/guardrails/models.py
Inputs and outputs of the guardrail evaluator.

RuntimeFlags   — What the operator asked for on this invocation.
RejectionKind  — Why a profile was refused.
Verdict        — Permitted, or rejected with exactly one RejectionKind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class RuntimeFlags:
    sandbox_requested: bool = False
    dry_run: bool = False


class RejectionKind(str, Enum):
    SANDBOX_REQUIRED = "sandbox_required"
    INVALID_BASE_URL = "invalid_base_url"
    HOST_NOT_ALLOWED = "host_not_allowed"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    RATE_CEILING_EXCEEDED = "rate_ceiling_exceeded"
    EMPTY_BUDGET = "empty_budget"


@dataclass(frozen=True)
class Verdict:
    """
    The evaluator's decision.

    `reason` is None exactly when the verdict is permitted. `detail` is the
    operator-facing message for a rejection.
    """

    reason: Optional[RejectionKind] = None
    detail: str = ""

    @classmethod
    def permit(cls) -> "Verdict":
        return cls()

    @classmethod
    def reject(cls, reason: RejectionKind, detail: str) -> "Verdict":
        return cls(reason=reason, detail=detail)

    @property
    def permitted(self) -> bool:
        return self.reason is None

    def __bool__(self) -> bool:
        return self.permitted

    def __str__(self) -> str:
        if self.permitted:
            return "Permitted"
        return f"Rejected[{self.reason.value}]: {self.detail}"
