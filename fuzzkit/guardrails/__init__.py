"""
fuzzkit/guardrails
Pre-flight safety gate for fuzzing sessions.

Usage:
    from fuzzkit.guardrails import evaluate, RuntimeFlags, RejectionKind

    verdict = evaluate(profile, RuntimeFlags(sandbox_requested=True))
    if not verdict.permitted:
        print(verdict.reason, verdict.detail)   # e.g. RejectionKind.EMPTY_BUDGET
"""

from fuzzkit.errors import GuardrailViolation
from fuzzkit.guardrails.models import RejectionKind, RuntimeFlags, Verdict
from fuzzkit.guardrails.evaluator import assert_permitted, check_all, evaluate, target_host

__all__ = [
    "evaluate",
    "check_all",
    "assert_permitted",
    "target_host",
    "RuntimeFlags",
    "RejectionKind",
    "Verdict",
    "GuardrailViolation",
]
