"""
fuzzkit/session/planner.py

Purpose:
    Everything that happens *after* the guardrails have spoken.
    - report_verdict() writes the verdict to a logger the caller hands in.
    - plan_session() turns a permitted profile into a SessionPlan that says
      whether this run is a dry-run or would execute.

    The evaluator itself never logs; this module is where verdicts become
    audit lines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from fuzzkit.guardrails.models import RuntimeFlags, Verdict
from fuzzkit.profile.models import Profile


class SessionMode(str, Enum):
    DRY_RUN = "dry-run"
    EXECUTION = "execution"


@dataclass(frozen=True)
class SessionPlan:
    profile: Profile
    mode: SessionMode

    @property
    def is_dry_run(self) -> bool:
        return self.mode is SessionMode.DRY_RUN

    def banner(self) -> str:
        """The line printed to the operator once the session is planned."""
        if self.is_dry_run:
            return "(dry-run) Ready to plan test cases. No requests will be sent."
        # TODO: hand the plan to an HTTP transport once one exists.
        return "Execution would start here (transport not wired yet)."


def plan_session(profile: Profile, flags: RuntimeFlags) -> SessionPlan:
    mode = SessionMode.DRY_RUN if flags.dry_run else SessionMode.EXECUTION
    return SessionPlan(profile=profile, mode=mode)


def report_verdict(verdict: Verdict, profile: Profile, log: logging.Logger) -> None:
    """
    Emit one structured audit line for the verdict.

    Rejections go out at WARNING with the reason code; permits at INFO.
    """
    if verdict.permitted:
        log.info(
            "AUDIT | Profile=%s | Result=PERMITTED | Reason=all guardrails passed",
            profile.name,
        )
    else:
        log.warning(
            "AUDIT | Profile=%s | Result=REJECTED | Reason=%s | Detail=%s",
            profile.name,
            verdict.reason.value,
            verdict.detail,
        )


def log_session(plan: SessionPlan, log: logging.Logger) -> None:
    """Log the planned session with the limits it will run under."""
    p = plan.profile
    log.info(
        "guardrails OK; %s mode | name=%s base=%s endpoint=%s method=%s "
        "budget=%d rate=%d concurrency=%d",
        plan.mode.value,
        p.name,
        p.base_url,
        p.endpoint,
        p.method,
        p.limits.request_budget,
        p.limits.rate_per_sec,
        p.limits.concurrency,
    )
