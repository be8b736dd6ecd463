"""Session planning: what a run does once the guardrails permit it."""

from fuzzkit.session.planner import SessionMode, SessionPlan, log_session, plan_session, report_verdict

__all__ = ["SessionMode", "SessionPlan", "plan_session", "report_verdict", "log_session"]
