"""
fuzzkit/guardrails/evaluator.py
Pre-flight gate: may this profile run under these flags?

Design:
  - Pure functions of (Profile, RuntimeFlags). No I/O, no logging, no globals.
    Whoever reports the Verdict owns logging (see fuzzkit.session.planner).
  - A rejection is a return value. Only assert_permitted() raises.
  - Case-insensitive comparisons lowercase at comparison time; the profile
    keeps its values exactly as configured.

Check order (first failure wins):
  1. Sandbox requirement      → SANDBOX_REQUIRED
  2. base_url has scheme+host → INVALID_BASE_URL
  3. Host in allowlist        → HOST_NOT_ALLOWED
  4. Method in allowlist      → METHOD_NOT_ALLOWED
  5. rate <= ceiling          → RATE_CEILING_EXCEEDED
  6. request_budget > 0       → EMPTY_BUDGET

Each check is independent; the order only decides which single reason is
reported when several fail at once.
"""

from __future__ import annotations

import ipaddress
import re
from typing import Callable, Iterable, List, Optional, Tuple
from urllib.parse import urlsplit

from fuzzkit.errors import GuardrailViolation
from fuzzkit.guardrails.models import RejectionKind, RuntimeFlags, Verdict
from fuzzkit.profile.models import Profile

Check = Callable[[Profile, RuntimeFlags], Optional[Verdict]]

# Registered names, IPv4 literals and IDN labels; anything else is malformed.
_HOST_RE = re.compile(r"[\w.-]+")


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def evaluate(profile: Profile, flags: RuntimeFlags) -> Verdict:
    """Return the first violated guardrail, or a permitted Verdict."""
    for check in CHECKS:
        verdict = check(profile, flags)
        if verdict is not None:
            return verdict
    return Verdict.permit()


def check_all(profile: Profile, flags: RuntimeFlags) -> List[Verdict]:
    """
    Return every violated guardrail, in check order.

    Diagnostics only: permission is decided by evaluate(). Later checks that
    depend on a parsed host are skipped when base_url is unparseable.
    """
    failures: List[Verdict] = []
    for check in CHECKS:
        verdict = check(profile, flags)
        if verdict is not None:
            failures.append(verdict)
    return failures


def assert_permitted(profile: Profile, flags: RuntimeFlags) -> None:
    """Raise GuardrailViolation if the profile is rejected."""
    verdict = evaluate(profile, flags)
    if not verdict.permitted:
        raise GuardrailViolation(verdict)


def target_host(base_url: str) -> Optional[str]:
    """
    Extract the lowercased host from an absolute URL.

    Returns None unless the URL has both a scheme and a host, the port (if
    any) is a number in 0-65535, and the authority holds no backslash,
    whitespace or control characters.
    """
    try:
        parsed = urlsplit(base_url)
        host = parsed.hostname
        parsed.port  # raises ValueError on a non-numeric or out-of-range port
    except ValueError:
        # e.g. an unterminated IPv6 literal
        return None
    if not parsed.scheme or not host:
        return None
    if any(c == "\\" or c.isspace() or not c.isprintable() for c in parsed.netloc):
        return None
    if not _valid_host(host):
        return None
    return host


# ----------------------------------------------------------------------
# Individual guardrails
# ----------------------------------------------------------------------

def _check_sandbox(profile: Profile, flags: RuntimeFlags) -> Optional[Verdict]:
    if profile.safety.require_sandbox_flag and not flags.sandbox_requested:
        return Verdict.reject(
            RejectionKind.SANDBOX_REQUIRED,
            "sandbox flag required: re-run with --sandbox",
        )
    return None


def _check_base_url(profile: Profile, flags: RuntimeFlags) -> Optional[Verdict]:
    if target_host(profile.base_url) is None:
        return Verdict.reject(
            RejectionKind.INVALID_BASE_URL,
            f"invalid base_url: {profile.base_url}",
        )
    return None


def _check_host_allowlist(profile: Profile, flags: RuntimeFlags) -> Optional[Verdict]:
    host = target_host(profile.base_url)
    if host is None:
        return None  # reported by _check_base_url
    if not _contains_ci(profile.safety.allowlist_hosts, host):
        return Verdict.reject(
            RejectionKind.HOST_NOT_ALLOWED,
            f"base_url host not in allowlist: {host}",
        )
    return None


def _check_method(profile: Profile, flags: RuntimeFlags) -> Optional[Verdict]:
    if not _contains_ci(profile.limits.allowed_methods, profile.method):
        return Verdict.reject(
            RejectionKind.METHOD_NOT_ALLOWED,
            f"HTTP method '{profile.method}' not allowed by policy",
        )
    return None


def _check_rate_ceiling(profile: Profile, flags: RuntimeFlags) -> Optional[Verdict]:
    if profile.limits.rate_per_sec > profile.limits.max_rate_per_sec:
        return Verdict.reject(
            RejectionKind.RATE_CEILING_EXCEEDED,
            "rate_per_sec exceeds policy ceiling",
        )
    return None


def _check_budget(profile: Profile, flags: RuntimeFlags) -> Optional[Verdict]:
    if profile.limits.request_budget <= 0:
        return Verdict.reject(
            RejectionKind.EMPTY_BUDGET,
            "request_budget must be > 0",
        )
    return None


CHECKS: Tuple[Check, ...] = (
    _check_sandbox,
    _check_base_url,
    _check_host_allowlist,
    _check_method,
    _check_rate_ceiling,
    _check_budget,
)


def _contains_ci(values: Iterable[str], needle: str) -> bool:
    needle = needle.lower()
    return any(v.lower() == needle for v in values)


def _valid_host(host: str) -> bool:
    if ":" in host:
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            return False
        return True
    return _HOST_RE.fullmatch(host) is not None
