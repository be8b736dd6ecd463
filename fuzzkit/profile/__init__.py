"""
fuzzkit/profile
Typed, immutable target profiles.

Usage:
    from fuzzkit.profile import load_profile, FormatError

    profile = load_profile("profiles/kra-sandbox.toml")
    profile.limits.request_budget     # 10
    profile.safety.allowlist_hosts    # ("sandbox.example",)
"""

from fuzzkit.errors import FormatError, ProfileReadError
from fuzzkit.profile.models import Limits, Profile, Safety, Timeouts
from fuzzkit.profile.loader import load_profile

__all__ = [
    "Profile",
    "Limits",
    "Timeouts",
    "Safety",
    "load_profile",
    "FormatError",
    "ProfileReadError",
]
