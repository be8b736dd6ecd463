"""
fuzzkit/profile/models.py
Data models for a target profile.

Profile   — One target's operating policy (endpoint, limits, safety rules).
Limits    — Concurrency, rate and budget limits plus the method allowlist.
Timeouts  — Connect/read timeouts carried for the transport.
Safety    — Sandbox requirement, host allowlist and forced headers.

The models only guarantee shape: required fields are present and every value
has the right type. Policy (allowlists, rate ceiling, budget) is decided by
fuzzkit.guardrails, never here, so a profile with request_budget = 0 loads
fine and is rejected later with a precise reason.
"""

from __future__ import annotations

import tomllib
from types import MappingProxyType
from typing import Annotated, Any, Dict, List, Mapping, Tuple

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
)

from fuzzkit.errors import ErrorCode, FormatError

# Counters and limits are unsigned; rates and the budget also fit in 32 bits.
# Out of range is a shape error.
Unsigned = Annotated[StrictInt, Field(ge=0)]
U32 = Annotated[StrictInt, Field(ge=0, le=2**32 - 1)]

# Read-only view over the validated header dict; dumps back to a plain dict.
HeaderMap = Annotated[
    Mapping[StrictStr, StrictStr],
    AfterValidator(lambda v: MappingProxyType(dict(v))),
    PlainSerializer(dict),
]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Limits(_Frozen):
    concurrency: Unsigned
    rate_per_sec: U32
    request_budget: U32
    max_rate_per_sec: U32
    allowed_methods: Tuple[StrictStr, ...]


class Timeouts(_Frozen):
    connect_ms: Unsigned
    read_ms: Unsigned


class Safety(_Frozen):
    require_sandbox_flag: StrictBool
    allowlist_hosts: Tuple[StrictStr, ...]
    # Absent key => empty mapping.
    force_headers: HeaderMap = Field(default_factory=dict, validate_default=True)


class Profile(_Frozen):
    """
    Immutable policy for one fuzzing target.

    Stored values are exactly what the profile file said (no case folding),
    so diagnostics can quote them back to the operator.
    """

    name: Annotated[StrictStr, Field(min_length=1)]
    base_url: StrictStr
    endpoint: StrictStr
    method: StrictStr
    limits: Limits
    timeouts: Timeouts
    safety: Safety

    # ---------- Factories ----------

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Profile":
        """
        Validate an already-parsed document into a Profile.

        Raises FormatError carrying pydantic's error list on a missing field
        or wrong type.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            errors = exc.errors(include_url=False)
            missing = any(err.get("type") == "missing" for err in errors)
            raise FormatError(
                f"invalid profile: {_summarize(errors)}",
                code=ErrorCode.CONFIG_MISSING_REQUIRED if missing else ErrorCode.CONFIG_INVALID,
                details={"errors": errors},
            ) from exc

    @classmethod
    def from_toml(cls, text: str) -> "Profile":
        """Parse TOML profile text. Raises FormatError on bad TOML or bad shape."""
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise FormatError(
                f"invalid TOML in profile: {exc}",
                code=ErrorCode.CONFIG_PARSE_ERROR,
                details={"parser": str(exc)},
            ) from exc
        return cls.from_mapping(data)

    # ---------- Helpers ----------

    def summary(self) -> str:
        return (
            f"Profile(name={self.name!r}, {self.method} {self.base_url}{self.endpoint}, "
            f"budget={self.limits.request_budget}, rate={self.limits.rate_per_sec}/s)"
        )


def _summarize(errors: List[Dict[str, Any]]) -> str:
    """Render pydantic errors as 'limits.rate_per_sec: Input should be ...; ...'."""
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)
