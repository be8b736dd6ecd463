"""
tests/unit/test_profile_models.py
Profile shape validation: required fields, strict types, immutability.
"""
import pytest
from pydantic import ValidationError

from fuzzkit.errors import ErrorCode, FormatError
from fuzzkit.profile import Profile


def test_from_mapping_builds_typed_profile(profile_data):
    profile = Profile.from_mapping(profile_data)
    assert profile.name == "demo"
    assert profile.limits.allowed_methods == ("GET",)
    assert profile.safety.allowlist_hosts == ("sandbox.example",)
    assert profile.timeouts.connect_ms == 1000
    assert profile.timeouts.read_ms == 5000


def test_force_headers_default_to_empty(profile_data):
    del profile_data["safety"]["force_headers"]
    assert Profile.from_mapping(profile_data).safety.force_headers == {}


def test_force_headers_preserved(profile_data):
    profile_data["safety"]["force_headers"] = {"X-Sandbox": "1"}
    assert Profile.from_mapping(profile_data).safety.force_headers == {"X-Sandbox": "1"}


def test_policy_violations_still_load(profile_data):
    # Policy is the evaluator's job, not the model's.
    profile_data["limits"].update(request_budget=0, rate_per_sec=99, max_rate_per_sec=1)
    profile_data["base_url"] = "not a url"
    profile_data["method"] = "DELETE"
    profile = Profile.from_mapping(profile_data)
    assert profile.limits.request_budget == 0
    assert profile.base_url == "not a url"


def test_values_are_stored_verbatim(profile_data):
    profile_data["method"] = "gEt"
    profile_data["safety"]["allowlist_hosts"] = ["Sandbox.Example"]
    profile = Profile.from_mapping(profile_data)
    assert profile.method == "gEt"
    assert profile.safety.allowlist_hosts == ("Sandbox.Example",)


def test_unknown_keys_are_ignored(profile_data):
    profile_data["comment"] = "extra"
    profile_data["limits"]["burst"] = 3
    assert Profile.from_mapping(profile_data).name == "demo"


class TestFormatErrors:
    def test_missing_top_level_field(self, profile_data):
        del profile_data["base_url"]
        with pytest.raises(FormatError) as exc_info:
            Profile.from_mapping(profile_data)
        err = exc_info.value
        assert err.code == ErrorCode.CONFIG_MISSING_REQUIRED
        assert "base_url" in err.message
        assert err.details["errors"][0]["loc"] == ("base_url",)

    def test_missing_nested_table(self, profile_data):
        del profile_data["timeouts"]
        with pytest.raises(FormatError) as exc_info:
            Profile.from_mapping(profile_data)
        assert exc_info.value.code == ErrorCode.CONFIG_MISSING_REQUIRED

    def test_missing_nested_field_reports_path(self, profile_data):
        del profile_data["limits"]["max_rate_per_sec"]
        with pytest.raises(FormatError) as exc_info:
            Profile.from_mapping(profile_data)
        assert "limits.max_rate_per_sec" in exc_info.value.message

    @pytest.mark.parametrize("table,key,value", [
        ("limits", "rate_per_sec", "5"),
        ("limits", "rate_per_sec", 1.5),
        ("limits", "request_budget", True),
        ("limits", "concurrency", -1),
        ("limits", "allowed_methods", "GET"),
        ("limits", "allowed_methods", ["GET", 1]),
        ("timeouts", "read_ms", -5),
        ("limits", "rate_per_sec", 2**32),
        ("limits", "request_budget", 2**32),
        ("limits", "max_rate_per_sec", 2**32),
        ("safety", "require_sandbox_flag", "yes"),
        ("safety", "require_sandbox_flag", 1),
        ("safety", "force_headers", {"X-Count": 3}),
    ])
    def test_wrong_type_in_table(self, profile_data, table, key, value):
        profile_data[table][key] = value
        with pytest.raises(FormatError) as exc_info:
            Profile.from_mapping(profile_data)
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID
        assert f"{table}.{key}" in exc_info.value.message

    @pytest.mark.parametrize("key,value", [
        ("name", ""),
        ("name", 42),
        ("method", ["GET"]),
        ("endpoint", None),
    ])
    def test_wrong_top_level_value(self, profile_data, key, value):
        profile_data[key] = value
        with pytest.raises(FormatError):
            Profile.from_mapping(profile_data)

    def test_cause_is_pydantic_error(self, profile_data):
        del profile_data["method"]
        with pytest.raises(FormatError) as exc_info:
            Profile.from_mapping(profile_data)
        assert isinstance(exc_info.value.__cause__, ValidationError)


def test_profile_is_immutable(profile_data):
    profile = Profile.from_mapping(profile_data)
    with pytest.raises(ValidationError):
        profile.method = "DELETE"
    with pytest.raises(ValidationError):
        profile.limits.request_budget = 0
    with pytest.raises(AttributeError):
        profile.limits.allowed_methods.append("DELETE")
    with pytest.raises(TypeError):
        profile.safety.force_headers["X-Injected"] = "1"
    assert "X-Injected" not in profile.safety.force_headers


def test_default_force_headers_are_read_only(profile_data):
    del profile_data["safety"]["force_headers"]
    profile = Profile.from_mapping(profile_data)
    with pytest.raises(TypeError):
        profile.safety.force_headers["X-Injected"] = "1"


def test_force_headers_dump_as_plain_dict(profile_data):
    profile_data["safety"]["force_headers"] = {"X-Sandbox": "1"}
    dumped = Profile.from_mapping(profile_data).model_dump()
    assert dumped["safety"]["force_headers"] == {"X-Sandbox": "1"}
    assert type(dumped["safety"]["force_headers"]) is dict


class TestFromToml:
    def test_parses_demo_document(self, demo_toml):
        profile = Profile.from_toml(demo_toml)
        assert profile.name == "demo"
        assert profile.safety.require_sandbox_flag is True
        assert profile.safety.force_headers == {}

    def test_invalid_toml_is_parse_error(self):
        with pytest.raises(FormatError) as exc_info:
            Profile.from_toml("name = \n[limits")
        err = exc_info.value
        assert err.code == ErrorCode.CONFIG_PARSE_ERROR
        assert err.message.startswith("invalid TOML in profile")

    def test_quoted_integer_is_format_error(self, demo_toml):
        text = demo_toml.replace("rate_per_sec = 1\n", 'rate_per_sec = "1"\n')
        with pytest.raises(FormatError) as exc_info:
            Profile.from_toml(text)
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID

    def test_summary_mentions_target(self, demo_toml):
        summary = Profile.from_toml(demo_toml).summary()
        assert "demo" in summary
        assert "https://sandbox.example/v1/items" in summary


def test_largest_unsigned_values_load(profile_data):
    profile_data["limits"].update(rate_per_sec=2**32 - 1, max_rate_per_sec=2**32 - 1)
    profile = Profile.from_mapping(profile_data)
    assert profile.limits.rate_per_sec == 2**32 - 1
