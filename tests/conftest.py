"""Pytest configuration for api-fuzzkit."""
import copy
import logging

import pytest

from fuzzkit.base.config import set_config
from fuzzkit.profile import Profile

DEMO_PROFILE = {
    "name": "demo",
    "base_url": "https://sandbox.example",
    "endpoint": "/v1/items",
    "method": "GET",
    "limits": {
        "concurrency": 1,
        "rate_per_sec": 1,
        "request_budget": 10,
        "max_rate_per_sec": 5,
        "allowed_methods": ["GET"],
    },
    "timeouts": {"connect_ms": 1000, "read_ms": 5000},
    "safety": {
        "require_sandbox_flag": True,
        "allowlist_hosts": ["sandbox.example"],
        "force_headers": {},
    },
}

DEMO_TOML = """\
name = "demo"
base_url = "https://sandbox.example"
endpoint = "/v1/items"
method = "GET"

[limits]
concurrency = 1
rate_per_sec = 1
request_budget = 10
max_rate_per_sec = 5
allowed_methods = ["GET"]

[timeouts]
connect_ms = 1000
read_ms = 5000

[safety]
require_sandbox_flag = true
allowlist_hosts = ["sandbox.example"]
"""


@pytest.fixture
def profile_data():
    """A fresh, mutable copy of the demo profile document."""
    return copy.deepcopy(DEMO_PROFILE)


@pytest.fixture
def make_profile():
    """
    Build a Profile from the demo document with overrides.

    Top-level keys replace values; "limits"/"safety"/"timeouts" dicts are
    merged into the nested tables.
    """
    def _make(**overrides):
        data = copy.deepcopy(DEMO_PROFILE)
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key].update(value)
            else:
                data[key] = value
        return Profile.from_mapping(data)

    return _make


@pytest.fixture(autouse=True)
def _reset_config(monkeypatch):
    for var in ("FUZZKIT_PROFILE", "FUZZKIT_LOG_LEVEL", "FUZZKIT_LOG_FILE",
                "FUZZKIT_LOG_MAX_MB", "FUZZKIT_LOG_BACKUPS"):
        monkeypatch.delenv(var, raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def demo_toml():
    """The demo profile as TOML text."""
    return DEMO_TOML


@pytest.fixture
def profile_file(tmp_path):
    """Write profile text to a temp file and return its path."""
    def _write(text=DEMO_TOML, name="profile.toml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging()'s basicConfig(force=True) after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
