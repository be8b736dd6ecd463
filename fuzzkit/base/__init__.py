"""Process-level plumbing: configuration and logging setup."""

from fuzzkit.base.config import FuzzkitConfig, LogConfig, get_config, set_config, setup_logging

__all__ = ["FuzzkitConfig", "LogConfig", "get_config", "set_config", "setup_logging"]
