# ============================================================================
# fuzzkit/base/config.py
# Process Configuration Management
# ============================================================================
#
# PURPOSE:
# Settings that are not part of a target profile: where the default profile
# lives and how logging behaves. Everything is read from FUZZKIT_* environment
# variables so nothing needs editing in code.
#
# KEY CONCEPTS:
# 1. Frozen dataclasses: settings can't change after startup
# 2. Environment Variables: FUZZKIT_LOG_LEVEL=DEBUG, FUZZKIT_PROFILE=..., etc.
# 3. Singleton: get_config() builds the config once and reuses it
#
# NOT HERE:
# Runtime flags (--sandbox, --dry-run) come from the command line and are
# passed explicitly to the guardrail evaluator.
#
# ============================================================================

from __future__ import annotations

import os
import logging
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_PATH = "profiles/kra-sandbox.toml"


# ============================================================================
# Logging Configuration
# ============================================================================

@dataclass(frozen=True)
class LogConfig:
    # DEBUG / INFO / WARNING / ERROR
    level: str = "INFO"

    # %(name)s is the module that logged, e.g. "fuzzkit.session.planner"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    # Optional log file in addition to the console; None = console only
    file_path: Optional[Path] = None

    # Rotation: roll the file at this size, keep this many old files
    max_file_size_mb: int = 10
    backup_count: int = 5


# ============================================================================
# Master Configuration Container
# ============================================================================

@dataclass(frozen=True)
class FuzzkitConfig:
    log: LogConfig = field(default_factory=LogConfig)

    # Profile used when --profile is not given
    default_profile: str = DEFAULT_PROFILE_PATH

    @classmethod
    def from_env(cls) -> "FuzzkitConfig":
        log_file = os.getenv("FUZZKIT_LOG_FILE")
        log = LogConfig(
            level=os.getenv("FUZZKIT_LOG_LEVEL", "INFO"),
            file_path=Path(log_file) if log_file else None,
            max_file_size_mb=int(os.getenv("FUZZKIT_LOG_MAX_MB", "10")),
            backup_count=int(os.getenv("FUZZKIT_LOG_BACKUPS", "5")),
        )
        return cls(
            log=log,
            default_profile=os.getenv("FUZZKIT_PROFILE", DEFAULT_PROFILE_PATH),
        )


# ============================================================================
# Global Configuration Singleton
# ============================================================================

_config: Optional[FuzzkitConfig] = None


def get_config() -> FuzzkitConfig:
    """
    Get the global configuration instance.

    Built from the environment on first use, then reused.
    """
    global _config
    if _config is None:
        _config = FuzzkitConfig.from_env()
    return _config


def set_config(config: Optional[FuzzkitConfig]) -> None:
    """
    Replace the global configuration (mainly used for testing).

    Passing None makes the next get_config() re-read the environment.
    """
    global _config
    _config = config


def setup_logging(config: Optional[FuzzkitConfig] = None) -> None:
    """
    Configure Python's logging system based on our settings.

    Call this once at process startup. Library code only ever uses
    logging.getLogger(__name__) and never configures handlers itself.

    Args:
        config: Optional config to use (defaults to global config)
    """
    cfg = config or get_config()

    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if cfg.log.file_path is not None:
        cfg.log.file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                cfg.log.file_path,
                maxBytes=cfg.log.max_file_size_mb * 1024 * 1024,
                backupCount=cfg.log.backup_count,
            )
        )

    level = getattr(logging, cfg.log.level.upper(), None)
    known = isinstance(level, int)
    if not known:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=cfg.log.format,
        handlers=handlers,
        force=True,
    )
    if not known:
        logger.warning("Unknown FUZZKIT_LOG_LEVEL %r, using INFO", cfg.log.level)
