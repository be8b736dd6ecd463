"""
fuzzkit/profile/loader.py
Load a Profile from a TOML file on disk.

Reading and parsing are kept apart so the operator can tell "the file is not
there" (ProfileReadError) from "the file is wrong" (FormatError).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from fuzzkit.errors import ProfileReadError
from fuzzkit.profile.models import Profile

logger = logging.getLogger(__name__)


def load_profile(path: Union[str, Path]) -> Profile:
    """
    Read and validate the profile at `path`.

    Raises:
        ProfileReadError: the file could not be read
        FormatError: the file is not valid TOML or has the wrong shape
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ProfileReadError(str(path), str(exc)) from exc

    profile = Profile.from_toml(raw)
    logger.debug("[ProfileLoader] Loaded %s from %s", profile.summary(), path)
    return profile
