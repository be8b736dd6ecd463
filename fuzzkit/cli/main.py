"""
api-fuzzkit CLI: load a target profile, run the guardrails, plan the session.

Usage examples:
    api-fuzzkit --profile profiles/kra-sandbox.toml --dry-run
    python -m fuzzkit --no-sandbox -p profiles/prod.toml

Exit codes:
    0  guardrails passed
    2  profile could not be read or parsed
    3  guardrails rejected the profile
"""

import argparse
import logging
import sys
from typing import List, Optional

from fuzzkit import __version__
from fuzzkit.base.config import FuzzkitConfig, get_config, setup_logging
from fuzzkit.errors import FormatError, ProfileReadError
from fuzzkit.guardrails import RuntimeFlags, evaluate
from fuzzkit.profile import load_profile
from fuzzkit.session import log_session, plan_session, report_verdict

EXIT_OK = 0
EXIT_PROFILE_ERROR = 2
EXIT_REJECTED = 3

logger = logging.getLogger("fuzzkit.session")


def build_parser(config: FuzzkitConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="api-fuzzkit",
        description="Sandbox API fuzzing toolkit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-p", "--profile",
        default=config.default_profile,
        help="Path to target profile TOML (default: %(default)s)",
    )
    parser.add_argument(
        "--sandbox",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Run in sandbox mode (default: on)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Plan the session but don't send requests",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    config = get_config()
    args = build_parser(config).parse_args(argv)
    setup_logging(config)

    flags = RuntimeFlags(sandbox_requested=args.sandbox, dry_run=args.dry_run)

    try:
        profile = load_profile(args.profile)
    except (ProfileReadError, FormatError) as exc:
        logger.debug("Profile load failed: %s", exc.to_dict())
        print(f"❌ {exc.message}", file=sys.stderr)
        return EXIT_PROFILE_ERROR

    verdict = evaluate(profile, flags)
    report_verdict(verdict, profile, logger)
    if not verdict.permitted:
        print(f"❌ guardrail rejected: {verdict.detail}", file=sys.stderr)
        return EXIT_REJECTED

    plan = plan_session(profile, flags)
    log_session(plan, logger)
    print(plan.banner())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
