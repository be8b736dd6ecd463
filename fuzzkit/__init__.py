# ============================================================================
# fuzzkit/__init__.py
# Package Marker for api-fuzzkit
# ============================================================================
#
# LAYOUT:
# - profile/     typed target profiles and the TOML loader
# - guardrails/  the pre-flight safety gate (pure functions)
# - session/     turns a verdict into a dry-run or execution plan
# - base/        configuration and logging setup
# - cli/         the api-fuzzkit command
#
# ============================================================================

__version__ = "0.1.0"
