"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    PATHUTIL_PLATFORM             — Force a platform: windows / posix / virtual (default: host)
    PATHUTIL_SYMLINK_MAX_DEPTH    — Default bound for symlink resolution rounds (default: 40)
    PATHUTIL_LEGACY_DOTDOT_CHECK  — Reject any ".." substring in safety checks (default: false)
    PATHUTIL_LOG_LEVEL            — Default level used by setup_logging (default: INFO)
    PATHUTIL_LOG_DIR              — Directory for the daily log file (default: console only)

Platform Override:
    Functions that branch on Windows vs. POSIX semantics accept an explicit
    ``platform`` argument. When it is omitted they fall back to
    PLATFORM_OVERRIDE, and only then to the running host. Setting the
    variable lets fixtures recorded on one OS be replayed on another.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


PLATFORM_OVERRIDE = os.getenv("PATHUTIL_PLATFORM") or None

# Matches the Linux kernel's MAXSYMLINKS
SYMLINK_MAX_DEPTH = int(os.getenv("PATHUTIL_SYMLINK_MAX_DEPTH", 40))

LEGACY_DOTDOT_CHECK = _env_bool("PATHUTIL_LEGACY_DOTDOT_CHECK")

LOG_LEVEL = os.getenv("PATHUTIL_LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("PATHUTIL_LOG_DIR") or None
