"""
Platform
========
Explicit platform identifiers and the native path primitives behind them.

Path semantics that differ between operating systems (separator, drive
letters, what counts as absolute) are selected by a platform value rather
than by reading the running OS at every call site. That keeps Windows
behaviour testable on a Linux CI runner and vice versa.

Supported platforms:
    windows  — ntpath semantics, backslash separator, drive letters
    posix    — posixpath semantics, forward slash separator
    virtual  — OS-independent inventory paths; POSIX algebra, no Windows branches
"""
import logging
import ntpath
import posixpath
import sys
from types import ModuleType
from typing import Optional

from pathutil.core import config

logger = logging.getLogger(__name__)


class Platform:
    """Supported platform identifiers.  Values must remain lowercase strings."""
    WINDOWS = "windows"
    POSIX   = "posix"
    VIRTUAL = "virtual"


PLATFORMS: frozenset[str] = frozenset({
    Platform.WINDOWS,
    Platform.POSIX,
    Platform.VIRTUAL,
})


def host_platform() -> str:
    """Return the platform of the running interpreter."""
    if sys.platform.startswith("win"):
        return Platform.WINDOWS
    return Platform.POSIX


def current_platform() -> str:
    """
    Return the platform used when a caller does not pass one explicitly.

    The PATHUTIL_PLATFORM override wins when it names a known platform.
    An unknown override is logged and ignored.
    """
    override = config.PLATFORM_OVERRIDE
    if override:
        value = override.strip().lower()
        if value in PLATFORMS:
            return value
        logger.warning("Ignoring unknown PATHUTIL_PLATFORM value: %r", override)
    return host_platform()


def resolve_platform(platform: Optional[str] = None) -> str:
    """
    Normalise an optional platform argument.

    Raises
    ------
    ValueError
        If ``platform`` is given but is not one of PLATFORMS.
    """
    if platform is None:
        return current_platform()
    value = platform.strip().lower()
    if value not in PLATFORMS:
        raise ValueError(
            f"Unknown platform {platform!r}; expected one of {sorted(PLATFORMS)}"
        )
    return value


def is_windows(platform: Optional[str] = None) -> bool:
    return resolve_platform(platform) == Platform.WINDOWS


def path_flavor(platform: Optional[str] = None) -> ModuleType:
    """Return the native path module (``ntpath`` or ``posixpath``) for a platform."""
    if is_windows(platform):
        return ntpath
    return posixpath


def native_separator(platform: Optional[str] = None) -> str:
    return path_flavor(platform).sep


def volume_name(path: str, platform: Optional[str] = None) -> str:
    """Return the leading volume (``C:`` or ``\\\\host\\share``); empty off Windows."""
    if not is_windows(platform):
        return ""
    return ntpath.splitdrive(path)[0]


def clean(path: str, platform: Optional[str] = None) -> str:
    """
    Lexically clean a native path.

    Resolves ``.`` and ``..`` segments and collapses redundant separators.
    An empty path cleans to ``"."``. On POSIX a leading ``//`` is collapsed
    to a single ``/``; ``posixpath.normpath`` would otherwise preserve it.
    """
    flavor = path_flavor(platform)
    cleaned = flavor.normpath(path)
    if flavor is posixpath and cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned
