"""
Path Safety
===========
Heuristic checks used before acting on paths taken from untrusted input.

Checks:
    - contains_path           — child stays inside parent after cleaning
    - validate_path_safety    — relative path with no upward traversal
    - is_windows_reserved_name — filename collides with a DOS device name

These are heuristics, not a sandbox. Anything relying on them for real
isolation must also check resolved real paths.
"""
import logging
import re
from typing import Optional

from pathutil.core import config
from pathutil.core.constants import WINDOWS_RESERVED_NAMES
from pathutil.core.platform import clean, resolve_platform
from pathutil.fs.normalize import is_absolute, relative_to

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\\/]")


def contains_path(parent: str, child: str, *, platform: Optional[str] = None) -> bool:
    """
    Check that ``child`` lies inside ``parent`` (or is ``parent`` itself).

    Parameters
    ----------
    parent : str
        Directory that must contain the child.
    child : str
        Candidate path. ``..`` segments are resolved before comparing.
    platform : str | None
        Platform whose path rules apply.

    Returns
    -------
    bool
        False if the relative path climbs out of ``parent`` or cannot be
        computed at all.
    """
    platform = resolve_platform(platform)
    parent = clean(parent, platform)
    child = clean(child, platform)
    try:
        rel = relative_to(parent, child, platform=platform)
    except ValueError as e:
        logger.debug("No relative path from %s to %s: %s", parent, child, e)
        return False
    return not rel.startswith("..")


def validate_path_safety(
    path: str,
    *,
    platform: Optional[str] = None,
    legacy: Optional[bool] = None,
) -> bool:
    """
    Check that a path is relative and does not traverse upwards.

    By default only whole ``..`` segments count as traversal, so names such
    as ``report..v2.txt`` are accepted. With ``legacy=True`` (or
    PATHUTIL_LEGACY_DOTDOT_CHECK set) any ``..`` substring is rejected.
    """
    if legacy is None:
        legacy = config.LEGACY_DOTDOT_CHECK
    cleaned = clean(path, platform)

    if legacy:
        traverses = ".." in cleaned
    else:
        traverses = ".." in _SEPARATORS.split(cleaned)
    if traverses:
        return False

    if is_absolute(cleaned, platform=platform):
        return False
    return True


def is_windows_reserved_name(name: str) -> bool:
    """
    Check whether a filename is a reserved DOS device name.

    The last extension is ignored and the comparison is case-insensitive,
    so ``con.txt`` is reserved but ``CONSOLE.exe`` is not.
    """
    if not name:
        return False
    base_name = name.upper()
    dot_index = base_name.rfind(".")
    if dot_index != -1:
        base_name = base_name[:dot_index]
    return base_name in WINDOWS_RESERVED_NAMES
