"""
Symlink Resolution
==================
Bounded symlink resolution for paths found on scanned filesystems.

Scanned images routinely contain circular or dangling links, so resolution
is capped at a fixed number of rounds and never raises: on failure the last
successfully resolved path is returned.
"""
import logging
import os
from typing import Optional

from pathutil.core import config

logger = logging.getLogger(__name__)


def resolve_symlinks(path: str, max_depth: Optional[int] = None) -> str:
    """
    Resolve symlinks in ``path`` for at most ``max_depth`` rounds.

    Parameters
    ----------
    path : str
        Path to resolve.
    max_depth : int | None
        Maximum number of resolution rounds. ``None`` uses
        PATHUTIL_SYMLINK_MAX_DEPTH; zero or less returns ``path`` untouched.

    Returns
    -------
    str
        The resolved path. Resolution stops early when a round fails (the
        previous value is returned) or when a round changes nothing.
        Relative input stays relative to the working directory.
    """
    if max_depth is None:
        max_depth = config.SYMLINK_MAX_DEPTH
    if max_depth <= 0:
        return path

    keep_relative = not os.path.isabs(path)
    resolved = path
    for _ in range(max_depth):
        try:
            candidate = os.path.realpath(resolved, strict=True)
        except OSError as e:
            logger.debug("Stopped resolving %s at %s: %s", path, resolved, e)
            return resolved
        if keep_relative:
            try:
                candidate = os.path.relpath(candidate)
            except ValueError:
                # Different drive than the working directory on Windows
                keep_relative = False

        if candidate == resolved:
            break
        resolved = candidate

    return resolved
