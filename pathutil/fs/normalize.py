"""
Path Normalisation
==================
Conversion between native and virtual path forms, structural queries, and
trailing-separator shaping.

Responsibilities:
    - Convert native paths to virtual (forward slash) paths and back
    - Clean native paths using the selected platform's rules
    - Join and split virtual paths
    - Compute relative paths with pure string algebra (no cwd lookups)
    - Add or remove trailing separators

Virtual paths are what inventory records store: forward slashes only,
regardless of the OS that produced them.
"""
import re
from typing import Optional

from pathutil.core.platform import (
    Platform,
    clean,
    is_windows,
    path_flavor,
    resolve_platform,
    volume_name,
)

_REPEATED_SLASHES = re.compile(r"/{2,}")


# ---------------------------------------------------------------------------
# 1. Normalisation
# ---------------------------------------------------------------------------
def normalize_path(path: str, is_virtual: bool, *, platform: Optional[str] = None) -> str:
    """
    Normalise a path for storage or native use.

    Parameters
    ----------
    path : str
        Raw path as collected from disk, a container layer or a registry dump.
    is_virtual : bool
        True for container/virtual filesystems: only separators are rewritten.
        False for real filesystems: the path is cleaned with native rules.
    platform : str | None
        Platform whose rules apply to native cleaning.

    Returns
    -------
    str
        Normalised path. Empty input is returned unchanged.
    """
    if not path:
        return path
    if is_virtual:
        return to_virtual_path(path)
    return clean(path, platform)


def to_virtual_path(path: str) -> str:
    """Convert every backslash separator to a forward slash."""
    return path.replace("\\", "/")


def from_virtual_path(path: str, *, platform: Optional[str] = None) -> str:
    """Convert a stored virtual path back to the platform's native form."""
    if is_windows(platform):
        return path.replace("/", "\\")
    return path


def join_virtual(*elements: str) -> str:
    """
    Join path elements with forward slashes, regardless of OS.

    Each element is converted to virtual form first, then runs of repeated
    slashes in the joined result are collapsed to one.

    Examples
    --------
    >>> join_virtual("app//src", "test")
    'app/src/test'
    """
    if not elements:
        return ""
    parts = [to_virtual_path(e) for e in elements]
    return _REPEATED_SLASHES.sub("/", "/".join(parts))


# ---------------------------------------------------------------------------
# 2. Structural queries
# ---------------------------------------------------------------------------
def is_absolute(path: str, *, platform: Optional[str] = None) -> bool:
    """
    Check whether a path is absolute under the platform's conventions.

    On Windows a path needs both a volume and a rooted remainder
    (``C:\\x``), or must be a UNC path. ``\\x`` and ``C:x`` are relative.
    """
    if not is_windows(platform):
        return path.startswith("/")
    drive = volume_name(path, Platform.WINDOWS)
    if not drive:
        return False
    if drive[:2] in ("\\\\", "//", "\\/", "/\\"):
        return True
    rest = path[len(drive):]
    return rest[:1] in ("\\", "/")


def split_path(path: str) -> tuple[str, str]:
    """
    Split a path into ``(directory, filename)`` at the last separator.

    Both separator styles are accepted; the directory is returned in
    virtual form. Without any separator the directory is empty.
    """
    path = to_virtual_path(path)
    directory, sep, filename = path.rpartition("/")
    if not sep:
        return "", path
    return directory, filename


def _same_element(a: str, b: str, platform: str) -> bool:
    if platform == Platform.WINDOWS:
        return a.casefold() == b.casefold()
    return a == b


def relative_to(base: str, target: str, *, platform: Optional[str] = None) -> str:
    """
    Return the relative path from ``base`` to ``target``.

    Works lexically on cleaned paths and never consults the current
    working directory.

    Raises
    ------
    ValueError
        When no relative path exists: one path is absolute and the other is
        not, the volumes differ, or ``base`` climbs above a point ``target``
        can be expressed from.
    """
    platform = resolve_platform(platform)
    sep = path_flavor(platform).sep

    base_clean = clean(base, platform)
    target_clean = clean(target, platform)
    if _same_element(base_clean, target_clean, platform):
        return "."

    base_vol = volume_name(base_clean, platform)
    target_vol = volume_name(target_clean, platform)
    base_rest = base_clean[len(base_vol):]
    target_rest = target_clean[len(target_vol):]
    if base_rest == ".":
        base_rest = ""
    elif not base_rest and len(base_vol) > 2:
        # A bare UNC share root (\\host\share) is rooted
        base_rest = sep

    if (
        base_rest.startswith(sep) != target_rest.startswith(sep)
        or not _same_element(base_vol, target_vol, platform)
    ):
        raise ValueError(f"Cannot make {target!r} relative to {base!r}")

    base_parts = [p for p in base_rest.split(sep) if p and p != "."]
    target_parts = [p for p in target_rest.split(sep) if p and p != "."]

    common = 0
    for b, t in zip(base_parts, target_parts):
        if not _same_element(b, t, platform):
            break
        common += 1

    remaining_base = base_parts[common:]
    if ".." in remaining_base:
        raise ValueError(f"Cannot make {target!r} relative to {base!r}")

    parts = [".."] * len(remaining_base) + target_parts[common:]
    return sep.join(parts) if parts else "."


# ---------------------------------------------------------------------------
# 3. Trailing separators
# ---------------------------------------------------------------------------
def ensure_trailing_slash(path: str, is_virtual: bool, *, platform: Optional[str] = None) -> str:
    """Append a separator to a directory path if it does not end with one."""
    if not path:
        return path
    separator = "/"
    if not is_virtual and is_windows(platform):
        separator = "\\"
    if not path.endswith(separator):
        path += separator
    return path


def remove_trailing_slash(path: str) -> str:
    """Strip all trailing ``/`` and ``\\`` characters, keeping a bare root."""
    if path in ("", "/", "\\"):
        return path
    return path.rstrip("/\\")
