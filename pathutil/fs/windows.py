"""
Windows Path Handling
=====================
Helpers for paths produced by Windows hosts, the Windows registry, the
Service Control Manager, and Docker Desktop.

Functions taking a ``platform`` argument are no-ops unless that platform
is Windows; the rest are pure string rewrites that apply everywhere, since
Windows-shaped data is routinely scanned from Linux hosts.
"""
import logging
import os
import re
from collections.abc import Mapping
from typing import Optional

from pathutil.core.constants import REGISTRY_ROOT_ABBREVIATIONS, WINDOWS_ENV_DEFAULTS
from pathutil.core.platform import is_windows
from pathutil.fs.normalize import to_virtual_path

logger = logging.getLogger(__name__)

# Single-pass alternation in declared order; replacement text is never re-scanned.
_DEFAULT_PLACEHOLDERS = re.compile(
    "|".join(re.escape(placeholder) for placeholder, _ in WINDOWS_ENV_DEFAULTS)
)
_DEFAULT_EXPANSIONS: dict[str, str] = dict(WINDOWS_ENV_DEFAULTS)

_ENV_PLACEHOLDER = re.compile(r"%([^%\s\\/]+)%")


# ---------------------------------------------------------------------------
# 1. Drive letters and container mapping
# ---------------------------------------------------------------------------
def strip_drive_letter(path: str, *, platform: Optional[str] = None) -> str:
    """
    Remove a leading drive letter (``C:``) and one separator after it.

    Only applies on Windows; other platforms return the path unchanged.
    """
    if not is_windows(platform):
        return path
    if len(path) >= 2 and path[1] == ":":
        path = path[2:]
        if path and path[0] in ("\\", "/"):
            path = path[1:]
    return path


def map_container_path(host_path: str) -> str:
    """
    Map a Windows host path to the form Docker Desktop uses under WSL2.

    ``C:\\Users\\test`` becomes ``/c/Users/test``; paths without a drive
    letter are only converted to forward slashes.
    """
    if not host_path:
        return host_path
    path = to_virtual_path(host_path)
    if len(path) >= 2 and path[1] == ":":
        path = "/" + path[0].lower() + path[2:]
    return path


def map_docker_volume(
    host_path: str,
    container_path: str,
    *,
    platform: Optional[str] = None,
) -> str:
    """
    Resolve the host side of a Docker volume mount.

    Parameters
    ----------
    host_path : str
        Host directory of the mount. When empty, ``container_path`` is
        returned as is.
    container_path : str
        Mount point inside the container.
    platform : str | None
        Host platform. Only Windows hosts are rewritten.

    Returns
    -------
    str
        On Windows, the WSL2 form of a ``C:`` drive path (``/c/...``);
        otherwise ``host_path`` unchanged.
    """
    if not host_path:
        return container_path
    if is_windows(platform):
        docker_path = map_container_path(host_path)
        # Docker Desktop exposes C: as /c/ inside the WSL2 VM
        if docker_path.startswith("/c/"):
            return docker_path
        logger.debug("No WSL2 mapping for volume host path %s", host_path)
    return host_path


# ---------------------------------------------------------------------------
# 2. Registry and services
# ---------------------------------------------------------------------------
def normalize_registry_path(reg_path: str) -> str:
    """
    Normalise a registry key path.

    Forward slashes become backslashes and a leading root abbreviation
    (``HKLM``, ``HKCU``, ``HKCR``, ``HKU``, ``HKCC``) is expanded to its full
    hive name. At most one abbreviation is expanded.
    """
    if not reg_path:
        return reg_path
    reg_path = reg_path.replace("/", "\\")
    for abbrev, full in REGISTRY_ROOT_ABBREVIATIONS:
        if reg_path.startswith(abbrev):
            return full + reg_path[len(abbrev):]
    return reg_path


def resolve_windows_service_path(service_path: str) -> str:
    """
    Extract the executable from a service ``ImagePath`` command line.

    Quoted executables are returned without quotes or arguments. Unquoted
    command lines are split on whitespace and the first token returned.
    """
    if not service_path:
        return service_path
    if service_path.startswith('"'):
        end_quote = service_path.find('"', 1)
        if end_quote != -1:
            return service_path[1:end_quote]
    parts = service_path.split()
    if parts:
        return parts[0]
    return service_path


# ---------------------------------------------------------------------------
# 3. Environment placeholders
# ---------------------------------------------------------------------------
def expand_windows_path(path: str, *, platform: Optional[str] = None) -> str:
    """
    Expand well-known ``%VAR%`` placeholders to stock Windows locations.

    This is a fixed table of defaults (``%SystemRoot%`` → ``C:\\Windows``
    and so on), not a lookup in the live environment. Use
    :func:`expand_environment_path` for that.
    """
    if not is_windows(platform):
        return path
    return _DEFAULT_PLACEHOLDERS.sub(lambda m: _DEFAULT_EXPANSIONS[m.group(0)], path)


def expand_environment_path(path: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Expand ``%VAR%`` placeholders from an environment mapping.

    Variable names match case-insensitively, as on Windows. Placeholders
    with no matching variable are left in place.

    Parameters
    ----------
    path : str
        Path containing placeholders, e.g. ``%APPDATA%\\Vendor\\app.ini``.
    environ : Mapping[str, str] | None
        Variables to expand from. Defaults to ``os.environ``.
    """
    if not path:
        return path
    if environ is None:
        environ = os.environ
    lookup = {key.upper(): value for key, value in environ.items()}

    def _replace(match: re.Match) -> str:
        value = lookup.get(match.group(1).upper())
        if value is None:
            return match.group(0)
        return value

    return _ENV_PLACEHOLDER.sub(_replace, path)
