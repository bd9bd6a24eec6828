"""
Project Detector
================
Detects project ecosystems and monorepo layouts from a list of file paths.

Detection is deterministic: the same file list always yields the same
result. Only base filenames are inspected; nothing is read from disk.
Paths may use either separator style.
"""
import logging
import posixpath
from collections.abc import Iterable

from pathutil.core.constants import MONOREPO_INDICATORS, PROJECT_MARKERS
from pathutil.fs.normalize import remove_trailing_slash, to_virtual_path
from pathutil.models.project_summary import ProjectSummary

logger = logging.getLogger(__name__)

_MARKER_MAP: dict[str, str] = dict(PROJECT_MARKERS)


def _base_name(file_path: str) -> str:
    return posixpath.basename(remove_trailing_slash(to_virtual_path(file_path)))


def detect_project_type(files: Iterable[str]) -> list[str]:
    """
    Return the distinct project types signalled by marker files.

    Parameters
    ----------
    files : Iterable[str]
        File paths, e.g. ``["package.json", "backend/go.mod"]``.

    Returns
    -------
    list[str]
        Project types (e.g. ``"nodejs"``, ``"golang"``) in the order their
        first marker appears, each at most once. Empty when nothing matches.
    """
    found: dict[str, None] = {}
    for file_path in files:
        project_type = _MARKER_MAP.get(_base_name(file_path))
        if project_type is not None:
            found.setdefault(project_type, None)
    return list(found)


def find_monorepo_indicators(files: Iterable[str]) -> list[str]:
    """Return the monorepo indicator filenames present, in declaration order."""
    names = {_base_name(f) for f in files}
    return [indicator for indicator in MONOREPO_INDICATORS if indicator in names]


def is_monorepo(files: Iterable[str]) -> bool:
    """
    Check whether a file list looks like a monorepo.

    True when any workspace indicator (``lerna.json``, ``nx.json``,
    ``pnpm-workspace.yaml`` ...) is present, or when more than one
    ``package.json`` exists.
    """
    package_json_count = 0
    for file_path in files:
        base = _base_name(file_path)
        if base in MONOREPO_INDICATORS:
            return True
        if base == "package.json":
            package_json_count += 1
    return package_json_count > 1


def analyze_project(files: Iterable[str]) -> ProjectSummary:
    """
    Run every structure heuristic over one file list.

    The iterable is consumed once, so generators are accepted.
    """
    file_list = list(files)
    indicators = find_monorepo_indicators(file_list)
    package_json_count = sum(1 for f in file_list if _base_name(f) == "package.json")

    summary = ProjectSummary(
        project_types=detect_project_type(file_list),
        is_monorepo=bool(indicators) or package_json_count > 1,
        monorepo_indicators=indicators,
        package_json_count=package_json_count,
    )
    logger.debug(
        "Analyzed %d files: types=%s monorepo=%s",
        len(file_list), summary.project_types, summary.is_monorepo,
    )
    return summary
