"""
Unit Tests — Project Detector
==============================
Marker-file project type detection and monorepo heuristics over file
lists. Nothing touches the filesystem.
"""
import pytest

from pathutil.core.constants import MONOREPO_INDICATORS, PROJECT_MARKERS
from pathutil.models.project_summary import ProjectSummary
from pathutil.project.project_detector import (
    analyze_project,
    detect_project_type,
    find_monorepo_indicators,
    is_monorepo,
)


# ---------------------------------------------------------------------------
# 1. detect_project_type
# ---------------------------------------------------------------------------
class TestDetectProjectType:

    @pytest.mark.parametrize("files,expected", [
        (["package.json", "src/index.js"], ["nodejs"]),
        (["package.json", "pom.xml", "go.mod"], ["golang", "maven", "nodejs"]),
        (["build.gradle.kts", "settings.gradle.kts"], ["gradle"]),
        (["requirements.txt", "setup.py", "src/main.py"], ["python"]),
        (["Cargo.toml"], ["rust"]),
        (["composer.json", "Gemfile"], ["php", "ruby"]),
        (["README.md", "src/code.txt"], []),
        ([], []),
    ])
    def test_detect(self, files, expected):
        assert sorted(detect_project_type(files)) == expected

    def test_each_type_reported_once(self):
        result = detect_project_type(["a/package.json", "b/package.json", "c/package.json"])
        assert result == ["nodejs"]

    def test_first_seen_order(self):
        assert detect_project_type(["go.mod", "package.json"]) == ["golang", "nodejs"]

    def test_nested_paths_use_base_name(self):
        assert detect_project_type(["services/api/go.mod", "web\\package.json"]) == ["golang", "nodejs"]

    def test_marker_name_must_match_exactly(self):
        assert detect_project_type(["package.json.bak", "my-pom.xml"]) == []

    def test_accepts_generator(self):
        assert detect_project_type(f for f in ["pom.xml"]) == ["maven"]

    def test_every_marker_maps_to_a_type(self):
        for marker, project_type in PROJECT_MARKERS:
            assert detect_project_type([marker]) == [project_type]

    def test_deterministic(self):
        files = ["pyproject.toml", "package.json", "Cargo.toml"]
        assert detect_project_type(files) == detect_project_type(files)


# ---------------------------------------------------------------------------
# 2. is_monorepo
# ---------------------------------------------------------------------------
class TestIsMonorepo:

    @pytest.mark.parametrize("files,expected", [
        (["lerna.json", "packages/app1/package.json", "packages/app2/package.json"], True),
        (["nx.json", "workspace.json", "apps/app1/package.json"], True),
        (["package.json", "frontend/package.json"], True),
        (["package.json", "frontend/package.json", "backend/package.json"], True),
        (["package.json", "src/index.js", "README.md"], False),
        (["package.json"], False),
        (["README.md", "src/code.go"], False),
        ([], False),
    ])
    def test_is_monorepo(self, files, expected):
        assert is_monorepo(files) is expected

    @pytest.mark.parametrize("indicator", MONOREPO_INDICATORS)
    def test_every_indicator_alone(self, indicator):
        assert is_monorepo([f"repo/{indicator}"])

    def test_find_indicators_declared_order(self):
        files = [".gitmodules", "nx.json", "lerna.json", "nx.json"]
        assert find_monorepo_indicators(files) == ["lerna.json", "nx.json", ".gitmodules"]

    def test_find_indicators_none(self):
        assert find_monorepo_indicators(["package.json"]) == []


# ---------------------------------------------------------------------------
# 3. analyze_project
# ---------------------------------------------------------------------------
class TestAnalyzeProject:

    def test_summary_for_monorepo(self):
        files = ["pnpm-workspace.yaml", "apps/web/package.json", "apps/api/package.json", "tools/go.mod"]
        summary = analyze_project(files)
        assert isinstance(summary, ProjectSummary)
        assert summary.project_types == ["nodejs", "golang"]
        assert summary.is_monorepo is True
        assert summary.monorepo_indicators == ["pnpm-workspace.yaml"]
        assert summary.package_json_count == 2

    def test_summary_for_single_project(self):
        summary = analyze_project(iter(["pyproject.toml", "src/pkg/__init__.py"]))
        assert summary.project_types == ["python"]
        assert summary.is_monorepo is False
        assert summary.monorepo_indicators == []
        assert summary.package_json_count == 0

    def test_summary_agrees_with_is_monorepo(self):
        files = ["package.json", "frontend/package.json"]
        assert analyze_project(files).is_monorepo == is_monorepo(files)

    def test_summary_serialises(self):
        dumped = analyze_project(["Gemfile"]).model_dump()
        assert dumped == {
            "project_types": ["ruby"],
            "is_monorepo": False,
            "monorepo_indicators": [],
            "package_json_count": 0,
        }
