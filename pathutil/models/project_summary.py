"""
Project Summary Model
=====================
Pydantic model aggregating the repository structure heuristics.

Fields:
    project_types        — distinct ecosystems detected (e.g. "nodejs", "python")
    is_monorepo          — True if indicators or multiple package.json files exist
    monorepo_indicators  — indicator filenames found (e.g. "lerna.json")
    package_json_count   — number of package.json files in the list

Used by:
    - project_detector.analyze_project as its return type
    - Inventory records that serialise the summary with model_dump()
"""
from pydantic import BaseModel
from typing import List


class ProjectSummary(BaseModel):
    project_types: List[str] = []
    is_monorepo: bool = False
    monorepo_indicators: List[str] = []
    package_json_count: int = 0
