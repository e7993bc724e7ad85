from __future__ import annotations

import json
from pathlib import Path

import pytest

from setcover.types import SolverInput


@pytest.fixture
def multi_pick_catalog() -> SolverInput:
    return SolverInput({1: {1, 2, 3}, 2: {2, 4}, 3: {3, 5}})


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "solutions.json"
    path.write_text(
        json.dumps({"problems_by_solution": {"1": [1, 2, 3], "2": [2, 4], "3": [3, 5]}}),
        encoding="utf-8",
    )
    return path
