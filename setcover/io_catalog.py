from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Iterable

from setcover.types import SolverInput

CATALOG_KEY = "problems_by_solution"
COSTS_KEY = "costs"


def _parse_id(raw: Any, what: str, source: str) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"{what} 必须是非负整数，实际={raw!r}: {source}")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and raw.strip().isdigit():
        value = int(raw.strip())
    else:
        raise ValueError(f"{what} 必须是非负整数，实际={raw!r}: {source}")
    if value < 0:
        raise ValueError(f"{what} 不能为负数，实际={value}: {source}")
    return value


def parse_problem_ids(values: Iterable[Any], source: str = "problem") -> set[int]:
    return {_parse_id(v, "problem_id", source) for v in values}


def parse_catalog(data: Any, source: str = "<memory>") -> SolverInput:
    if not isinstance(data, dict):
        raise ValueError(f"目录文件顶层必须是 JSON 对象: {source}")
    if CATALOG_KEY not in data:
        raise ValueError(f"目录文件缺少 '{CATALOG_KEY}' 字段: {source}")

    raw_catalog = data[CATALOG_KEY]
    if not isinstance(raw_catalog, dict):
        raise ValueError(f"'{CATALOG_KEY}' 必须是对象 (solution_id -> [problem_id...]): {source}")

    catalog: dict[int, set[int]] = {}
    for raw_key, raw_problems in raw_catalog.items():
        solution = _parse_id(raw_key, "solution_id", source)
        if solution in catalog:
            raise ValueError(f"solution_id 重复: {solution}: {source}")
        if not isinstance(raw_problems, list):
            raise ValueError(f"solution={solution} 的问题列表必须是数组: {source}")
        catalog[solution] = parse_problem_ids(raw_problems, source=f"{source} solution={solution}")

    raw_costs = data.get(COSTS_KEY) or {}
    if not isinstance(raw_costs, dict):
        raise ValueError(f"'{COSTS_KEY}' 必须是对象 (solution_id -> cost): {source}")

    costs: dict[int, float] = {}
    for raw_key, raw_cost in raw_costs.items():
        solution = _parse_id(raw_key, "solution_id", source)
        if solution not in catalog:
            raise ValueError(f"cost 指向不存在的 solution={solution}: {source}")
        if isinstance(raw_cost, bool) or not isinstance(raw_cost, (int, float)):
            raise ValueError(f"solution={solution} 的 cost 必须是数值，实际={raw_cost!r}: {source}")
        if not math.isfinite(raw_cost) or raw_cost <= 0:
            raise ValueError(f"solution={solution} 的 cost 必须是有限正数，实际={raw_cost}: {source}")
        costs[solution] = float(raw_cost)

    return SolverInput(problems_by_solution=catalog, costs=costs)


def read_catalog(path: str | Path) -> SolverInput:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"目录文件不存在: {p}")
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"目录文件不是合法 JSON ({exc.msg}, line {exc.lineno}): {p}") from exc
    return parse_catalog(data, source=str(p))


def catalog_to_dict(catalog: SolverInput) -> dict[str, Any]:
    data: dict[str, Any] = {
        CATALOG_KEY: {
            str(solution): sorted(problems)
            for solution, problems in sorted(catalog.problems_by_solution.items())
        }
    }
    if catalog.costs:
        data[COSTS_KEY] = {str(solution): cost for solution, cost in sorted(catalog.costs.items())}
    return data


def write_catalog_file(path: str | Path, catalog: SolverInput) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(catalog_to_dict(catalog), ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    return p
