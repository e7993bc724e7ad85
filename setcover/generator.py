from __future__ import annotations

import random
from pathlib import Path
from typing import Any

from setcover.config import load_config, section
from setcover.io_catalog import write_catalog_file
from setcover.types import SolverInput

COST_MODES = ("unit", "uniform", "skewed")


def _build_costs(
    set_items: list[set[int]],
    n_problems: int,
    cost_mode: str,
    cost_range: tuple[float, float],
    rng: random.Random,
) -> list[float]:
    lo, hi = cost_range
    lo_i = max(1, int(round(lo)))
    hi_i = max(lo_i, int(round(hi)))
    costs: list[float] = []

    for items in set_items:
        if cost_mode == "unit":
            costs.append(1.0)
        elif cost_mode == "skewed":
            coverage_ratio = len(items) / max(1, n_problems)
            base = lo + (hi - lo) * (0.2 + coverage_ratio * 0.8)
            noise = 0.85 + 0.3 * rng.random()
            value = int(round(base * noise))
            costs.append(float(min(max(value, lo_i), hi_i)))
        else:
            costs.append(float(rng.randint(lo_i, hi_i)))

    return costs


def generate_catalog(
    n_solutions: int,
    n_problems: int,
    density: float,
    seed: int = 2026,
    cost_mode: str = "unit",
    cost_range: tuple[float, float] = (1.0, 10.0),
    ensure_feasible: bool = True,
) -> SolverInput:
    """随机目录: 每个 solution 以概率 density 覆盖每个 problem (problem_id 从 0 开始)。"""

    if n_solutions < 0 or n_problems < 0:
        raise ValueError(f"规模不能为负: n_solutions={n_solutions}, n_problems={n_problems}")
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density 必须在 [0, 1] 内，实际={density}")
    if cost_mode not in COST_MODES:
        raise ValueError(f"不支持的 cost_mode: {cost_mode}，可选: {', '.join(COST_MODES)}")
    if ensure_feasible and n_problems > 0 and n_solutions == 0:
        raise ValueError("ensure_feasible 要求至少一个 solution")

    rng = random.Random(seed)
    set_items: list[set[int]] = [set() for _ in range(n_solutions)]
    for items in set_items:
        for problem in range(n_problems):
            if rng.random() < density:
                items.add(problem)

    if ensure_feasible and n_solutions > 0:
        covered = set().union(*set_items)
        for problem in range(n_problems):
            if problem not in covered:
                set_items[rng.randrange(n_solutions)].add(problem)

    costs = _build_costs(set_items, n_problems, cost_mode, cost_range, rng)
    catalog = {solution: items for solution, items in enumerate(set_items)}
    cost_map = {} if cost_mode == "unit" else dict(enumerate(costs))
    return SolverInput(problems_by_solution=catalog, costs=cost_map)


def generate_catalog_file(
    config_path: str | Path | None,
    overrides: dict[str, Any] | None = None,
) -> Path:
    cfg = load_config(config_path, overrides)
    gen = section(cfg, "generator")

    cost_range = tuple(float(x) for x in gen.get("cost_range", [1.0, 10.0]))
    if len(cost_range) != 2:
        raise ValueError(f"cost_range 需要两个值，实际={list(cost_range)}")

    catalog = generate_catalog(
        n_solutions=int(gen.get("n_solutions", 20)),
        n_problems=int(gen.get("n_problems", 50)),
        density=float(gen.get("density", 0.1)),
        seed=int(gen.get("seed", 2026)),
        cost_mode=str(gen.get("cost_mode", "unit")),
        cost_range=(cost_range[0], cost_range[1]),
        ensure_feasible=bool(gen.get("ensure_feasible", True)),
    )
    output = Path(section(cfg, "output").get("path", "outputs/catalogs/catalog.json"))
    return write_catalog_file(output, catalog)
