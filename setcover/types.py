from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping


class SolveStatus(str, Enum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


def _freeze_catalog(raw: Mapping[int, Iterable[int]]) -> Mapping[int, frozenset[int]]:
    return MappingProxyType({int(k): frozenset(int(x) for x in v) for k, v in raw.items()})


@dataclass(frozen=True)
class SolverInput:
    """只读的候选解目录: solution_id -> 可覆盖的 problem_id 集合。"""

    problems_by_solution: Mapping[int, frozenset[int]] = field(default_factory=dict)
    costs: Mapping[int, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "problems_by_solution", _freeze_catalog(self.problems_by_solution))
        object.__setattr__(self, "costs", MappingProxyType({int(k): float(v) for k, v in self.costs.items()}))

    @classmethod
    def coerce(cls, catalog: SolverInput | Mapping[int, Iterable[int]]) -> SolverInput:
        if isinstance(catalog, SolverInput):
            return catalog
        return cls(problems_by_solution=catalog)

    def add_solution(self, solution: int, problems: Iterable[int], cost: float | None = None) -> SolverInput:
        catalog = dict(self.problems_by_solution)
        catalog[int(solution)] = frozenset(problems)
        costs = dict(self.costs)
        if cost is not None:
            costs[int(solution)] = float(cost)
        else:
            costs.pop(int(solution), None)
        return SolverInput(problems_by_solution=catalog, costs=costs)

    def cost_of(self, solution: int) -> float:
        return float(self.costs.get(solution, 1.0))

    @property
    def is_weighted(self) -> bool:
        return any(c != 1.0 for c in self.costs.values())

    @property
    def n_solutions(self) -> int:
        return len(self.problems_by_solution)

    @property
    def all_problems(self) -> frozenset[int]:
        covered: set[int] = set()
        for problems in self.problems_by_solution.values():
            covered.update(problems)
        return frozenset(covered)


@dataclass(frozen=True)
class SolverOutput:
    best_solutions: frozenset[int]
    unsolved_problems: frozenset[int]
    status: SolveStatus
    selection_order: tuple[int, ...] = ()
    newly_covered_trace: tuple[int, ...] = ()
    runtime_sec: float = 0.0
    total_cost: float = 0.0
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        return not self.unsolved_problems
