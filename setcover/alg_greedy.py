from __future__ import annotations

import random
import time
from typing import Iterable, Mapping

from setcover.types import SolveStatus, SolverInput, SolverOutput

TIE_BREAKS = ("min_id", "random")


def solve(
    catalog: SolverInput | Mapping[int, Iterable[int]],
    problems: Iterable[int],
    tie_break: str = "min_id",
    seed: int = 0,
    epsilon: float = 1e-12,
) -> SolverOutput:
    """Greedy maximum coverage: pick the solution with the most new problems (per unit cost) each step.

    Candidates are scanned in ascending solution id. With ``tie_break="min_id"``
    the lowest id wins a tie; with ``"random"`` a tied candidate is drawn from
    ``random.Random(seed)``.
    """

    if tie_break not in TIE_BREAKS:
        raise ValueError(f"不支持的 tie_break: {tie_break}，可选: {', '.join(TIE_BREAKS)}")

    start = time.perf_counter()
    rng = random.Random(seed)
    solver_input = SolverInput.coerce(catalog)
    weighted = solver_input.is_weighted
    entries = sorted(solver_input.problems_by_solution.items())

    universe = set(problems)
    selected: list[int] = []
    newly_covered_trace: list[int] = []
    status = SolveStatus.SOLVED

    while universe:
        best_score = float("-inf")
        candidates: list[tuple[int, set[int]]] = []

        for solution, covered in entries:
            intersection = universe.intersection(covered)
            if not intersection:
                continue

            if weighted:
                cost = solver_input.cost_of(solution)
                score = float("inf") if cost <= 0 else len(intersection) / cost
            else:
                score = float(len(intersection))

            if score > best_score + epsilon:
                best_score = score
                candidates = [(solution, intersection)]
            elif score == best_score or abs(score - best_score) <= epsilon:
                candidates.append((solution, intersection))

        if not candidates:
            status = SolveStatus.EXHAUSTED
            break

        if tie_break == "random" and len(candidates) > 1:
            chosen, intersection = rng.choice(candidates)
        else:
            chosen, intersection = candidates[0]

        selected.append(chosen)
        newly_covered_trace.append(len(intersection))
        universe.difference_update(intersection)

    runtime_sec = time.perf_counter() - start

    return SolverOutput(
        best_solutions=frozenset(selected),
        unsolved_problems=frozenset(universe),
        status=status,
        selection_order=tuple(selected),
        newly_covered_trace=tuple(newly_covered_trace),
        runtime_sec=float(runtime_sec),
        total_cost=float(sum(solver_input.cost_of(s) for s in selected)),
        meta={
            "algorithm": "greedy",
            "tie_break": tie_break,
            "seed": int(seed),
            "weighted": bool(weighted),
            "iterations": len(selected),
            "uncovered_count": len(universe),
        },
    )
