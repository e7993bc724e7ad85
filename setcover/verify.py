from __future__ import annotations

from typing import Iterable, Mapping

from setcover.types import SolveStatus, SolverInput, SolverOutput


def verify_cover(
    catalog: SolverInput | Mapping[int, Iterable[int]],
    problems: Iterable[int],
    output: SolverOutput,
) -> tuple[bool, list[str]]:
    """校验求解结果与输入是否一致，返回 (是否通过, 违规说明列表)。"""

    solver_input = SolverInput.coerce(catalog)
    targets = set(problems)
    violations: list[str] = []

    unknown = set(output.best_solutions) - set(solver_input.problems_by_solution)
    if unknown:
        violations.append(f"选中了目录中不存在的 solution: {sorted(unknown)}")

    extra = set(output.unsolved_problems) - targets
    if extra:
        violations.append(f"未解决问题不在目标集合内: {sorted(extra)}")

    covered: set[int] = set()
    for solution in output.best_solutions:
        covered.update(solver_input.problems_by_solution.get(solution, ()))
    if covered & targets != targets - set(output.unsolved_problems):
        violations.append("已选 solution 覆盖的目标与 targets - unsolved 不一致")

    still_coverable = solver_input.all_problems & set(output.unsolved_problems)
    if still_coverable:
        violations.append(f"仍有目录条目可以覆盖未解决问题: {sorted(still_coverable)}")

    if output.newly_covered_trace and min(output.newly_covered_trace) <= 0:
        violations.append("存在边际覆盖为 0 的选择")

    expected_status = SolveStatus.SOLVED if output.is_complete else SolveStatus.EXHAUSTED
    if output.status != expected_status:
        violations.append(f"状态不一致: {output.status.value} (期望 {expected_status.value})")

    return not violations, violations
