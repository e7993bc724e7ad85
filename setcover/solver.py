from __future__ import annotations

import importlib
import inspect
from typing import Any, Callable, Iterable, Mapping

from setcover.types import SolverInput, SolverOutput

ALGORITHMS: dict[str, str] = {
    "greedy": "setcover.alg_greedy",
}


def load_solver(algorithm_id: str) -> Callable[..., SolverOutput]:
    module_name = ALGORITHMS.get(algorithm_id)
    if module_name is None:
        raise ValueError(f"未知算法: {algorithm_id}，可选: {', '.join(sorted(ALGORITHMS))}")
    module = importlib.import_module(module_name)
    if not hasattr(module, "solve"):
        raise AttributeError(f"算法模块缺少 solve(): {module_name}")
    return module.solve


class Solver:
    """绑定一个目录和一个算法，之后可以对不同的目标问题集合反复求解。"""

    def __init__(
        self,
        solver_input: SolverInput | Mapping[int, Iterable[int]],
        algorithm: str = "greedy",
        **params: Any,
    ) -> None:
        self.solver_input = SolverInput.coerce(solver_input)
        self.algorithm = algorithm
        self.params = dict(params)
        self._solve = load_solver(algorithm)
        try:
            inspect.signature(self._solve).bind(self.solver_input, (), **self.params)
        except TypeError as exc:
            raise ValueError(f"算法 {algorithm} 不接受参数 {sorted(self.params)}: {exc}") from exc

    @classmethod
    def greedy(cls, solver_input: SolverInput | Mapping[int, Iterable[int]], **params: Any) -> Solver:
        return cls(solver_input, algorithm="greedy", **params)

    def solve(self, problems: Iterable[int]) -> SolverOutput:
        return self._solve(self.solver_input, problems, **self.params)
