from __future__ import annotations

import pytest

from setcover.solver import ALGORITHMS, Solver, load_solver
from setcover.types import SolverInput


def test_load_solver_returns_greedy():
    from setcover.alg_greedy import solve

    assert load_solver("greedy") is solve
    assert "greedy" in ALGORITHMS


def test_load_solver_unknown_algorithm():
    with pytest.raises(ValueError):
        load_solver("ilp")


def test_greedy_facade(multi_pick_catalog: SolverInput):
    result = Solver.greedy(multi_pick_catalog).solve({1, 2, 3, 4, 5})

    assert result.best_solutions == {1, 2, 3}
    assert result.unsolved_problems == set()


def test_facade_accepts_plain_mapping():
    solver = Solver({1: [1, 2, 3]})

    assert isinstance(solver.solver_input, SolverInput)
    assert solver.solve({1, 2, 3}).best_solutions == {1}


def test_facade_forwards_params():
    solver = Solver.greedy({1: {1}, 2: {1}}, tie_break="random", seed=11)

    result = solver.solve({1})

    assert result.meta["tie_break"] == "random"
    assert result.meta["seed"] == 11
    assert result.best_solutions <= {1, 2}


def test_same_solver_reused_for_different_targets(multi_pick_catalog: SolverInput):
    solver = Solver.greedy(multi_pick_catalog)

    assert solver.solve({4}).best_solutions == {2}
    assert solver.solve({5, 6}).unsolved_problems == {6}


def test_unknown_param_rejected():
    with pytest.raises(ValueError, match="tiebreak"):
        Solver.greedy({1: {1}}, tiebreak="random")


def test_solve_signature_has_no_catch_all():
    from setcover.alg_greedy import solve

    with pytest.raises(TypeError):
        solve({1: {1}}, {1}, tiebreak="random")
