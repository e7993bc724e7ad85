from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from setcover.types import SolverInput, SolverOutput
from setcover.utils import ensure_dir

TRACE_COLUMNS = ["step", "solution_id", "newly_covered", "cumulative_covered", "cost"]


def _format_ids(ids: Iterable[int]) -> str:
    return "{" + ", ".join(str(x) for x in sorted(ids)) + "}"


def format_result(output: SolverOutput) -> str:
    return "\n".join(
        [
            f"Best solutions: {_format_ids(output.best_solutions)}",
            f"Unsolved problems: {_format_ids(output.unsolved_problems)}",
        ]
    )


def trace_frame(output: SolverOutput, catalog: SolverInput) -> pd.DataFrame:
    rows: list[dict[str, Any]] = []
    cumulative = 0
    for step, (solution, newly) in enumerate(zip(output.selection_order, output.newly_covered_trace, strict=True)):
        cumulative += newly
        rows.append(
            {
                "step": step,
                "solution_id": int(solution),
                "newly_covered": int(newly),
                "cumulative_covered": int(cumulative),
                "cost": catalog.cost_of(solution),
            }
        )
    return pd.DataFrame(rows, columns=TRACE_COLUMNS)


def summary_row(output: SolverOutput) -> dict[str, Any]:
    return {
        "status": output.status.value,
        "selected_count": len(output.best_solutions),
        "unsolved_count": len(output.unsolved_problems),
        "total_cost": float(output.total_cost),
        "runtime_sec": float(output.runtime_sec),
        "tie_break": output.meta.get("tie_break"),
        "weighted": output.meta.get("weighted"),
        "best_solutions": " ".join(str(x) for x in sorted(output.best_solutions)),
        "unsolved_problems": " ".join(str(x) for x in sorted(output.unsolved_problems)),
    }


def write_report(output: SolverOutput, catalog: SolverInput, out_dir: str | Path) -> Path:
    report_dir = ensure_dir(out_dir)
    trace_frame(output, catalog).to_csv(report_dir / "trace.csv", index=False)
    pd.DataFrame([summary_row(output)]).to_csv(report_dir / "summary.csv", index=False)
    return report_dir
