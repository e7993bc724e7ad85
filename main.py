from __future__ import annotations

import argparse
from pathlib import Path

from setcover.utils import parse_csv_list

CONFIG_DIR = Path(__file__).resolve().parent / "configs"


def resolve_config(explicit: str | None, default_name: str) -> Path | None:
    if explicit is not None:
        return Path(explicit)
    default = CONFIG_DIR / default_name
    return default if default.exists() else None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Set Cover 贪心求解工具")
    sub = parser.add_subparsers(dest="command", required=True)

    p_solve = sub.add_parser("solve", help="对目标问题集合运行贪心覆盖")
    p_solve.add_argument("-s", "--solutions", required=True, help="目录 JSON 文件")
    p_solve.add_argument("-p", "--problem", dest="problems", action="append", type=int, default=[],
                         help="待覆盖的 problem_id，可重复")
    p_solve.add_argument("--problems-csv", default=None, help="逗号分隔，如 1,2,3")
    p_solve.add_argument("--config", default=None, help="默认 configs/solve.yaml，不存在时使用内置默认值")
    p_solve.add_argument("--algorithm", default=None)
    p_solve.add_argument("--tie-break", choices=["min_id", "random"], default=None)
    p_solve.add_argument("--seed", type=int, default=None)
    p_solve.add_argument("--output-root", default=None, help="写出 trace.csv / summary.csv 的根目录")
    p_solve.add_argument("--verify", dest="verify", action="store_true")
    p_solve.add_argument("--no-verify", dest="verify", action="store_false")
    p_solve.set_defaults(verify=None)

    p_gen = sub.add_parser("gen", help="生成随机目录文件")
    p_gen.add_argument("--config", default=None, help="默认 configs/generate.yaml，不存在时使用内置默认值")
    p_gen.add_argument("--output", default=None)
    p_gen.add_argument("--n-solutions", type=int, default=None)
    p_gen.add_argument("--n-problems", type=int, default=None)
    p_gen.add_argument("--density", type=float, default=None)
    p_gen.add_argument("--cost-mode", choices=["unit", "uniform", "skewed"], default=None)
    p_gen.add_argument("--seed", type=int, default=None)

    return parser


def cmd_solve(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    from setcover.config import load_config, section
    from setcover.io_catalog import parse_problem_ids, read_catalog
    from setcover.report import format_result, write_report
    from setcover.solver import Solver
    from setcover.utils import timestamp_id
    from setcover.verify import verify_cover

    overrides: dict[str, object] = {}
    if args.algorithm is not None:
        overrides["solver.algorithm"] = args.algorithm
    if args.tie_break is not None:
        overrides["solver.tie_break"] = args.tie_break
    if args.seed is not None:
        overrides["solver.seed"] = args.seed
    if args.output_root is not None:
        overrides["output.root"] = args.output_root
    if args.verify is not None:
        overrides["output.verify"] = bool(args.verify)

    cfg = load_config(resolve_config(args.config, "solve.yaml"), overrides)
    solver_cfg = section(cfg, "solver")
    output_cfg = section(cfg, "output")

    catalog = read_catalog(args.solutions)
    raw_problems = list(args.problems)
    if args.problems_csv is not None:
        raw_problems.extend(parse_csv_list(args.problems_csv))
    problems = parse_problem_ids(raw_problems)

    solver = Solver(
        catalog,
        algorithm=str(solver_cfg.get("algorithm", "greedy")),
        tie_break=str(solver_cfg.get("tie_break", "min_id")),
        seed=int(solver_cfg.get("seed", 0)),
    )
    output = solver.solve(problems)
    print(format_result(output))

    output_root = output_cfg.get("root")
    if output_root:
        run_id = timestamp_id(str(output_cfg.get("run_id_prefix", "solve")))
        report_dir = write_report(output, catalog, Path(output_root) / run_id)
        print(f"报告已写入: {report_dir}")

    if bool(output_cfg.get("verify", True)):
        ok, violations = verify_cover(catalog, problems, output)
        if not ok:
            parser.exit(1, "结果校验失败:\n" + "\n".join(violations) + "\n")


def cmd_gen(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    from setcover.generator import generate_catalog_file

    overrides: dict[str, object] = {}
    if args.output is not None:
        overrides["output.path"] = args.output
    if args.n_solutions is not None:
        overrides["generator.n_solutions"] = args.n_solutions
    if args.n_problems is not None:
        overrides["generator.n_problems"] = args.n_problems
    if args.density is not None:
        overrides["generator.density"] = args.density
    if args.cost_mode is not None:
        overrides["generator.cost_mode"] = args.cost_mode
    if args.seed is not None:
        overrides["generator.seed"] = args.seed

    path = generate_catalog_file(config_path=resolve_config(args.config, "generate.yaml"), overrides=overrides)
    print(f"目录生成完成: {path}")


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {"solve": cmd_solve, "gen": cmd_gen}
    command = commands.get(args.command)
    if command is None:
        parser.error(f"Unknown command: {args.command}")

    try:
        command(args, parser)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
