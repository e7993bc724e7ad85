from __future__ import annotations

from pathlib import Path

import pytest

import main as cli
from main import main
from setcover.io_catalog import read_catalog


def test_solve_prints_result(catalog_file: Path, capsys: pytest.CaptureFixture[str]):
    main(["solve", "-s", str(catalog_file), "-p", "1", "-p", "2", "-p", "3", "-p", "4", "-p", "5"])

    out = capsys.readouterr().out
    assert "Best solutions: {1, 2, 3}" in out
    assert "Unsolved problems: {}" in out


def test_solve_with_csv_problems(catalog_file: Path, capsys: pytest.CaptureFixture[str]):
    main(["solve", "--solutions", str(catalog_file), "--problem", "4", "--problems-csv", "5,40"])

    out = capsys.readouterr().out
    assert "Best solutions: {2, 3}" in out
    assert "Unsolved problems: {40}" in out


def test_solve_without_problems(catalog_file: Path, capsys: pytest.CaptureFixture[str]):
    main(["solve", "-s", str(catalog_file)])

    assert "Best solutions: {}" in capsys.readouterr().out


def test_solve_writes_report(catalog_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    out_root = tmp_path / "runs"

    main(["solve", "-s", str(catalog_file), "-p", "1", "-p", "4", "--output-root", str(out_root)])

    run_dirs = list(out_root.iterdir())
    assert len(run_dirs) == 1
    assert (run_dirs[0] / "trace.csv").exists()
    assert (run_dirs[0] / "summary.csv").exists()
    assert str(run_dirs[0]) in capsys.readouterr().out


def test_missing_catalog_is_usage_error(tmp_path: Path):
    with pytest.raises(SystemExit) as exc_info:
        main(["solve", "-s", str(tmp_path / "missing.json"), "-p", "1"])

    assert exc_info.value.code == 2


def test_negative_problem_is_usage_error(catalog_file: Path):
    with pytest.raises(SystemExit) as exc_info:
        main(["solve", "-s", str(catalog_file), "-p", "-1"])

    assert exc_info.value.code == 2


def test_unknown_algorithm_is_usage_error(catalog_file: Path):
    with pytest.raises(SystemExit) as exc_info:
        main(["solve", "-s", str(catalog_file), "-p", "1", "--algorithm", "ilp"])

    assert exc_info.value.code == 2


def test_gen_then_solve(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    target = tmp_path / "catalog.json"

    main(["gen", "--output", str(target), "--n-solutions", "8", "--n-problems", "16", "--seed", "3"])
    assert read_catalog(target).all_problems == set(range(16))

    main(["solve", "-s", str(target), "--problems-csv", ",".join(str(i) for i in range(16))])
    out = capsys.readouterr().out
    assert "Unsolved problems: {}" in out


def test_solve_without_default_config(
    catalog_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
):
    monkeypatch.setattr(cli, "CONFIG_DIR", tmp_path / "no-configs")

    main(["solve", "-s", str(catalog_file), "-p", "1", "-p", "4"])

    out = capsys.readouterr().out
    assert "Best solutions: {1, 2}" in out
    assert "Unsolved problems: {}" in out


def test_gen_without_default_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(cli, "CONFIG_DIR", tmp_path / "no-configs")
    target = tmp_path / "catalog.json"

    main(["gen", "--output", str(target), "--n-solutions", "4", "--n-problems", "6"])

    assert read_catalog(target).all_problems == set(range(6))


def test_explicit_missing_config_is_usage_error(catalog_file: Path, tmp_path: Path):
    with pytest.raises(SystemExit) as exc_info:
        main(["solve", "-s", str(catalog_file), "-p", "1", "--config", str(tmp_path / "missing.yaml")])

    assert exc_info.value.code == 2
