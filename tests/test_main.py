import pytest

import main
from performance_profiling.matrix_multiplication.golden_file import save_golden_matrix, load_golden_matrix


@pytest.fixture(autouse=True)
def in_tmp_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_benchmark_then_check(tmp_path, capsys):
    assert main.main(["--mode", "serial", "--size", "8", "--runs", "2", "--no_stats"]) == 0
    assert (tmp_path / "log.bin").stat().st_size == 8 * 8 * 8

    assert main.main(["-c", "--size", "8"]) == 0
    assert "No mismatches found" in capsys.readouterr().out


def test_check_with_parallel_golden_file(tmp_path):
    assert main.main(["-m", "parallel", "--size", "8", "--runs", "1", "--no_stats"]) == 0
    assert main.main(["--check", "--size", "8", "--mode", "serial"]) == 0


def test_benchmark_writes_stats(tmp_path):
    assert main.main(["--size", "4", "--runs", "1"]) == 0
    assert (tmp_path / "results" / "matrix_multiplication" / "4" / "cpu_parallel_stats.txt").exists()


def test_check_without_golden_file_fails(capsys):
    assert main.main(["--check", "--size", "4"]) == 1
    assert capsys.readouterr().out.strip().endswith("No such file or directory: 'log.bin'")


def test_check_with_wrong_size_fails(capsys):
    assert main.main(["--size", "4", "--runs", "1", "--no_stats"]) == 0
    assert main.main(["--check", "--size", "5"]) == 1
    assert "Short read" in capsys.readouterr().out


def test_check_reports_mismatch(tmp_path, capsys):
    assert main.main(["--size", "6", "--runs", "1", "--no_stats", "--golden_file", "golden.bin"]) == 0
    D = load_golden_matrix("golden.bin", 6)
    D[3, 2] = -1.0
    save_golden_matrix("golden.bin", D)

    assert main.main(["--check", "--size", "6", "--golden_file", "golden.bin"]) == 1
    assert "Error: Mismatch at (3, 2)" in capsys.readouterr().out


def test_unknown_mode_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--mode", "gpu"])
    assert excinfo.value.code == 2


def test_zero_runs_is_rejected():
    with pytest.raises(SystemExit):
        main.main(["--runs", "0"])


def test_golden_file_survives_failed_stats_write(tmp_path, capsys):
    (tmp_path / "results").write_text("not a directory")

    assert main.main(["--size", "4", "--runs", "1"]) == 1
    assert "Error:" in capsys.readouterr().out
    assert (tmp_path / "log.bin").stat().st_size == 4 * 4 * 8
    assert main.main(["--check", "--size", "4"]) == 0
