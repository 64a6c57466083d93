import os
import time
from typing import List, NamedTuple

import numpy as np

from algorithms.matrix_multiplication.strategies import get_multiply_function
from constants.params import DATA_TYPE, WARMUP_MATRIX_SIZE
from constants.string_constants import MATRIX_MULTIPLICATION_PATH, DATE_FORMAT
from performance_profiling.matrix_multiplication.golden_file import save_golden_matrix
from utils.utils import write_result_header


class BenchmarkResult(NamedTuple):
    run_times: List[float]
    average_time: float
    C: np.ndarray


def compute_gflops(matrix_dim, exec_time):
    if exec_time <= 0:
        return 0.0
    return (2.0 * matrix_dim ** 3) / (exec_time * 1e9)


def warm_up(multiply):
    """Triggers numba compilation on tiny inputs so it is not counted in the first timed run."""
    A = np.ones((WARMUP_MATRIX_SIZE, WARMUP_MATRIX_SIZE), dtype=DATA_TYPE)
    multiply(A, A)


def profile_multiply(multiply, A, B, C):
    start_time = time.perf_counter()
    multiply(A, B, C)
    return time.perf_counter() - start_time


def stats_file_path(results_dir, matrix_dim, mode):
    output_dir = os.path.join(results_dir, MATRIX_MULTIPLICATION_PATH, str(matrix_dim))
    os.makedirs(output_dir, exist_ok=True)
    return os.path.join(output_dir, f'cpu_{mode}_stats.txt')


def save_stats(file_path, matrix_dim, run_times, timestamps):
    data_size_mb_total = (2 * matrix_dim * matrix_dim * np.dtype(DATA_TYPE).itemsize) / (1024 ** 2)

    with open(file_path, 'w') as file:
        write_result_header(file)
        file.write("Run,Timestamp,Time(s),Data Size (MB),GFLOPS\n")
        for run_number, (exec_time, timestamp) in enumerate(zip(run_times, timestamps), start=1):
            gflops = compute_gflops(matrix_dim, exec_time)
            file.write(f"{run_number},{timestamp},{exec_time:.6f},{data_size_mb_total:.2f},{gflops:.2f}\n")


def run_matrix_multiplication_benchmark(A, B, config):
    """
    Times the selected multiplication kernel config.runs times and writes the
    final product to the golden file.

    A and B are not touched between runs; the same C buffer is overwritten by
    every run.

    Args:
        A: Left input matrix, (N, N) float64.
        B: Right input matrix, (N, N) float64.
        config: RunConfig with mode, runs, golden_file_path and results_dir.

    Returns:
        BenchmarkResult with the per-run times in seconds, their mean and C.
    """
    if config.runs < 1:
        raise ValueError(f"Number of runs must be at least 1, got {config.runs}")

    matrix_dim = A.shape[0]
    multiply = get_multiply_function(config.mode)

    print(f"Info: Profiling {config.mode} matrix multiplication for size {matrix_dim}x{matrix_dim}. "
          f"Running {config.runs} times...")
    warm_up(multiply)

    C = np.zeros((matrix_dim, matrix_dim), dtype=DATA_TYPE)
    run_times = []
    timestamps = []
    for run_number in range(1, config.runs + 1):
        exec_time = profile_multiply(multiply, A, B, C)
        run_times.append(exec_time)
        timestamps.append(time.strftime(DATE_FORMAT))
        print(f"  Run {run_number}/{config.runs}: {exec_time:.6f} s "
              f"({compute_gflops(matrix_dim, exec_time):.2f} GFLOPS)")

    average_time = sum(run_times) / len(run_times)
    print(f"Info: Average multiplication time over {config.runs} runs: {average_time:.6f} s")

    # Golden file is written before the optional stats file.
    save_golden_matrix(config.golden_file_path, C)
    print(f"Info: Result matrix written to {config.golden_file_path}")

    if config.results_dir is not None:
        file_path = stats_file_path(config.results_dir, matrix_dim, config.mode)
        save_stats(file_path, matrix_dim, run_times, timestamps)
        print(f"Info: Run statistics written to {file_path}")

    return BenchmarkResult(run_times=run_times, average_time=average_time, C=C)
