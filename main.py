import sys
import argparse

from constants.params import MATRIX_SIZE, RUNS
from constants.string_constants import SERIAL_MODE, PARALLEL_MODE, DEFAULT_MODE, GOLDEN_FILE_PATH, \
    APP_NAME, APP_VERSION
from performance_profiling.matrix_multiplication.matrix_generation import generate_matrices
from performance_profiling.matrix_multiplication.profile_matrix_mult_all import run_matrix_multiplication_benchmark
from performance_profiling.matrix_multiplication.run_config import RunConfig
from performance_profiling.matrix_multiplication.verify_matrix_mult import verify_against_golden_file, \
    VerificationMismatchError
from utils.utils import print_system_info


def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        description="Benchmarks serial and parallel matrix multiplication and checks results "
                    "against the golden file written by the last benchmark run."
    )
    parser.add_argument(
        "-m", "--mode",
        choices=[SERIAL_MODE, PARALLEL_MODE],
        default=DEFAULT_MODE,
        help="Multiplication strategy used in benchmark mode. Ignored with --check."
    )
    parser.add_argument(
        "-c", "--check",
        action="store_true",
        help="Check the product against the golden file instead of benchmarking."
    )
    parser.add_argument(
        "--size",
        type=non_negative_int,
        default=MATRIX_SIZE,
        help="Dimension of the square matrices. Must match the run that wrote the golden file."
    )
    parser.add_argument(
        "--runs",
        type=positive_int,
        default=RUNS,
        help="Number of timed runs in benchmark mode."
    )
    parser.add_argument(
        "--golden_file",
        default=GOLDEN_FILE_PATH,
        help="Path of the golden file."
    )
    parser.add_argument(
        "--no_stats",
        action="store_true",
        help="If set, per-run statistics are not written to the results folder."
    )
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return parser


def run(config):
    A, B = generate_matrices(config.size)

    if config.check:
        verify_against_golden_file(A, B, config.golden_file_path)
    else:
        print_system_info()
        run_matrix_multiplication_benchmark(A, B, config)


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = RunConfig.from_args(args)

    try:
        run(config)
    except VerificationMismatchError as e:
        print(f"Error: {e}")
        return 1
    except IOError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
