import numpy as np

from algorithms.matrix_multiplication.single_thread import single_threaded_multiply
from performance_profiling.matrix_multiplication.golden_file import load_golden_matrix


class VerificationMismatchError(AssertionError):
    def __init__(self, row, column, expected, actual):
        self.row = row
        self.column = column
        self.expected = expected
        self.actual = actual
        super().__init__(f"Mismatch at ({row}, {column})")


def find_first_mismatch(C, D):
    """Returns the (row, column) of the first differing cell in row-major order, or None."""
    mismatches = np.argwhere(C != D)
    if mismatches.size == 0:
        return None
    row, column = mismatches[0]
    return int(row), int(column)


def assert_matrices_identical(C, D):
    # Exact equality: both strategies keep the same accumulation order per cell.
    mismatch = find_first_mismatch(C, D)
    if mismatch is not None:
        row, column = mismatch
        raise VerificationMismatchError(row, column, expected=D[row, column], actual=C[row, column])


def verify_against_golden_file(A, B, golden_file_path):
    """
    Recomputes A @ B with the single-threaded kernel and compares it cell by
    cell against the matrix stored in golden_file_path.

    The golden matrix is read completely before anything is computed. The
    first differing cell raises VerificationMismatchError.
    """
    size = A.shape[0]
    print(f"Info: Loading golden matrix from {golden_file_path} ({size}x{size})...")
    D = load_golden_matrix(golden_file_path, size)

    print("Info: Recomputing product with the single-threaded kernel...")
    C = single_threaded_multiply(A, B)

    assert_matrices_identical(C, D)
    print("No mismatches found")
    return C
