import numpy as np

from numba import njit

from constants.params import DATA_TYPE


def prepare_output(A, B, C=None):
    """Checks operand shapes and returns the buffer the product is written into."""
    m, n = A.shape
    nB, p = B.shape

    if n != nB:
        raise ValueError("Number of columns in A must be equal to the number of rows in B")

    if C is None:
        return np.zeros((m, p), dtype=DATA_TYPE)
    if C.shape != (m, p):
        raise ValueError(f"Output buffer has shape {C.shape}, expected {(m, p)}")
    return C


@njit(cache=True)
def _multiply_into(A, B, C):
    m, n = A.shape
    p = B.shape[1]

    for i in range(m):
        for j in range(p):
            total = 0.0
            for k in range(n):
                total += A[i, k] * B[k, j]
            C[i, j] = total


def single_threaded_multiply(A, B, C=None):
    """
    Computes C = A @ B with a plain i, j, k triple loop on one thread.

    If C is given it is overwritten in place; its previous contents do not matter.
    """
    C = prepare_output(A, B, C)
    _multiply_into(A, B, C)
    return C


# --- Example Usage ---
if __name__ == "__main__":
    A = np.random.rand(500, 500)
    B = np.random.rand(500, 500)
    C = single_threaded_multiply(A, B)
    print("Single-threaded multiplication complete.")
