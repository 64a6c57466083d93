import numpy as np

from numba import njit, prange

from algorithms.matrix_multiplication.single_thread import prepare_output


@njit(parallel=True, cache=True)
def _multiply_rows_parallel(A, B, C):
    """Each output row is owned by one worker; the j, k order inside a row is the serial one."""
    m, n = A.shape
    p = B.shape[1]

    for i in prange(m):
        for j in range(p):
            total = 0.0
            for k in range(n):
                total += A[i, k] * B[k, j]
            C[i, j] = total


def multi_threaded_multiply(A, B, C=None):
    C = prepare_output(A, B, C)
    _multiply_rows_parallel(A, B, C)
    return C


# --- Example Usage ---
if __name__ == "__main__":
    A = np.random.rand(500, 500)
    B = np.random.rand(500, 500)
    C = multi_threaded_multiply(A, B)
    print("Multi-threaded multiplication complete.")
