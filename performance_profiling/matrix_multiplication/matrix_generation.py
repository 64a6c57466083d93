import numpy as np

from constants.params import RANDOM_SEED, DATA_TYPE


def generate_matrices(size, random_state_seed=RANDOM_SEED):
    """
    Generates the A and B input matrices from a single seeded MT19937 stream.

    The legacy RandomState stream is frozen by NumPy, so the same seed yields
    bit-identical matrices on every run and platform. A is drawn before B.
    """
    if size < 0:
        raise ValueError(f"Matrix size must be non-negative, got {size}")
    rng = np.random.RandomState(random_state_seed)
    A_np = np.ascontiguousarray(rng.rand(size, size), dtype=DATA_TYPE)
    B_np = np.ascontiguousarray(rng.rand(size, size), dtype=DATA_TYPE)
    return A_np, B_np


if __name__ == "__main__":
    A, B = generate_matrices(4)
    print(f"Info: Generated matrices of shape {A.shape}.")
    print(A)
    print(B)
