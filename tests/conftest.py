import numpy as np
import pytest

from performance_profiling.matrix_multiplication.matrix_generation import generate_matrices


@pytest.fixture
def small_matrices():
    return generate_matrices(17)


@pytest.fixture
def scenario_matrices():
    A = np.array([[1.0, 2.0], [3.0, 4.0]])
    B = np.array([[5.0, 6.0], [7.0, 8.0]])
    C = np.array([[19.0, 22.0], [43.0, 50.0]])
    return A, B, C
