import numpy as np

MATRIX_SIZE = 1500
RUNS = 10
RANDOM_SEED = 0
DATA_TYPE = np.float64
WARMUP_MATRIX_SIZE = 2
