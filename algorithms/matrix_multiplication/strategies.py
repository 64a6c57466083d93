from algorithms.matrix_multiplication.single_thread import single_threaded_multiply
from algorithms.matrix_multiplication.multi_thread import multi_threaded_multiply
from constants.string_constants import SERIAL_MODE, PARALLEL_MODE

MULTIPLY_STRATEGIES = {
    SERIAL_MODE: single_threaded_multiply,
    PARALLEL_MODE: multi_threaded_multiply,
}


def get_multiply_function(mode):
    try:
        return MULTIPLY_STRATEGIES[mode]
    except KeyError:
        raise ValueError(f"Unknown multiplication mode '{mode}'. "
                         f"Expected one of: {', '.join(MULTIPLY_STRATEGIES)}") from None
