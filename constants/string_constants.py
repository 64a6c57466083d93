RESULTS_BASE_PATH = 'results/'
MATRIX_MULTIPLICATION_PATH = 'matrix_multiplication/'
GOLDEN_FILE_PATH = 'log.bin'
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERIAL_MODE = 'serial'
PARALLEL_MODE = 'parallel'
DEFAULT_MODE = PARALLEL_MODE

APP_NAME = "Matrix Multiplication Checker"
APP_VERSION = "1.0"
