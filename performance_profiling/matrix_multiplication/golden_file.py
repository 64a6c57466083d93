"""
Reading and writing of the golden file.

The golden file is a raw dump of an N x N float64 matrix: N*N values in
row-major order, 8 bytes each, little-endian, with no header. The reader has
to know N.
"""
import numpy as np

from constants.params import DATA_TYPE

GOLDEN_DTYPE = np.dtype('<f8')


class ShortReadError(IOError):
    """Raised when the golden file holds fewer bytes than N*N*8."""

    def __init__(self, path, expected_bytes, actual_bytes):
        self.path = path
        self.expected_bytes = expected_bytes
        self.actual_bytes = actual_bytes
        super().__init__(f"Short read from '{path}': expected {expected_bytes} bytes, "
                         f"got {actual_bytes}")


def golden_file_size(size):
    return size * size * GOLDEN_DTYPE.itemsize


def save_golden_matrix(path, matrix):
    data = np.ascontiguousarray(matrix, dtype=GOLDEN_DTYPE)
    with open(path, 'wb') as file:
        file.write(data.tobytes())


def load_golden_matrix(path, size):
    """
    Reads exactly size*size*8 bytes from path into a new (size, size) float64 matrix.

    Raises ShortReadError if the file is too short. Bytes past the expected
    length are left unread.
    """
    expected_bytes = golden_file_size(size)
    with open(path, 'rb') as file:
        data = file.read(expected_bytes)
        if len(data) < expected_bytes:
            raise ShortReadError(path, expected_bytes, len(data))
        if file.read(1):
            print(f"Warning: '{path}' is longer than {expected_bytes} bytes; trailing data ignored.")

    if expected_bytes == 0:
        return np.zeros((size, size), dtype=DATA_TYPE)
    return np.frombuffer(data, dtype=GOLDEN_DTYPE).astype(DATA_TYPE).reshape(size, size)
