from typing import NamedTuple, Optional

from constants.params import MATRIX_SIZE, RUNS
from constants.string_constants import DEFAULT_MODE, GOLDEN_FILE_PATH, RESULTS_BASE_PATH


class RunConfig(NamedTuple):
    mode: str = DEFAULT_MODE
    runs: int = RUNS
    check: bool = False
    size: int = MATRIX_SIZE
    golden_file_path: str = GOLDEN_FILE_PATH
    results_dir: Optional[str] = RESULTS_BASE_PATH

    @classmethod
    def from_args(cls, args):
        return cls(
            mode=args.mode,
            runs=args.runs,
            check=args.check,
            size=args.size,
            golden_file_path=args.golden_file,
            results_dir=None if args.no_stats else RESULTS_BASE_PATH,
        )
