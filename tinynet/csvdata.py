"""Loading numeric CSV files into tensors."""

import os
import string

from tinynet.tensor import Tensor


def _cells(line: str) -> list[str]:
    cells = line.split(",")
    if cells[-1] == "" and len(cells) > 1:
        cells.pop()
    return cells


def load_csv(path: str | os.PathLike) -> Tensor:
    """Read a comma-separated file of numbers into a (rows, cols) tensor.

    Blank lines are ignored, and the first line is treated as a header and
    skipped when it does not start with a digit or a minus sign. The column
    count is taken from the first data row.
    """
    values: list[float] = []
    rows = 0
    cols = 0
    first_line = True
    with open(path, encoding="utf-8") as file:
        for raw in file:
            line = raw.rstrip("\n")
            if not line:
                continue
            if first_line:
                first_line = False
                if line[0] not in string.digits and line[0] != "-":
                    continue
            row = [float(cell) for cell in _cells(line)]
            if rows == 0:
                cols = len(row)
            values.extend(row)
            rows += 1

    result = Tensor((rows, cols))
    result.data = values
    return result