"""City adjacency matrix loading from CSV files.

The expected layout is a square table whose header row lists the city
names after a corner cell, and whose data rows start with a row label
followed by one weight per city:

    ,Adana,Ankara,Bursa
    Adana,0,490,99999
    Ankara,490,0,385
    Bursa,99999,385,0
"""

import csv
from pathlib import Path
from typing import List, Tuple, Union

from ..domain.errors import ConfigurationError, GraphError
from .city_graph import INFINITY

Matrix = List[List[int]]


def _parse_weight(cell: str, infinity: int) -> int:
    try:
        return int(cell.strip())
    except ValueError:
        return infinity


def load_matrix_csv(
    path: Union[str, Path],
    encoding: str = "utf-8",
    infinity: int = INFINITY,
) -> Tuple[List[str], Matrix]:
    """Read a city list and adjacency matrix from ``path``.

    Parameters
    ----------
    path:
        CSV file laid out as described in the module docstring.
    encoding:
        Text encoding of the file.
    infinity:
        Weight used for cells that are missing or not integers.

    Returns
    -------
    list[str], list[list[int]]
        City names in header order and the N x N weight matrix.
        Data rows beyond the N-th are ignored.

    Raises
    ------
    ConfigurationError
        If ``infinity`` is below INFINITY, so it would read as an edge.
    GraphError
        If the file has no header or fewer data rows than cities.
    OSError
        If the file cannot be read.
    """
    if infinity < INFINITY:
        raise ConfigurationError(
            f"infinity must be at least {INFINITY}, got {infinity}",
            setting_name="infinity_weight",
            expected_type=f"int >= {INFINITY}",
        )

    with open(path, newline="", encoding=encoding) as f:
        rows = [row for row in csv.reader(f) if row]

    if not rows:
        raise GraphError("CSV file is empty", file_path=str(path))

    cities = [name.strip() for name in rows[0][1:]]
    data_rows = rows[1:]
    size = len(cities)

    if len(data_rows) < size:
        raise GraphError(
            f"Expected {size} data rows, found {len(data_rows)}",
            file_path=str(path),
        )

    matrix: Matrix = []
    for row in data_rows[:size]:
        cells = row[1:]
        matrix.append(
            [
                _parse_weight(cells[j], infinity) if j < len(cells) else infinity
                for j in range(size)
            ]
        )

    return cities, matrix
