"""Tests for the CSV adjacency matrix loader."""

import pytest

from cityroute.domain.errors import ConfigurationError, GraphError
from cityroute.graph.load_graph import load_matrix_csv


def _write(tmp_path, text, name="cities.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_reads_cities_and_matrix(tmp_path):
    path = _write(
        tmp_path,
        ",A,B\nA,0,12\nB,12,0\n",
    )
    cities, matrix = load_matrix_csv(path)
    assert cities == ["A", "B"]
    assert matrix == [[0, 12], [12, 0]]


def test_strips_whitespace(tmp_path):
    path = _write(tmp_path, " , A , B \nA, 0 , 3\nB,3 ,0\n")
    cities, matrix = load_matrix_csv(path)
    assert cities == ["A", "B"]
    assert matrix == [[0, 3], [3, 0]]


def test_unparsable_and_missing_cells_become_infinity(tmp_path):
    path = _write(tmp_path, ",A,B,C\nA,0,x,\nB,1,0\nC,2.5,1,0\n")
    cities, matrix = load_matrix_csv(path)
    assert matrix == [
        [0, 99999, 99999],
        [1, 0, 99999],
        [99999, 1, 0],
    ]


def test_custom_infinity(tmp_path):
    path = _write(tmp_path, ",A,B\nA,0,-\nB,4,0\n")
    _, matrix = load_matrix_csv(path, infinity=1_000_000)
    assert matrix[0][1] == 1_000_000


def test_infinity_below_no_edge_sentinel_rejected(tmp_path):
    path = _write(tmp_path, ",A,B\nA,0,x\nB,x,0\n")
    with pytest.raises(ConfigurationError) as exc_info:
        load_matrix_csv(path, infinity=500)
    assert exc_info.value.setting_name == "infinity_weight"


def test_blank_lines_and_extra_rows_are_ignored(tmp_path):
    path = _write(tmp_path, ",A\n\nA,0\n\nZ,9\n")
    cities, matrix = load_matrix_csv(path)
    assert cities == ["A"]
    assert matrix == [[0]]


def test_empty_file_raises(tmp_path):
    path = _write(tmp_path, "")
    with pytest.raises(GraphError) as exc_info:
        load_matrix_csv(path)
    assert exc_info.value.file_path == str(path)


def test_missing_rows_raise(tmp_path):
    path = _write(tmp_path, ",A,B,C\nA,0,1,1\n")
    with pytest.raises(GraphError):
        load_matrix_csv(path)


def test_missing_file_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        load_matrix_csv(tmp_path / "missing.csv")
