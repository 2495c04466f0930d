import pytest

from dstructs.sparse import Term, transpose


@pytest.fixture
def matrix_a():
    return [
        Term(8, 7, 10),
        Term(0, 2, 2),
        Term(0, 6, 12),
        Term(1, 4, 7),
        Term(2, 0, 23),
        Term(3, 3, 31),
        Term(4, 1, 14),
        Term(4, 5, 25),
        Term(5, 6, 6),
        Term(6, 0, 52),
        Term(7, 4, 11),
    ]


def test_header_is_swapped(matrix_a):
    b = transpose(matrix_a)
    assert b[0] == Term(7, 8, 10)
    assert len(b) == len(matrix_a)


def test_double_transpose_is_identity(matrix_a):
    assert transpose(transpose(matrix_a)) == matrix_a


def test_entries_are_mirrored(matrix_a):
    b = transpose(matrix_a)
    mirrored = {(t.col, t.row, t.value) for t in matrix_a[1:]}
    assert {(t.row, t.col, t.value) for t in b[1:]} == mirrored


def test_rows_are_ordered(matrix_a):
    rows = [t.row for t in transpose(matrix_a)[1:]]
    assert rows == sorted(rows)


def test_first_entry_comes_from_column_zero(matrix_a):
    assert transpose(matrix_a)[1] == Term(0, 2, 23)


def test_empty_matrix_has_only_header():
    assert transpose([Term(3, 5, 0)]) == [Term(5, 3, 0)]


def test_missing_header_raises():
    with pytest.raises(ValueError):
        transpose([])