import pytest

from dstructs.linear_list import delete_element, insert_sorted


@pytest.fixture
def source_list():
    return [10, 20, 40, 50, 60, 70]


def test_insert_keeps_order(source_list):
    insert_sorted(source_list, 30)
    assert source_list == sorted(source_list)
    assert 30 in source_list


def test_insert_move_count_matches_position(source_list):
    before = len(source_list)
    moves = insert_sorted(source_list, 30)
    assert moves == before - source_list.index(30)
    assert len(source_list) == before + 1


def test_insert_larger_than_all_appends(source_list):
    moves = insert_sorted(source_list, 99)
    assert moves == 0
    assert source_list[-1] == 99


def test_insert_into_empty():
    items = []
    assert insert_sorted(items, 5) == 0
    assert items == [5]


def test_insert_then_delete_round_trip(source_list):
    original = list(source_list)
    insert_sorted(source_list, 30)
    delete_element(source_list, 30)
    assert source_list == original


def test_delete_move_count(source_list):
    index = source_list.index(40)
    before = len(source_list)
    moves = delete_element(source_list, 40)
    assert moves == before - 1 - index
    assert 40 not in source_list


def test_delete_last_moves_nothing(source_list):
    assert delete_element(source_list, 70) == 0


def test_delete_missing_raises(source_list):
    original = list(source_list)
    with pytest.raises(ValueError):
        delete_element(source_list, 30)
    assert source_list == original