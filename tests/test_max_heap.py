import pytest

from dstructs.max_heap import HeapEmptyError, MaxHeap

SOURCE_ITEMS = [10, 45, 19, 11, 96]


def _build(items):
    heap = MaxHeap()
    for item in items:
        heap.insert(item)
    return heap


def _is_heap(values):
    return all(values[(i - 1) // 2] >= values[i] for i in range(1, len(values)))


def test_source_example_layout():
    heap = _build(SOURCE_ITEMS)
    assert str(heap) == "Heap : [96] [45] [19] [10] [11] "


def test_heap_property_after_inserts():
    heap = _build(SOURCE_ITEMS)
    assert _is_heap(list(heap))
    assert len(heap) == 5


def test_deletes_come_out_descending():
    heap = _build(SOURCE_ITEMS)
    out = [heap.delete() for _ in range(len(heap))]
    assert out == sorted(SOURCE_ITEMS, reverse=True)
    assert len(heap) == 0


def test_heap_property_kept_during_deletes():
    items = [5, 3, 17, 10, 84, 19, 6, 22, 9, 3, 17]
    heap = _build(items)
    out = []
    while len(heap):
        out.append(heap.delete())
        remaining = list(heap)
        assert _is_heap(remaining)
        assert len(remaining) == len(items) - len(out)
    assert out == sorted(items, reverse=True)


def test_duplicates_sorted():
    items = [4, 4, 1, 4, 2]
    heap = _build(items)
    assert [heap.delete() for _ in items] == sorted(items, reverse=True)


def test_delete_empty_raises():
    with pytest.raises(HeapEmptyError):
        MaxHeap().delete()


def test_delete_after_draining_raises():
    heap = _build([7])
    assert heap.delete() == 7
    with pytest.raises(IndexError):
        heap.delete()


def test_empty_str():
    assert str(MaxHeap()) == "Heap : "