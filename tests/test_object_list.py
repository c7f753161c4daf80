import pytest

from particlekit.object_list import ObjectList, ObjectListNode


class Item(ObjectListNode):
    def __init__(self, value):
        self.value = value


def values(seq):
    return [item.value for item in seq]


def make_list(*vals):
    lst = ObjectList()
    items = [Item(v) for v in vals]
    for item in items:
        lst.add(item)
    return lst, items


def test_new_list_is_empty():
    lst = ObjectList()
    assert lst.empty()
    assert len(lst) == 0
    assert list(lst) == []


def test_add_keeps_insertion_order():
    lst, items = make_list(1, 2, 3)
    assert not lst.empty()
    assert len(lst) == 3
    assert values(lst) == [1, 2, 3]
    assert values(reversed(lst)) == [3, 2, 1]


def test_add_same_node_twice_is_rejected():
    lst, items = make_list(1)
    assert lst.add(items[0]) is False
    assert len(lst) == 1


def test_add_moves_node_from_other_list():
    first, items = make_list(1, 2)
    second = ObjectList()
    assert second.add(items[0]) is True
    assert values(first) == [2]
    assert values(second) == [1]
    assert items[0] in second
    assert items[0] not in first


@pytest.mark.parametrize(
    "index, expected",
    [(0, [2, 3]), (1, [1, 3]), (2, [1, 2])],
)
def test_remove_positions(index, expected):
    lst, items = make_list(1, 2, 3)
    assert lst.remove(items[index]) is True
    assert values(lst) == expected
    assert values(reversed(lst)) == list(reversed(expected))
    assert len(lst) == 2


def test_remove_foreign_node_returns_false():
    lst, _ = make_list(1)
    assert lst.remove(Item(9)) is False
    assert len(lst) == 1


def test_remove_last_node_empties_list():
    lst, items = make_list(1)
    lst.remove(items[0])
    assert lst.empty()
    assert list(reversed(lst)) == []


def test_clear_detaches_nodes():
    lst, items = make_list(1, 2, 3)
    lst.clear()
    assert lst.empty()
    assert len(lst) == 0
    other = ObjectList()
    assert all(other.add(item) for item in items)
    assert values(other) == [1, 2, 3]


def test_remove_during_iteration():
    lst, items = make_list(1, 2, 3, 4)
    for item in lst:
        if item.value % 2 == 0:
            lst.remove(item)
    assert values(lst) == [1, 3]


def test_add_non_node_raises():
    with pytest.raises(TypeError):
        ObjectList().add(None)
    with pytest.raises(TypeError):
        ObjectList().remove("node")


def test_contains_rejects_unrelated_objects():
    lst, items = make_list(1)
    assert items[0] in lst
    assert 1 not in lst