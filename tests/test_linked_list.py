import pytest

from cub3d.libft.linked_list import LinkedList, Node


def test_items_in_order():
    items = [1, 2, 3]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_add_front_prepends():
    lst = LinkedList(["b", "c"])
    node = lst.add_front("a")
    assert list(lst) == ["a", "b", "c"]
    assert node.content == "a"
    assert len(lst) == 3


def test_add_front_on_empty_sets_last():
    lst = LinkedList()
    lst.add_front("only")
    assert lst.last().content == "only"


def test_add_back_appends_and_updates_last():
    lst = LinkedList(["a"])
    node = lst.add_back("z")
    assert list(lst) == ["a", "z"]
    assert lst.last() is node
    assert node.next is None


def test_len_counts_nodes():
    lst = LinkedList(range(5))
    lst.add_front(-1)
    lst.add_back(5)
    assert len(lst) == 7


def test_last_is_node():
    lst = LinkedList(["x", "y"])
    last = lst.last()
    assert isinstance(last, Node)
    assert last.content == "y"


def test_clear_calls_delete_for_each():
    deleted = []
    lst = LinkedList(["p0", "p1", "p2"])
    lst.clear(deleted.append)
    assert deleted == ["p0", "p1", "p2"]
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert len(lst) == 0


def test_iterate_visits_all():
    seen = []
    lst = LinkedList(["a", "b"])
    lst.iterate(seen.append)
    assert seen == ["a", "b"]


def test_map_builds_new_list():
    original = LinkedList(["prova0", "prova1"])
    mapped = original.map(str.upper, lambda c: None)
    assert list(mapped) == [s.upper() for s in original]
    assert list(original) == ["prova0", "prova1"]
    assert len(mapped) == len(original)


def test_map_empty():
    assert len(LinkedList().map(str.upper)) == 0


def test_map_failure_deletes_produced_contents():
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 10

    lst = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        lst.map(f, deleted.append)
    assert deleted == [f(1), f(2)]