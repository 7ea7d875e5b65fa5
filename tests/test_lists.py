import pytest

from ftlib.lists import LinkedList, Node


def test_add_back_keeps_insertion_order():
    lst = LinkedList()
    for value in ("a", "b", "c"):
        lst.add_back(Node(value))
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_add_front_reverses_order():
    lst = LinkedList()
    for value in (1, 2, 3):
        lst.add_front(Node(value))
    assert list(lst) == [3, 2, 1]


def test_add_none_is_ignored():
    lst = LinkedList([1])
    lst.add_back(None)
    lst.add_front(None)
    assert list(lst) == [1]


def test_last_of_empty_list_is_none():
    assert LinkedList().last() is None
    assert len(LinkedList()) == 0


def test_last_returns_final_node():
    node = Node("end")
    lst = LinkedList(["x", "y"])
    lst.add_back(node)
    assert lst.last() is node
    assert lst.last().next is None


def test_iterate_visits_each_content_in_order():
    seen = []
    LinkedList([4, 5, 6]).iterate(seen.append)
    assert seen == [4, 5, 6]


def test_iterate_with_none_does_nothing():
    lst = LinkedList([1, 2])
    lst.iterate(None)
    assert list(lst) == [1, 2]


def test_clear_deletes_every_content_and_empties():
    deleted = []
    lst = LinkedList(["p", "q", "r"])
    lst.clear(deleted.append)
    assert deleted == ["p", "q", "r"]
    assert lst.head is None
    assert len(lst) == 0


def test_clear_without_delete_still_empties():
    lst = LinkedList([1, 2])
    lst.clear(None)
    assert list(lst) == []


def test_map_builds_new_list_and_leaves_original():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10, None)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_of_empty_list_is_empty():
    assert list(LinkedList().map(str, None)) == []


def test_map_with_none_function_is_empty():
    assert len(LinkedList([1, 2]).map(None, None)) == 0


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return x + 100

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [101, 102]