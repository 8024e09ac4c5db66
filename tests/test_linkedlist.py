import io

from ftkit.linkedlist import LinkedList


def test_build_from_items_preserves_order():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_add_front_and_back():
    lst = LinkedList()
    lst.add_back(2)
    lst.add_front(1)
    lst.add_back(3)
    assert list(lst) == [1, 2, 3]
    assert lst.last() == 3
    assert len(lst) == 3


def test_add_front_on_empty_sets_last():
    lst = LinkedList()
    lst.add_front("only")
    assert lst.last() == "only"


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert list(lst) == []


def test_clear_then_reuse():
    lst = LinkedList([1])
    lst.clear()
    lst.add_back(5)
    assert list(lst) == [5]
    assert lst.last() == 5


def test_iterate_visits_each():
    seen = []
    LinkedList(["x", "y"]).iterate(seen.append)
    assert seen == ["x", "y"]


def test_map_returns_new_list():
    lst = LinkedList([1, 2, 3])
    doubled = lst.map(lambda v: v * 2)
    assert list(doubled) == [v * 2 for v in lst]
    assert list(lst) == [1, 2, 3]
    assert doubled is not lst and len(doubled) == len(lst)


def test_show_writes_lines():
    buf = io.StringIO()
    lst = LinkedList(["one", "two", None])
    result = lst.show(buf)
    assert buf.getvalue() == "one\ntwo\n(null)\n"
    assert result is lst