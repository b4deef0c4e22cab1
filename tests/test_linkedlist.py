import pytest

from minishell.linkedlist import LinkedList, Node


def test_empty_list_has_no_elements():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_push_back_keeps_insertion_order():
    lst = LinkedList()
    for item in ["a", "b", "c"]:
        lst.push_back(item)
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_reverses_order():
    lst = LinkedList()
    for item in ["a", "b", "c"]:
        lst.push_front(item)
    assert list(lst) == ["c", "b", "a"]


def test_push_front_returns_new_head():
    lst = LinkedList(["x"])
    node = lst.push_front("y")
    assert lst.head is node
    assert node.content == "y"
    assert node.next.content == "x"


def test_push_back_returns_new_last_node():
    lst = LinkedList(["x"])
    node = lst.push_back("y")
    assert lst.last() is node
    assert node.next is None


def test_last_on_single_element():
    lst = LinkedList()
    node = lst.push_back(42)
    assert lst.last() is node
    assert lst.head is node


def test_constructor_from_iterable():
    lst = LinkedList(range(5))
    assert list(lst) == [0, 1, 2, 3, 4]
    assert lst.last().content == 4


def test_clear_calls_delete_on_each_content_in_order():
    seen = []
    lst = LinkedList(["one", "two", "three"])
    lst.clear(seen.append)
    assert seen == ["one", "two", "three"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties_list():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_list_usable_after_clear():
    lst = LinkedList([1, 2])
    lst.clear(lambda _: None)
    lst.push_back(3)
    assert list(lst) == [3]


def test_for_each_visits_every_content():
    seen = []
    lst = LinkedList(["p", "q"])
    lst.for_each(seen.append)
    assert seen == ["p", "q"]
    assert list(lst) == ["p", "q"]


def test_for_each_can_mutate_contents():
    lst = LinkedList([[1], [2]])
    lst.for_each(lambda item: item.append(0))
    assert list(lst) == [[1, 0], [2, 0]]


def test_map_returns_new_list_and_leaves_original():
    lst = LinkedList(["ab", "cd"])
    mapped = lst.map(str.upper)
    assert list(mapped) == ["AB", "CD"]
    assert list(lst) == ["ab", "cd"]
    assert mapped is not lst
    assert len(mapped) == len(lst)


def test_map_of_empty_list_is_empty():
    assert list(LinkedList().map(str.upper)) == []


def test_map_propagates_errors():
    lst = LinkedList(["1", "x"])
    with pytest.raises(ValueError):
        lst.map(int)


def test_node_defaults_to_no_successor():
    node = Node("content")
    assert node.next is None
    assert node.content == "content"


@pytest.mark.parametrize("items", [[], [None], [1, None, 3], list("hello")])
def test_length_matches_iteration(items):
    lst = LinkedList(items)
    assert len(lst) == len(items)
    assert list(lst) == items