import pytest

from reactorkit.linkedlist import LinkedList

WORDS = ["a", "list", "of", "string", "pointers"]


def _compare(a, b):
    return (a > b) - (a < b)


def test_core():
    lst = LinkedList()
    for word in WORDS:
        lst.push_back(word)
    assert lst.front().value == "a"

    lst.push_front("test")
    node = lst.front()
    assert node.value == "test"
    lst.erase(node)

    assert list(lst) == WORDS
    assert list(reversed(lst)) == WORDS[::-1]

    assert lst.find("pointers", _compare).value == "pointers"
    assert lst.find("foo", _compare) is None
    assert lst.find("of").value == "of"
    lst.clear()
    assert lst.empty()


def test_release_on_clear():
    released = []
    lst = LinkedList()
    for i in range(16):
        lst.push_back(i)
    lst.clear(released.append)
    assert released == list(range(16))
    assert len(lst) == 0


def test_unit():
    lst = LinkedList()

    lst.insert(lst.front(), 1)
    assert lst.front().value == 1
    lst.clear()

    node = lst.insert(lst.front(), None)
    node.value = 42
    assert lst.front().value == 42
    lst.clear()

    lst.insert(lst.front().previous(), 1)
    assert lst.front().value == 1
    lst.erase(lst.back())
    assert lst.empty()

    lst.push_front(1)
    assert lst.front().value == 1
    lst.erase(lst.front())

    lst.push_back(1)
    assert lst.front().value == 1
    lst.clear()

    for value in (1, 2, 3):
        lst.push_back(value)
    node = lst.front().next()
    assert node.value == 2
    lst.erase(node)
    assert lst.front().next().value == 3

    lst.clear()
    other = LinkedList()
    for value in (1, 2, 3):
        lst.push_back(value)
    assert other.empty()
    other.splice(other.front(), lst.front().next())
    assert other.front().value == 2
    assert lst.front().next().value == 3
    assert list(lst) == [1, 3]
    assert list(other) == [2]


def test_splice_onto_itself_is_noop():
    lst = LinkedList()
    node = lst.push_back(1)
    lst.splice(node, node)
    assert list(lst) == [1]
    assert len(lst) == 1


def test_front_of_empty_is_end():
    lst = LinkedList()
    assert lst.front() is lst.end()
    assert lst.back() is lst.end()


def test_erase_end_raises():
    lst = LinkedList()
    with pytest.raises(ValueError):
        lst.erase(lst.end())


def test_erase_calls_release_with_value():
    released = []
    lst = LinkedList()
    node = lst.push_back("x")
    lst.push_back("y")
    lst.erase(node, released.append)
    assert released == ["x"]
    assert list(lst) == ["y"]