import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.structures import MinStack, Trie


def test_min_stack_worked_example():
    stack = MinStack()
    stack.push(5)
    stack.push(3)
    stack.push(7)
    assert stack.top() == 7
    assert stack.get_min() == 3
    stack.pop()
    assert stack.top() == 3
    assert stack.get_min() == 3


def test_min_stack_pop_returns_top():
    stack = MinStack()
    stack.push(5)
    stack.push(3)
    assert stack.pop() == 3
    assert stack.pop() == 5
    assert len(stack) == 0


def test_min_stack_minimum_restored_after_pop():
    stack = MinStack()
    stack.push(5)
    stack.push(3)
    stack.pop()
    assert stack.get_min() == 5


def test_min_stack_empty_pop_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.pop()
    assert len(stack) == 0


def test_min_stack_empty_top_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.top()
    assert len(stack) == 0


def test_min_stack_empty_get_min_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.get_min()
    assert len(stack) == 0


def test_min_stack_raises_after_emptied():
    stack = MinStack()
    stack.push(1)
    assert stack.pop() == 1
    with pytest.raises(IndexError):
        stack.top()


@given(st.lists(st.integers(), min_size=1))
def test_min_stack_tracks_minimum_of_contents(values):
    stack = MinStack()
    for value in values:
        stack.push(value)
    for remaining in range(len(values), 0, -1):
        assert stack.get_min() == min(values[:remaining])
        assert stack.top() == values[remaining - 1]
        assert stack.pop() == values[remaining - 1]
    assert not stack


def test_trie_worked_example():
    trie = Trie()
    trie.add("hello")
    trie.add("world")
    assert trie.find("hello") is True
    assert trie.find("world") is True
    assert trie.find("helloworld") is False
    assert trie.find("hell") is False


def test_trie_prefix_becomes_word_once_added():
    trie = Trie()
    trie.add("hello")
    trie.add("hell")
    assert trie.find("hell") is True
    assert trie.find("hello") is True
    assert trie.find("he") is False


def test_trie_empty_word():
    trie = Trie()
    assert trie.find("") is False
    trie.add("")
    assert trie.find("") is True


def test_trie_contains():
    trie = Trie()
    trie.add("world")
    assert "world" in trie
    assert "hello" not in trie
    assert 5 not in trie


def test_trie_rejects_other_characters():
    trie = Trie()
    with pytest.raises(ValueError):
        trie.add("Hello")
    assert trie.find("ello") is False


def test_trie_find_unknown_character_is_false():
    trie = Trie()
    trie.add("hello")
    assert trie.find("hello!") is False


_words = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", max_size=8)


@given(st.lists(_words), st.lists(_words))
def test_trie_finds_exactly_added_words(added, probes):
    trie = Trie()
    for word in added:
        trie.add(word)
    for word in added:
        assert trie.find(word)
    for word in probes:
        assert trie.find(word) == (word in added)