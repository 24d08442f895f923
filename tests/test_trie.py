import pytest

from algokit.trie import Trie


def test_driver_search():
    trie = Trie()
    trie.insert("hello")
    trie.insert("world")
    assert trie.search("hello") is True
    assert trie.search("word") is False


def test_prefix_is_not_a_word():
    trie = Trie()
    trie.insert("hello")
    assert not trie.search("hell")
    assert not trie.search("helloo")


def test_contains_operator():
    trie = Trie()
    trie.insert("apple")
    assert "apple" in trie
    assert "app" not in trie
    assert "Apple" not in trie
    assert 5 not in trie


def test_delete_word_keeps_its_prefix_word():
    trie = Trie()
    trie.insert("he")
    trie.insert("hello")
    assert trie.delete("hello") is True
    assert "hello" not in trie
    assert "he" in trie


def test_delete_prefix_word_keeps_longer_word():
    trie = Trie()
    trie.insert("he")
    trie.insert("hello")
    assert trie.delete("he") is True
    assert "he" not in trie
    assert "hello" in trie


def test_delete_prunes_unused_nodes():
    trie = Trie()
    trie.insert("abc")
    assert trie.delete("abc")
    assert trie._root.children == {}


def test_delete_missing_word():
    trie = Trie()
    trie.insert("abc")
    assert trie.delete("ab") is False
    assert trie.delete("xyz") is False
    assert "abc" in trie


def test_reinsert_after_delete():
    trie = Trie()
    trie.insert("cat")
    trie.delete("cat")
    trie.insert("cat")
    assert trie.search("cat")


@pytest.mark.parametrize("word", ["Hello", "hi there", "caf\u00e9", "a1"])
def test_invalid_characters_raise(word):
    trie = Trie()
    with pytest.raises(ValueError):
        trie.insert(word)
    with pytest.raises(ValueError):
        trie.search(word)