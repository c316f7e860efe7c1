import pytest

from trie import LexicalTrie, TrieNode, InvalidInputError, CharacterNotInAlphabetError


ENGLISH = "abcdefghijklmnopqrstuvwxyz"


def test_empty_trie():
    trie = LexicalTrie(ENGLISH)
    assert trie.root is None
    assert len(trie) == 0
    assert trie.get_strings() == []
    assert not trie.find("a")
    assert not trie.is_prefix("a")


@pytest.mark.parametrize("ordering", [None, ENGLISH])
def test_empty_word(ordering):
    trie = LexicalTrie(ordering)
    assert not trie.find("")
    assert not trie.find("", full_word=False)
    assert not trie.find(None)
    with pytest.raises(InvalidInputError):
        trie.insert("")
    with pytest.raises(InvalidInputError):
        trie.insert_prefix(None)

    trie.insert("cab")
    with pytest.raises(ValueError):
        trie.insert("")
    assert not trie.find("")
    assert trie.get_strings() == ["cab"]
    assert len(trie) == 1


def test_custom_ordering():
    trie = LexicalTrie("bac")
    for w in ["a", "b", "c"]:
        trie.insert(w)
    assert trie.get_strings() == ["b", "a", "c"]


def test_insertion_order_without_ordering():
    trie = LexicalTrie()
    for w in ["b", "a", "c"]:
        trie.insert(w)
    assert trie.get_strings() == ["b", "a", "c"]


def test_word_comes_before_its_extensions():
    trie = LexicalTrie("zyx")
    for w in ["xz", "zz", "x", "zyx", "z", "y"]:
        trie.insert(w)
    assert trie.get_strings() == ["z", "zz", "zyx", "y", "x", "xz"]


def test_reversed_alphabet():
    words = ["apple", "banana", "cherry", "app", "band", "ban"]
    trie = LexicalTrie(ENGLISH[::-1])
    for w in words:
        trie.insert(w)
    assert trie.get_strings() == ["cherry", "ban", "band", "banana", "app", "apple"]


def test_find_and_prefixes():
    trie = LexicalTrie(ENGLISH)
    trie.insert("trie")
    assert trie.find("trie")
    assert "trie" in trie
    for i in range(1, len("trie") + 1):
        assert trie.find("trie"[:i], full_word=False)
        assert trie.is_prefix("trie"[:i])
    assert not trie.find("tri")
    assert "tri" not in trie
    assert not trie.is_prefix("tries")
    assert not trie.is_prefix("x")


def test_duplicate_insert_kept_once():
    trie = LexicalTrie(ENGLISH)
    trie.insert("word")
    trie.insert("word")
    assert trie.get_strings() == ["word"]
    # every insert call is counted
    assert len(trie) == 2


def test_insert_prefix():
    trie = LexicalTrie(ENGLISH)
    trie.insert_prefix("pre")
    assert trie.is_prefix("pre")
    assert not trie.find("pre")
    assert trie.get_strings() == []
    assert len(trie) == 1

    trie.insert("pre")
    assert trie.find("pre")
    assert trie.get_strings() == ["pre"]


def test_prefix_insert_under_longer_word():
    trie = LexicalTrie()
    trie.insert("prefix")
    trie.insert_prefix("pref")
    assert trie.is_prefix("pref")
    assert not trie.find("pref")
    assert trie.get_strings() == ["prefix"]


def test_character_not_in_alphabet():
    trie = LexicalTrie("abc")
    trie.insert("abc")
    with pytest.raises(CharacterNotInAlphabetError) as excinfo:
        trie.insert("abd")
    assert excinfo.value.char == "d"
    assert excinfo.value.word == "abd"
    assert "'d'" in str(excinfo.value)
    # nothing was written for the rejected word
    assert not trie.is_prefix("abd")
    assert trie.get_strings() == ["abc"]
    assert len(trie) == 1
    assert not trie.find("xyz", full_word=False)


def test_ordered_nodes_are_preseeded():
    node = TrieNode("cab")
    assert list(node.children) == ["c", "a", "b"]
    assert all(child is None for child in node.children.values())
    assert TrieNode().children == {}


def test_ordering_is_fixed():
    trie = LexicalTrie("ba")
    with pytest.raises(AttributeError):
        trie.ordering = "ab"
    trie.insert("ab")
    trie.insert("b")
    assert list(trie.root.children) == ["b", "a"]
    assert list(trie) == ["b", "ab"]


def test_round_trip():
    words = {"kiwi", "kiln", "kin", "a", "zebra", "zeal", "mango", "man", "m"}
    trie = LexicalTrie(ENGLISH)
    for w in words:
        trie.insert(w)
    result = trie.get_strings()
    assert len(result) == len(words)
    assert set(result) == words
    # with the usual alphabet the trie agrees with sorted()
    assert result == sorted(words)


def test_non_latin_alphabet():
    trie = LexicalTrie("αβγ")
    for w in ["γα", "β", "αγ", "αβ"]:
        trie.insert(w)
    assert trie.get_strings() == ["αβ", "αγ", "β", "γα"]


def test_prefix_insert_clears_full_word():
    trie = LexicalTrie(ENGLISH)
    trie.insert("pre")
    trie.insert_prefix("pre")
    assert not trie.find("pre")
    assert trie.is_prefix("pre")
    assert trie.get_strings() == []
    assert len(trie) == 2


def test_very_long_word():
    word = "ab" * 2500
    trie = LexicalTrie("ab")
    trie.insert(word)
    trie.insert("b")
    trie.insert(word[:3])
    assert trie.find(word)
    assert trie.get_strings() == [word[:3], word, "b"]
