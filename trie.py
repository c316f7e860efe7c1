"""
trie.py

A trie that hands its words back in a user-defined lexicographic ordering.

The ordering is a permutation of an alphabet, e.g. "zyxwvutsrqponmlkjihgfedcba".
Every node created by an ordered trie starts with one empty slot per alphabet
character, laid out in ordering order, so walking the children of a node
always visits them in that order no matter how the words were inserted.
Without an ordering, children are visited in the order they were first added.
"""

from typing import Optional


class InvalidInputError(ValueError):
    """Raised when an empty or missing word is inserted."""


class CharacterNotInAlphabetError(KeyError):
    """Raised when a word uses a character the trie's ordering does not have."""

    def __init__(self, char, word):
        super().__init__(char)
        self.char = char
        self.word = word

    def __str__(self):
        return f"character {self.char!r} in {self.word!r} is not in the alphabet"


class TrieNode:
    def __init__(self, ordering=None):
        # children: dict mapping single char → TrieNode (or None for an unused alphabet slot)
        self.children = dict.fromkeys(ordering) if ordering is not None else {}
        # terminal: True if the path from root down to here spells a stored word
        self.terminal = False

    def __repr__(self):
        used = [ch for ch, child in self.children.items() if child is not None]
        return f"TrieNode(terminal={self.terminal}, children={used})"

    def child(self, ch):
        return self.children.get(ch)


class LexicalTrie:
    def __init__(self, ordering: Optional[str] = None):
        # The ordering is assumed to be free of duplicates; callers check that.
        self._ordering = ordering
        self.root = None
        self.num_words = 0

    @property
    def ordering(self):
        return self._ordering

    def __len__(self):
        # Counts insert calls, including prefix-only and repeated inserts.
        return self.num_words

    def __contains__(self, word):
        return self.find(word, full_word=True)

    def __iter__(self):
        return iter(self.get_strings())

    def _new_node(self):
        return TrieNode(self._ordering)

    def insert(self, word: str):
        """Insert `word` as a full word."""
        self._insert(word, as_prefix=False)

    def insert_prefix(self, word: str):
        """Insert `word` as a prefix only; it will not show up in get_strings()."""
        self._insert(word, as_prefix=True)

    def _insert(self, word, as_prefix):
        if not word:
            raise InvalidInputError("Cannot add None or empty string to trie.")
        if self._ordering is not None:
            for ch in word:
                if ch not in self._ordering:
                    raise CharacterNotInAlphabetError(ch, word)

        if self.root is None:
            self.root = self._new_node()
        node = self.root
        for ch in word:
            nxt = node.child(ch)
            if nxt is None:
                nxt = self._new_node()
                node.children[ch] = nxt
            node = nxt

        node.terminal = not as_prefix
        self.num_words += 1

    def find(self, word: str, full_word: bool = True) -> bool:
        """
        Return True if `word` is in the trie.

        With full_word=True only words inserted via insert() count; with
        full_word=False any path through the trie (a prefix of a stored word,
        or a prefix-only insertion) counts as well.
        """
        if not word:
            return False
        node = self.root
        for ch in word:
            if node is None:
                return False
            node = node.child(ch)
        if node is None:
            return False
        return node.terminal if full_word else True

    def is_prefix(self, word: str) -> bool:
        return self.find(word, full_word=False)

    def get_strings(self) -> list:
        """
        Return every stored full word, walking the trie depth first.

        A word is emitted as soon as its last node is reached from the parent,
        before any of its longer continuations.
        """
        result = []
        if self.root is None or self.num_words == 0:
            return result
        prefix = []
        # one children iterator per level; prefix[i] is the char that led to stack[i + 1]
        stack = [iter(self.root.children.items())]
        while stack:
            for ch, child in stack[-1]:
                if child is None:
                    continue
                prefix.append(ch)
                if child.terminal:
                    result.append("".join(prefix))
                stack.append(iter(child.children.items()))
                break
            else:
                stack.pop()
                if prefix:
                    prefix.pop()
        return result
