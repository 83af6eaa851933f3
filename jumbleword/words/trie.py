from typing import Iterator


class TrieNode:
    __slots__ = ("children", "words")

    def __init__(self):
        self.children: dict[str, "TrieNode"] = {}
        # Display forms of the dictionary entries ending here (empty if not a word)
        self.words: list[str] = []

    @property
    def is_word(self) -> bool:
        return bool(self.words)

    def __repr__(self):
        return f"<TrieNode {''.join(self.children)} ({len(self.words)} words)>"


class LetterTrie:
    """
    Prefix tree over lowercase keys.

    Each terminal node keeps the original tokens that normalize to its key, so
    lookups match case-insensitively but surface words the way the word list
    spells them.
    """

    def __init__(self):
        self.root = TrieNode()

    def insert(self, key: str, display: str):
        node = self.root
        for ch in key:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if display not in node.words:
            node.words.append(display)

    def find(self, key: str) -> TrieNode | None:
        """Return the node reached by consuming key, or None if no such path."""
        node = self.root
        for ch in key:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def iter_words(self, node: TrieNode) -> Iterator[str]:
        # Explicit stack: word length must not be limited by recursion depth
        stack = [node]
        while stack:
            current = stack.pop()
            yield from current.words
            stack.extend(current.children.values())
