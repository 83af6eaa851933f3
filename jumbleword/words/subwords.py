import logging
from collections import Counter
from jumbleword.words.bank import WordStore, is_letters
from jumbleword.words.trie import TrieNode

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 3
MAX_WORD_LENGTH = 32


class SubwordGenerator:
    """
    Finds the dictionary words that can be spelled with the letters of a word.

    A sub-word uses each letter of the source at most as many times as it
    appears there, in any order. The search walks the store's trie with the
    remaining letter counts, so a branch is dropped as soon as it stops being
    the prefix of some dictionary word. Depth never exceeds the source length.
    """

    def __init__(
        self,
        store: WordStore,
        default_min_length: int = DEFAULT_MIN_LENGTH,
        max_word_length: int = MAX_WORD_LENGTH
    ):
        self.store = store
        self.default_min_length = default_min_length
        self.max_word_length = max_word_length

    def exists(self, word: str | None) -> bool:
        return self.store.exists(word)

    def generate(self, word: str | None, min_length: int | None = None) -> set[str]:
        if min_length is None:
            min_length = self.default_min_length
        elif min_length <= 0:
            return set()
        if not word or not word.strip() or len(word) < min_length or not is_letters(word):
            return set()
        if len(word) > self.max_word_length:
            logger.warning(
                "Refusing to expand %r: longer than %s letters", word, self.max_word_length
            )
            return set()

        source = word.lower()
        keys: set[str] = set()
        self._walk(self.store.trie.root, [], Counter(source), min_length, keys)
        keys.discard(source)

        found = set()
        for key in keys:
            found.update(self.store.display_forms(key))
        logger.debug("Found %s sub-words in %r", len(found), word)
        return found

    def _walk(self, node: TrieNode, path: list[str], budget: Counter, min_length: int, keys: set[str]):
        if node.is_word and len(path) >= min_length:
            keys.add("".join(path))
        for ch, left in budget.items():
            if not left:
                continue
            child = node.children.get(ch)
            if child is None:
                continue
            budget[ch] -= 1
            path.append(ch)
            self._walk(child, path, budget, min_length, keys)
            path.pop()
            budget[ch] += 1
