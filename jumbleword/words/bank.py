import logging
import random
import re
from pathlib import Path
from typing import Iterable
from jumbleword.errors import DictionaryLoadError
from jumbleword.words.trie import LetterTrie

logger = logging.getLogger(__name__)

_LETTERS = re.compile(r"[A-Za-z]+")
_ALPHABET = frozenset("abcdefghijklmnopqrstuvwxyz")


def is_letters(text: str | None) -> bool:
    """True for a non-empty string made only of the letters a-z (any case)."""
    return bool(text) and _LETTERS.fullmatch(text) is not None


class WordStore:
    """
    Holds the word list and the indices used to answer lookups.

    Built once from a provider of word strings and read-only afterwards.
    Matching is case-insensitive; results keep the casing of the word list.
    """

    def __init__(self, words: Iterable[str], rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self._entries: list[str] = []
        # lowercase key -> display forms
        self._display: dict[str, list[str]] = {}
        self._by_length: dict[int, list[str]] = {}
        self._by_start: dict[str, set[str]] = {}
        self._by_end: dict[str, set[str]] = {}
        self._trie = LetterTrie()

        # Single pass over the source populates every index
        for line in words:
            token = line.strip()
            if not token:
                continue
            key = token.lower()
            forms = self._display.setdefault(key, [])
            if token in forms:
                continue
            forms.append(token)
            self._entries.append(token)
            self._by_length.setdefault(len(token), []).append(token)
            self._by_start.setdefault(key[0], set()).add(token)
            self._by_end.setdefault(key[-1], set()).add(token)
            self._trie.insert(key, token)

    @classmethod
    def from_file(cls, filepath: str | Path, rng: random.Random | None = None) -> "WordStore":
        path = Path(filepath)
        try:
            with open(path, "r", encoding="utf-8") as f:
                store = cls(f, rng=rng)
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryLoadError(f"Cannot read word list {path}: {e}") from e
        if not len(store):
            raise DictionaryLoadError(f"Word list {path} contains no words")
        logger.info("Loaded %s words from %s", len(store), path)
        return store

    @classmethod
    def from_lines(cls, text: str, rng: random.Random | None = None) -> "WordStore":
        return cls(text.splitlines(), rng=rng)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    @property
    def trie(self) -> LetterTrie:
        return self._trie

    def exists(self, word: str | None) -> bool:
        if not word:
            return False
        return word.lower() in self._display

    def display_forms(self, key: str) -> list[str]:
        """Word list spellings of a lowercase key (empty if not a word)."""
        return list(self._display.get(key, ()))

    def words_with_prefix(self, prefix: str | None) -> set[str]:
        if not prefix or not prefix.strip() or not is_letters(prefix):
            return set()
        node = self._trie.find(prefix.lower())
        if node is None:
            return set()
        return set(self._trie.iter_words(node))

    def search(
        self,
        start_char: str | None = None,
        end_char: str | None = None,
        length: int | None = None
    ) -> set[str]:
        """
        Words matching every supplied criterion.

        Refuses an unconstrained scan: with no criteria the result is empty.
        Characters outside a-z and non-positive lengths match nothing.
        """
        if start_char is None and end_char is None and length is None:
            return set()

        candidates = []
        if start_char is not None:
            candidates.append(self._char_bucket(self._by_start, start_char))
        if end_char is not None:
            candidates.append(self._char_bucket(self._by_end, end_char))
        if length is not None:
            candidates.append(set(self._by_length.get(length, ())) if length > 0 else set())

        # Intersect starting from the smallest bucket
        candidates.sort(key=len)
        result = set(candidates[0])
        for bucket in candidates[1:]:
            if not result:
                break
            result &= bucket
        return result

    def random_word(self, length: int | None = None, rng: random.Random | None = None) -> str | None:
        """Uniform pick from the words of length, or from every word. Uses rng when given."""
        if length is None:
            pool = self._entries
        else:
            pool = self._by_length.get(length, [])
        if not pool:
            return None
        return (rng or self.rng).choice(pool)

    @staticmethod
    def _char_bucket(index: dict[str, set[str]], ch: str) -> set[str]:
        if not isinstance(ch, str) or len(ch) != 1:
            return set()
        ch = ch.lower()
        if ch not in _ALPHABET:
            return set()
        return index.get(ch, set())
