import logging
import random
from jumbleword.errors import WordNotFoundError
from jumbleword.game.models import EngineConfig, GameState
from jumbleword.game.rules import validate_game_parameters
from jumbleword.game.scrambler import Scrambler
from jumbleword.words.bank import WordStore
from jumbleword.words.palindromes import all_palindromes
from jumbleword.words.subwords import SubwordGenerator

logger = logging.getLogger(__name__)


class GameStateFactory:
    """
    Builds puzzle rounds from the word store.
    """

    def __init__(
        self,
        store: WordStore,
        scrambler: Scrambler,
        subwords: SubwordGenerator,
        config: EngineConfig | None = None,
        rng: random.Random | None = None
    ):
        self.store = store
        self.scrambler = scrambler
        self.subwords = subwords
        self.config = config or EngineConfig()
        # Word picks and shuffles draw from the same source
        self.rng = rng or scrambler.rng

    def create_game_state(self, length: int | None, min_length: int | None = None) -> GameState:
        length, min_length = validate_game_parameters(
            length,
            min_length,
            default_min_length=self.config.default_min_length,
            min_game_length=self.config.min_game_length
        )

        original = self.store.random_word(length, rng=self.rng)
        if original is None:
            raise WordNotFoundError(f"Cannot find valid word of length {length} to create game state")

        scrambled = self.scrambler.scramble(original)
        sub_words = {w: False for w in sorted(self.subwords.generate(original, min_length))}
        logger.debug(
            "New round: %r scrambled to %r with %s sub-words", original, scrambled, len(sub_words)
        )
        return GameState(original=original, scrambled=scrambled, sub_words=sub_words)


class JumbleEngine:
    """
    Entry point for callers: every puzzle operation over one loaded word list.

    The word store is immutable once built, so one engine can serve many
    readers. Word picks and shuffles draw from the engine's own random
    source, so threads querying concurrently should each own an engine.
    """

    def __init__(self, store: WordStore, config: EngineConfig | None = None, rng: random.Random | None = None):
        self.config = config or EngineConfig()
        self.store = store
        self.rng = rng or store.rng
        self.scrambler = Scrambler(self.rng)
        self.subwords = SubwordGenerator(
            store,
            default_min_length=self.config.default_min_length,
            max_word_length=self.config.max_word_length
        )
        self.factory = GameStateFactory(store, self.scrambler, self.subwords, self.config, rng=self.rng)
        self._palindromes: frozenset[str] | None = None

    @classmethod
    def from_config(cls, config: EngineConfig) -> "JumbleEngine":
        rng = random.Random(config.seed)
        store = WordStore.from_file(config.dictionary_path, rng=rng)
        return cls(store, config=config, rng=rng)

    def scramble(self, word: str | None) -> str | None:
        return self.scrambler.scramble(word)

    def retrieve_palindrome_words(self) -> set[str]:
        if self._palindromes is None:
            self._palindromes = frozenset(all_palindromes(self.store))
        return set(self._palindromes)

    def pick_one_random_word(self, length: int | None = None) -> str | None:
        return self.store.random_word(length, rng=self.rng)

    def exists(self, word: str | None) -> bool:
        return self.store.exists(word)

    def words_matching_prefix(self, prefix: str | None) -> set[str]:
        return self.store.words_with_prefix(prefix)

    def search_words(
        self,
        start_char: str | None = None,
        end_char: str | None = None,
        length: int | None = None
    ) -> set[str]:
        return self.store.search(start_char, end_char, length)

    def generate_sub_words(self, word: str | None, min_length: int | None = None) -> set[str]:
        return self.subwords.generate(word, min_length)

    def create_game_state(self, length: int | None, min_length: int | None = None) -> GameState:
        return self.factory.create_game_state(length, min_length)
