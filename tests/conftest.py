import random
from pathlib import Path
import pytest
from jumbleword.game.engine import JumbleEngine
from jumbleword.game.models import EngineConfig
from jumbleword.words.bank import WordStore

WORDS_FILE = Path(__file__).parent / "data" / "words.txt"


@pytest.fixture
def raw_words() -> list[str]:
    """The fixture word list as written, trimmed and without repeats."""
    words = []
    for line in WORDS_FILE.read_text(encoding="utf-8").splitlines():
        word = line.strip()
        if word and word not in words:
            words.append(word)
    return words


@pytest.fixture
def store() -> WordStore:
    return WordStore.from_file(WORDS_FILE, rng=random.Random(1234))


@pytest.fixture
def engine() -> JumbleEngine:
    return JumbleEngine.from_config(EngineConfig(dictionary_path=WORDS_FILE, seed=1234))
