from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field


class EngineConfig(BaseModel):
    dictionary_path: Path = Path("data/words.txt")
    default_min_length: int = Field(default=3, gt=0)
    max_word_length: int = Field(default=32, gt=0)  # Cap on sub-word expansion
    min_game_length: int = Field(default=3, gt=0)
    seed: int | None = None                         # Seeds the engine's RNG when set


class GameState(BaseModel):
    """
    One puzzle round: the hidden word, its scrambled letters and every
    sub-word still to be found.

    The words are fixed at creation. Only the guessed flags change as
    players play.
    """
    model_config = ConfigDict(populate_by_name=True)

    original: str = Field(frozen=True)
    scrambled: str = Field(frozen=True)
    sub_words: dict[str, bool] = Field(default_factory=dict, alias="subWords")

    def guess(self, word: str) -> bool:
        """
        Marks word as found. True only for a sub-word that was not found yet.
        """
        if not word:
            return False
        key = word.strip().lower()
        for sub_word, guessed in self.sub_words.items():
            if not guessed and sub_word.lower() == key:
                self.sub_words[sub_word] = True
                return True
        return False

    @property
    def remaining(self) -> list[str]:
        return [w for w, guessed in self.sub_words.items() if not guessed]

    @property
    def found(self) -> list[str]:
        return [w for w, guessed in self.sub_words.items() if guessed]

    @property
    def is_complete(self) -> bool:
        return all(self.sub_words.values())
