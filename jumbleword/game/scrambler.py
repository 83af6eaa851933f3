import random


class Scrambler:
    """
    Shuffles the letters of a word, never handing back the input unchanged
    when another arrangement exists.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    @staticmethod
    def can_rearrange(word: str | None) -> bool:
        # Only a word with at least two distinct characters has a second arrangement
        return word is not None and len(set(word)) > 1

    def scramble(self, word: str | None) -> str | None:
        if word is None or len(word) <= 1 or not self.can_rearrange(word):
            return word
        letters = list(word)
        while True:
            self.rng.shuffle(letters)
            scrambled = "".join(letters)
            if scrambled != word:
                return scrambled
