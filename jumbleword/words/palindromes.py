from jumbleword.words.bank import WordStore


def is_palindrome(word: str) -> bool:
    key = word.lower()
    return len(key) > 1 and key == key[::-1]


def all_palindromes(store: WordStore) -> set[str]:
    """
    Every word of the store that reads the same backwards, ignoring case.
    Single letters do not count.
    """
    return {word for word in store if is_palindrome(word)}
