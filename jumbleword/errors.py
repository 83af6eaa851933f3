class JumbleError(Exception):
    """
    Base class for every error raised by the puzzle engine.
    """


class ValidationError(JumbleError, ValueError):
    """
    Invalid arguments for building a game round.
    """


class WordNotFoundError(JumbleError, LookupError):
    pass


class DictionaryLoadError(JumbleError, OSError):
    """
    The word list could not be read. The engine cannot run without it.
    """
