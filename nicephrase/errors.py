class NicephraseError(Exception):
    """Base class for every error raised by nicephrase."""


class InvalidSizeError(NicephraseError, ValueError):
    """Raised when a byte buffer of odd length is encoded."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"odd size not supported: {size}")


class UnknownWordError(NicephraseError, ValueError):
    """Raised when a token does not match any dictionary word.

    ``word`` holds the token exactly as the caller passed it.
    """

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"unknown word: {word}")


class TooManyWordsError(NicephraseError, ValueError):
    def __init__(self, num_words: int, max_words: int):
        self.num_words = num_words
        self.max_words = max_words
        super().__init__(
            f"number of words {num_words} cannot be greater than {max_words}"
        )


class RandomSourceError(NicephraseError):
    """Raised when the random source cannot supply the requested entropy."""

    def __init__(self, cause: object):
        self.cause = cause
        super().__init__(f"failed to generate entropy for passphrase: {cause}")


__all__ = [
    "InvalidSizeError",
    "NicephraseError",
    "RandomSourceError",
    "TooManyWordsError",
    "UnknownWordError",
]
