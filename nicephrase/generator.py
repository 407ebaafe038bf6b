import logging
import os
from typing import Callable, List

from .codec import bytes_to_passphrase
from .errors import RandomSourceError, TooManyWordsError

logger = logging.getLogger(__name__)

MAX_PASSPHRASE_WORDS = 512

RandomSource = Callable[[int], bytes]


def generate_passphrase(
    num_words: int, random_source: RandomSource = os.urandom
) -> List[str]:
    """Generate a random passphrase of ``num_words`` words.

    Each word carries 16 bits of entropy, so 8 words give a 128-bit
    passphrase. ``random_source`` is called once with the number of bytes
    needed and must return exactly that many bytes; the default is the
    operating system CSPRNG.

    Raises:
        TooManyWordsError: ``num_words`` exceeds MAX_PASSPHRASE_WORDS.
        RandomSourceError: the random source failed or returned short.
    """
    if not isinstance(num_words, int) or isinstance(num_words, bool):
        raise TypeError(
            f"number of words must be an int, got {type(num_words).__name__}"
        )
    if num_words < 0:
        raise ValueError(f"number of words must be >= 0, got {num_words}")
    if num_words > MAX_PASSPHRASE_WORDS:
        raise TooManyWordsError(num_words, MAX_PASSPHRASE_WORDS)

    size = 2 * num_words
    logger.debug("Requesting %d random bytes for %d words", size, num_words)
    try:
        data = random_source(size)
    except Exception as exc:
        raise RandomSourceError(exc) from exc
    if len(data) != size:
        raise RandomSourceError(f"expected {size} bytes, got {len(data)}")

    return bytes_to_passphrase(data)


__all__ = ["MAX_PASSPHRASE_WORDS", "RandomSource", "generate_passphrase"]
