"""The 2^16 word dictionary.

Derived from the niceware word list (MIT), which in turn comes from the SIL
English word list compiled for the Yahoo End-to-End project. Entries are
lowercase ASCII, unique, and sorted by code point, so the index of a word is
its position in the tuple.
"""

import bisect
import logging
from importlib import resources
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

WORD_COUNT = 65536
MAX_WORD_LEN = 28


def _load_words() -> Tuple[str, ...]:
    path = resources.files(__package__).joinpath("data").joinpath("wordlist.txt")
    text = path.read_text(encoding="ascii")
    words = tuple(text.split())
    if len(words) != WORD_COUNT:
        raise RuntimeError(
            f"word list has {len(words)} entries, expected {WORD_COUNT}"
        )
    logger.debug("Loaded %d words", len(words))
    return words


ALL_WORDS: Tuple[str, ...] = _load_words()


def word_at(index: int) -> str:
    if not 0 <= index < WORD_COUNT:
        raise IndexError(f"word index {index} out of range 0..{WORD_COUNT - 1}")
    return ALL_WORDS[index]


def index_of(word: str) -> Optional[int]:
    """Return the dictionary index of ``word``, ignoring ASCII case.

    Returns None when the word is not in the dictionary.
    """
    # Nothing longer than the longest entry can match
    if len(word) > MAX_WORD_LEN:
        return None
    lowered = _ascii_lower(word)
    index = bisect.bisect_left(ALL_WORDS, lowered)
    if index < WORD_COUNT and ALL_WORDS[index] == lowered:
        return index
    return None


def _ascii_lower(word: str) -> str:
    # str.lower() would fold non-ASCII letters too, e.g. "K" (Kelvin sign) -> "k"
    if word.isascii():
        return word.lower()
    return "".join(c.lower() if c.isascii() else c for c in word)


def check_wordlist(words: Sequence[str]) -> None:
    if len(words) != WORD_COUNT:
        raise ValueError(f"expected {WORD_COUNT} words, got {len(words)}")
    longest = 0
    previous = None
    for index, word in enumerate(words):
        if not word.isascii():
            raise ValueError(f"word {index} is not ASCII: {word!r}")
        if previous is not None and word <= previous:
            raise ValueError(
                f"word {index} ({word!r}) is not sorted after {previous!r}"
            )
        longest = max(longest, len(word))
        previous = word
    if longest != MAX_WORD_LEN:
        raise ValueError(
            f"longest word has {longest} characters, MAX_WORD_LEN is {MAX_WORD_LEN}"
        )


__all__ = [
    "ALL_WORDS",
    "MAX_WORD_LEN",
    "WORD_COUNT",
    "check_wordlist",
    "index_of",
    "word_at",
]
