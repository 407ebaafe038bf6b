import logging
from typing import Iterable, List, Optional, Sequence, Union

from .errors import InvalidSizeError, UnknownWordError
from .wordlist import ALL_WORDS, index_of

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview, Sequence[int]]


def _as_byte_view(data: BytesLike) -> Union[bytes, memoryview]:
    # Buffers are viewed in place; anything else (e.g. a list of ints) is copied once
    try:
        view = memoryview(data)
    except TypeError:
        return bytes(iter(data))
    return view.cast("B")


def _check_even(view: Union[bytes, memoryview]) -> None:
    if len(view) % 2 != 0:
        raise InvalidSizeError(len(view))


class PassphraseIterator:
    """Lazy word sequence over a byte buffer.

    Words are looked up only as they are requested. ``len()`` and
    ``operator.length_hint`` give the number of words still to come, and
    ``reversed()`` walks the remaining words from the back. The buffer is
    read in place, so it should not be modified while iterating.
    """

    def __init__(
        self,
        view: Union[bytes, memoryview],
        front: int = 0,
        back: Optional[int] = None,
        reverse: bool = False,
    ):
        self._view = view
        # Pair indices; the remaining words are pairs front..back-1
        self._front = front
        self._back = len(view) // 2 if back is None else back
        self._reverse = reverse

    def __iter__(self) -> "PassphraseIterator":
        return self

    def __next__(self) -> str:
        if self._front >= self._back:
            raise StopIteration
        if self._reverse:
            self._back -= 1
            pair = self._back
        else:
            pair = self._front
            self._front += 1
        offset = 2 * pair
        return ALL_WORDS[self._view[offset] << 8 | self._view[offset + 1]]

    def __len__(self) -> int:
        return self._back - self._front

    def __length_hint__(self) -> int:
        return self._back - self._front

    def __reversed__(self) -> "PassphraseIterator":
        return PassphraseIterator(
            self._view, self._front, self._back, reverse=not self._reverse
        )

    def join(self, separator: str = " ") -> str:
        """Consume the remaining words and render them with ``separator``."""
        return render_passphrase(self, separator)


def iter_passphrase(data: BytesLike) -> PassphraseIterator:
    """Lazily encode ``data`` as words.

    The length check happens here, not on first iteration.
    """
    view = _as_byte_view(data)
    _check_even(view)
    return PassphraseIterator(view)


def bytes_to_passphrase(data: BytesLike) -> List[str]:
    """Encode an even-length byte buffer as a list of words.

    Each big-endian pair of bytes selects one dictionary word, so the result
    has ``len(data) // 2`` words.

    Raises:
        InvalidSizeError: ``data`` has an odd number of bytes.
    """
    view = _as_byte_view(data)
    _check_even(view)
    logger.debug("Encoding %d bytes", len(view))
    return [
        ALL_WORDS[view[offset] << 8 | view[offset + 1]]
        for offset in range(0, len(view), 2)
    ]


def passphrase_to_bytes(words: Union[str, Iterable[str]]) -> bytes:
    """Decode words back into the bytes that produced them.

    ``words`` may be a sequence of tokens or a single whitespace separated
    string. Matching ignores ASCII case.

    Raises:
        UnknownWordError: on the first token that is not a dictionary word.
            No partial result is returned.
    """
    if isinstance(words, str):
        words = words.split()
    data = bytearray()
    for word in words:
        index = index_of(word)
        if index is None:
            raise UnknownWordError(word)
        data += index.to_bytes(2, byteorder="big")
    logger.debug("Decoded %d words", len(data) // 2)
    return bytes(data)


def rendered_length(words: Sequence[str], separator: str = " ") -> int:
    """Length of ``render_passphrase(words, separator)`` without building it.

    Lets callers size output buffers or check display widths up front.
    """
    if not words:
        return 0
    return sum(len(word) for word in words) + len(separator) * (len(words) - 1)


def render_passphrase(words: Iterable[str], separator: str = " ") -> str:
    return separator.join(words)


__all__ = [
    "PassphraseIterator",
    "bytes_to_passphrase",
    "iter_passphrase",
    "passphrase_to_bytes",
    "render_passphrase",
    "rendered_length",
]
