"""Reversible conversion between bytes and memorable word passphrases."""

from .codec import (
    PassphraseIterator,
    bytes_to_passphrase,
    iter_passphrase,
    passphrase_to_bytes,
    render_passphrase,
    rendered_length,
)
from .config import PassphraseConfig, load_config, save_config
from .errors import (
    InvalidSizeError,
    NicephraseError,
    RandomSourceError,
    TooManyWordsError,
    UnknownWordError,
)
from .generator import MAX_PASSPHRASE_WORDS, generate_passphrase
from .wordlist import ALL_WORDS, MAX_WORD_LEN

__all__ = [
    "ALL_WORDS",
    "MAX_PASSPHRASE_WORDS",
    "MAX_WORD_LEN",
    "InvalidSizeError",
    "NicephraseError",
    "PassphraseConfig",
    "PassphraseIterator",
    "RandomSourceError",
    "TooManyWordsError",
    "UnknownWordError",
    "bytes_to_passphrase",
    "generate_passphrase",
    "iter_passphrase",
    "load_config",
    "passphrase_to_bytes",
    "render_passphrase",
    "rendered_length",
    "save_config",
]

__version__ = "0.1.0"
