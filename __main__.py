"""CLI shim for running nicephrase directly from the repository checkout."""

from nicephrase.cli import main
from nicephrase.codec import (
    bytes_to_passphrase,
    iter_passphrase,
    passphrase_to_bytes,
    render_passphrase,
)
from nicephrase.generator import generate_passphrase

__all__ = [
    "bytes_to_passphrase",
    "generate_passphrase",
    "iter_passphrase",
    "main",
    "passphrase_to_bytes",
    "render_passphrase",
]


if __name__ == "__main__":
    main()
