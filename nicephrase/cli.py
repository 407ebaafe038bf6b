import argparse
import logging
import sys
from typing import List, Optional

from .codec import bytes_to_passphrase, passphrase_to_bytes, render_passphrase
from .config import PassphraseConfig, load_config
from .errors import NicephraseError
from .generator import generate_passphrase

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _read_bytes(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _write_bytes(path: str, data: bytes) -> None:
    if path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        with open(path, "wb") as f:
            f.write(data)


def _write_text(path: str, text: str) -> None:
    if path == "-":
        sys.stdout.write(text)
        sys.stdout.flush()
    else:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nicephrase",
        description="Convert bytes to memorable word passphrases and back",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    enc = subparsers.add_parser("encode", help="Encode bytes as words")
    enc.add_argument("--input-bytes", required=True, help="Input file, or - for stdin")
    enc.add_argument("--output-text", required=True, help="Output file, or - for stdout")
    enc.add_argument(
        "--hex", action="store_true", help="Read the input as hex text instead of raw bytes"
    )
    enc.add_argument("--separator", default=" ")

    dec = subparsers.add_parser("decode", help="Decode words back to bytes")
    dec.add_argument("--input-text", required=True, help="Input file, or - for stdin")
    dec.add_argument("--output-bytes", required=True, help="Output file, or - for stdout")
    dec.add_argument(
        "--hex", action="store_true", help="Write hex text instead of raw bytes"
    )

    gen = subparsers.add_parser("generate", help="Generate random passphrases")
    gen.add_argument(
        "-w", "--words", type=int, default=None, help="Number of words per passphrase"
    )
    gen.add_argument(
        "-c", "--count", type=int, default=None, help="Number of passphrases"
    )
    gen.add_argument("--separator", default=None)
    gen.add_argument(
        "--config",
        help="JSON config file with num_words, separator and count defaults",
    )

    return parser


def run_encode(args) -> None:
    payload = _read_bytes(args.input_bytes)
    if args.hex:
        payload = bytes.fromhex(payload.decode("ascii").strip())
    words = bytes_to_passphrase(payload)
    logger.info("Encoded %d bytes as %d words", len(payload), len(words))
    _write_text(args.output_text, render_passphrase(words, args.separator) + "\n")


def run_decode(args) -> None:
    text = _read_text(args.input_text)
    data = passphrase_to_bytes(text.split())
    logger.info("Decoded %d bytes", len(data))
    if args.hex:
        _write_text(args.output_bytes, data.hex() + "\n")
    else:
        _write_bytes(args.output_bytes, data)


def run_generate(args) -> None:
    config = load_config(args.config) if args.config else PassphraseConfig()
    num_words = args.words if args.words is not None else config.num_words
    count = args.count if args.count is not None else config.count
    separator = args.separator if args.separator is not None else config.separator
    if count < 1:
        raise ValueError("count must be >= 1")

    for _ in range(count):
        words = generate_passphrase(num_words)
        print(render_passphrase(words, separator))


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        if args.command == "encode":
            run_encode(args)
        elif args.command == "decode":
            run_decode(args)
        elif args.command == "generate":
            run_generate(args)
        else:
            parser.error("Unknown command")
    except (NicephraseError, ValueError) as exc:
        parser.error(str(exc))


__all__ = ["build_arg_parser", "run_encode", "run_decode", "run_generate", "main"]
