"""Command-line interface for deriving seed bytes and keys."""

import argparse
import base64
import logging

import seedgen

from .constants import DEFAULT_LENGTH, DEFAULT_SEED, MAX_HASH_WORDS, MAX_LENGTH
from .core import Xmur3, random_bytes
from .keys import public_key_hex


def _format_bytes(data: bytes, fmt: str) -> str:
    if fmt == "base64":
        return base64.b64encode(data).decode()
    if fmt == "list":
        return " ".join(str(b) for b in data)
    return data.hex()


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and print derived bytes, hash words or a public key.

    Args:
        argv: Optional list of command-line arguments.

    Returns:
        int: ``0`` on success.
    """

    parser = argparse.ArgumentParser(prog="seedgen")
    parser.add_argument("--version", action="version", version=seedgen.__version__)
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="cmd", required=True)

    b = sub.add_parser("bytes")
    b.add_argument("seed", nargs="?", default=DEFAULT_SEED)
    b.add_argument("--length", type=int, default=DEFAULT_LENGTH)
    b.add_argument("--format", choices=["hex", "base64", "list"], default="hex")

    h = sub.add_parser("hash")
    h.add_argument("seed", nargs="?", default=DEFAULT_SEED)
    h.add_argument("--count", type=int, default=4)

    p = sub.add_parser("pubkey")
    p.add_argument("seed", nargs="?", default=DEFAULT_SEED)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.cmd == "bytes":
        if not (0 <= args.length <= MAX_LENGTH):
            parser.error(f"--length must be between 0 and {MAX_LENGTH}")
        print(_format_bytes(random_bytes(args.length, args.seed), args.format))
    elif args.cmd == "hash":
        if not (1 <= args.count <= MAX_HASH_WORDS):
            parser.error(f"--count must be between 1 and {MAX_HASH_WORDS}")
        hash_ = Xmur3(args.seed)
        for _ in range(args.count):
            print(hash_())
    else:
        print(public_key_hex(args.seed))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
