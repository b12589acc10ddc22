"""
Key pair command line.

Generate key pairs, derive public keys, and produce or check signatures.

Usage::

    python -m near_keys generate
    python -m near_keys generate --curve ed25519
    python -m near_keys public-key ed25519:<secret>
    python -m near_keys sign ed25519:<secret> "message"
    python -m near_keys verify ed25519:<public> "message" <signature>

Messages are signed as their UTF-8 bytes. Signatures are printed and
read as Base58.

Exit codes:
    0  success (for `verify`: the signature is valid)
    1  `verify` only: the signature is invalid
    2  malformed key, signature or curve name
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import config
from .key_pair import KeyPair
from .public_key import PublicKey
from .serialize import base_decode, base_encode
from .types import KeyPairError

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """
    Diagnostic formatter for the command line.

    Key material and results go to stdout; this formatter only styles what
    is written to stderr. The level is colored, and a timestamp and the
    logger name are added when `show_details` is set (the `-v` mode).
    """

    DIM = "\x1b[2m"
    YELLOW = "\x1b[33m"
    RED = "\x1b[31m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: DIM,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: RED,
    }

    def __init__(self, show_details: bool = False, use_color: bool = True) -> None:
        super().__init__(datefmt="%H:%M:%S")
        self.show_details = show_details
        self.use_color = use_color

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{self.RESET}" if self.use_color and color else text

    def format(self, record: logging.LogRecord) -> str:
        level = self._paint(record.levelname.lower(), self.LEVEL_COLORS.get(record.levelno, ""))
        message = record.getMessage()
        if not self.show_details:
            return f"{level}: {message}"

        prefix = self._paint(f"{self.formatTime(record, self.datefmt)} {record.name}", self.DIM)
        return f"{prefix} {level}: {message}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Send package diagnostics to stderr; debug output only with `-v`."""
    level = logging.DEBUG if verbose else logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(show_details=verbose, use_color=not no_color))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def _generate(args: argparse.Namespace) -> int:
    key_pair = KeyPair.from_random(args.curve)
    print(f"secret_key: {key_pair}")
    print(f"public_key: {key_pair.get_public_key()}")
    return 0


def _public_key(args: argparse.Namespace) -> int:
    print(KeyPair.from_string(args.secret_key).get_public_key())
    return 0


def _sign(args: argparse.Namespace) -> int:
    signature = KeyPair.from_string(args.secret_key).sign(args.message.encode("utf-8"))
    print(base_encode(signature.signature))
    return 0


def _verify(args: argparse.Namespace) -> int:
    public_key = PublicKey.from_string(args.public_key)
    valid = public_key.verify(args.message.encode("utf-8"), base_decode(args.signature))
    print("valid" if valid else "invalid")
    return 0 if valid else 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="near_keys",
        description="Identity key pair tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="Generate a random key pair")
    generate.add_argument(
        "--curve",
        default=config.DEFAULT_CURVE,
        help=f"Curve name, case-insensitive (default: {config.DEFAULT_CURVE})",
    )
    generate.set_defaults(handler=_generate)

    public_key = commands.add_parser("public-key", help="Print the public key of a key pair")
    public_key.add_argument("secret_key", help="Encoded secret key (<curve>:<base58>)")
    public_key.set_defaults(handler=_public_key)

    sign = commands.add_parser("sign", help="Sign a UTF-8 message")
    sign.add_argument("secret_key", help="Encoded secret key (<curve>:<base58>)")
    sign.add_argument("message", help="Message to sign")
    sign.set_defaults(handler=_sign)

    verify = commands.add_parser("verify", help="Verify a Base58 signature")
    verify.add_argument("public_key", help="Encoded public key (<curve>:<base58>)")
    verify.add_argument("message", help="Message that was signed")
    verify.add_argument("signature", help="Base58 signature")
    verify.set_defaults(handler=_verify)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    try:
        return args.handler(args)
    except KeyPairError as e:
        logger.error("%s", e.message)
        return 2


if __name__ == "__main__":
    sys.exit(main())
