#!/usr/bin/env python3
"""
Generate an ES256 token from a P-256 private key.

Usage:
    esjwt path/to/AuthKey.p8 KEY_ID ISSUER_ID              # 5-month token
    esjwt --months 1 path/to/AuthKey.p8 KEY_ID ISSUER_ID   # 1-month token
    esjwt --verbose path/to/AuthKey.p8 KEY_ID ISSUER_ID    # debug logging

Prints the signed token to stdout.
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from esjwt.core.settings import MintSettings
from esjwt.crypto.errors import TokenMintError
from esjwt.crypto.minter import mint_token

__version__ = "1.0.0"

INVALID_SECRET_PATH = "'<secret-path>' must point to a valid file."


def _read_secret(parser: argparse.ArgumentParser, secret_path: str) -> str:
    """Read the key file, exiting with a usage error if it is unreadable."""
    path = Path(secret_path)
    if not path.is_file():
        parser.error(INVALID_SECRET_PATH)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        parser.error(INVALID_SECRET_PATH)


def build_parser(settings: MintSettings) -> argparse.ArgumentParser:
    """Build the argument parser, taking defaults from settings."""
    parser = argparse.ArgumentParser(prog="esjwt", description="Generates a JWT token.")
    parser.add_argument("secret_path", metavar="secret-path", help="Path to secret")
    parser.add_argument("key_id", metavar="key-id", help="Key ID")
    parser.add_argument("issuer_id", metavar="issuer-id", help="Issuer (developer) ID")
    parser.add_argument(
        "--months",
        type=int,
        default=settings.duration_months,
        help=f"Token lifetime in calendar months (default: {settings.duration_months})",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Mint a token from command-line arguments and print it to stdout."""
    try:
        settings = MintSettings()
    except ValidationError as e:
        print(f"error: invalid ESJWT_* configuration: {e}", file=sys.stderr)
        return 2
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("esjwt").setLevel(level)

    if not args.key_id:
        parser.error("'<key-id>' must not be empty.")
    if not args.issuer_id:
        parser.error("'<issuer-id>' must not be empty.")
    if args.months < 0:
        parser.error("'--months' must not be negative.")
    secret = _read_secret(parser, args.secret_path)

    try:
        token = mint_token(secret, args.key_id, args.issuer_id, duration_months=args.months)
    except TokenMintError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    print(token)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
