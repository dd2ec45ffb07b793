"""
Command-line interface and high-level generator functions.
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Sequence

from .config import (
    DEFAULT_KEY_BYTES,
    DEFAULT_OPTIONS,
    MAX_PASSWORD_LENGTH,
    MODE_BASE64,
    MODE_PASSWORD,
    MODES,
    GenerationOptions,
)
from .entropy import EntropySourceError, RandomSource, entropy_bits
from .keys import generate_key
from .mapping import build_charset, generate_password
from .strength import KEY_RESULT, StrengthResult, estimate_strength

logger = logging.getLogger(__name__)


@dataclass
class GenerationMeta:
    """
    Full result of one generation request.
    """
    # Password or encoded key
    value: str

    # "password" or "base64"
    mode: str

    # Heuristic rating shown to the user
    strength: StrengthResult

    # Theoretical entropy; informational only, not used for the rating
    entropy_bits: float

    # Alphabet size (64 for keys)
    charset_size: int

    options: GenerationOptions | None = None


def generate_password_with_meta(
    options: GenerationOptions | None = None,
    source: RandomSource | None = None,
    unbiased: bool = False,
) -> GenerationMeta:
    """
    Password pipeline with metadata:

    - Build the charset from the enabled categories.
    - Draw and map random values to characters.
    - Rate the result with the strength heuristic.
    """
    opts = options or DEFAULT_OPTIONS
    password = generate_password(opts, source=source, unbiased=unbiased)
    charset_size = len(build_charset(opts))

    return GenerationMeta(
        value=password,
        mode=MODE_PASSWORD,
        strength=estimate_strength(password, opts),
        entropy_bits=entropy_bits(len(password), charset_size),
        charset_size=charset_size,
        options=opts,
    )


def generate_key_with_meta(
    byte_size: int = DEFAULT_KEY_BYTES,
    url_friendly: bool = False,
    source: RandomSource | None = None,
) -> GenerationMeta:
    key = generate_key(byte_size, url_friendly=url_friendly, source=source)
    return GenerationMeta(
        value=key,
        mode=MODE_BASE64,
        strength=KEY_RESULT,
        entropy_bits=float(byte_size * 8),
        charset_size=64,
    )


def generate(
    mode: str = MODE_PASSWORD,
    options: GenerationOptions | None = None,
    source: RandomSource | None = None,
) -> tuple[str, StrengthResult]:
    """
    Two-mode entry point for front ends: a password rated by the heuristic,
    or a 32-byte standard Base64 key rated "Secure Key".
    """
    if mode == MODE_PASSWORD:
        meta = generate_password_with_meta(options, source=source)
    elif mode == MODE_BASE64:
        meta = generate_key_with_meta(DEFAULT_KEY_BYTES, source=source)
    else:
        raise ValueError(f"Unknown mode {mode!r}; expected one of {MODES}.")
    return meta.value, meta.strength


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gvpass",
        description="Generate secure random passwords and Base64 keys.",
    )
    parser.add_argument("--mode", choices=MODES, default=MODE_PASSWORD)
    parser.add_argument(
        "-l", "--length", type=int, default=DEFAULT_OPTIONS.length,
        help=f"password length (0..{MAX_PASSWORD_LENGTH})",
    )
    parser.add_argument("--no-uppercase", action="store_true")
    parser.add_argument("--no-lowercase", action="store_true")
    parser.add_argument("--no-numbers", action="store_true")
    parser.add_argument("--no-symbols", action="store_true")
    parser.add_argument(
        "--unbiased", action="store_true",
        help="use rejection sampling instead of modulo indexing",
    )
    parser.add_argument(
        "-b", "--bytes", type=int, default=DEFAULT_KEY_BYTES, dest="byte_size",
        help="key size in bytes (base64 mode)",
    )
    parser.add_argument(
        "--url-safe", action="store_true",
        help="emit unpadded Base64URL keys",
    )
    parser.add_argument("-n", "--count", type=int, default=1)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `python -m gvpass`, the `gvpass` script, or `run_gvpass.py`.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.count < 1:
        parser.error("--count must be at least 1")

    options = GenerationOptions(
        length=args.length,
        uppercase=not args.no_uppercase,
        lowercase=not args.no_lowercase,
        numbers=not args.no_numbers,
        symbols=not args.no_symbols,
    )

    print("\n[GV Pass]")
    try:
        for _ in range(args.count):
            if args.mode == MODE_PASSWORD:
                meta = generate_password_with_meta(options, unbiased=args.unbiased)
            else:
                meta = generate_key_with_meta(args.byte_size, url_friendly=args.url_safe)
            print(f"{meta.value}")
            print(f"  Strength: {meta.strength.label} ({meta.entropy_bits:.0f} bits)")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except EntropySourceError as exc:
        logger.error("Secure random source unavailable: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0
