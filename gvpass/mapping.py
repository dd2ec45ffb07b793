"""
Mapping logic: Build the charset from enabled categories and convert
random integers into password characters.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from .config import (
    DEFAULT_OPTIONS,
    LOWERCASE,
    MAX_PASSWORD_LENGTH,
    NUMBERS,
    SYMBOLS,
    UPPERCASE,
    GenerationOptions,
)
from .entropy import UINT32_RANGE, RandomSource, random_uint32s

logger = logging.getLogger(__name__)


def build_charset(options: GenerationOptions | None = None) -> str:
    """
    Concatenate the alphabet of every enabled category, always in the
    order uppercase, lowercase, numbers, symbols.
    """
    opts = options or DEFAULT_OPTIONS
    charset = ""
    if opts.uppercase:
        charset += UPPERCASE
    if opts.lowercase:
        charset += LOWERCASE
    if opts.numbers:
        charset += NUMBERS
    if opts.symbols:
        charset += SYMBOLS
    return charset


def values_to_password(values: Iterable[int], charset: str) -> str:
    """
    Map each random value to `charset[value % len(charset)]`, keeping draw order.
    """
    size = len(charset)
    return "".join(charset[value % size] for value in values)


def _check_length(length: int) -> None:
    if isinstance(length, bool) or not isinstance(length, int):
        raise ValueError(f"Password length must be an integer, got {length!r}.")
    if length < 0 or length > MAX_PASSWORD_LENGTH:
        raise ValueError(
            f"Password length {length} is outside 0..{MAX_PASSWORD_LENGTH}."
        )


def _unbiased_values(
    count: int,
    charset_size: int,
    source: RandomSource | None,
) -> List[int]:
    """
    Rejection sampling: keep only draws below the largest multiple of
    `charset_size` that fits in 32 bits, so every index is equally likely.
    """
    limit = UINT32_RANGE - (UINT32_RANGE % charset_size)
    kept: list[int] = []
    while len(kept) < count:
        for value in random_uint32s(count - len(kept), source):
            if value < limit:
                kept.append(value)
    return kept


def generate_password(
    options: GenerationOptions | None = None,
    source: RandomSource | None = None,
    unbiased: bool = False,
) -> str:
    """
    Generate a password from the enabled categories.

    - Empty charset (every category off) gives "" without touching the
      random source.
    - Draw one 32-bit value per character from the secure source.
    - Index the charset with value modulo charset length. With
      `unbiased=True` rejection sampling removes the small modulo bias.

    Enabled categories are not guaranteed to appear in the output.
    """
    opts = options or DEFAULT_OPTIONS
    charset = build_charset(opts)
    if not charset:
        logger.debug("No categories enabled; returning empty password")
        return ""

    _check_length(opts.length)

    if unbiased:
        values = _unbiased_values(opts.length, len(charset), source)
    else:
        values = random_uint32s(opts.length, source)

    logger.debug(
        "Generated %d-char password from %d-symbol charset (unbiased=%s)",
        opts.length,
        len(charset),
        unbiased,
    )
    return values_to_password(values, charset)
