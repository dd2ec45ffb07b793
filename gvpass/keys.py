"""
Random key encoder: raw CSPRNG bytes as standard or URL-safe Base64.
"""

from __future__ import annotations

import base64
import binascii
import logging

from .config import DEFAULT_KEY_BYTES
from .entropy import RandomSource, random_bytes

logger = logging.getLogger(__name__)


def encode_key(raw: bytes, url_friendly: bool = False) -> str:
    """
    Standard padded Base64 (RFC 4648 section 4). The URL-friendly form is
    derived from that same output: '+' -> '-', '/' -> '_', padding removed.
    """
    text = base64.b64encode(raw).decode("ascii")
    if url_friendly:
        text = text.replace("+", "-").replace("/", "_").rstrip("=")
    return text


def decode_key(text: str) -> bytes:
    """
    Decode a key produced by `encode_key` in either form.
    Raises ValueError on malformed input.
    """
    standard = text.replace("-", "+").replace("_", "/")
    standard += "=" * (-len(standard) % 4)
    try:
        return base64.b64decode(standard, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Not a valid Base64 key: {exc}") from exc


def generate_key(
    byte_size: int = DEFAULT_KEY_BYTES,
    url_friendly: bool = False,
    source: RandomSource | None = None,
) -> str:
    """
    Draw `byte_size` random bytes and return them Base64-encoded.
    """
    if isinstance(byte_size, bool) or not isinstance(byte_size, int):
        raise ValueError(f"Key size must be an integer, got {byte_size!r}.")
    if byte_size < 0:
        raise ValueError(f"Key size must not be negative ({byte_size}).")

    raw = random_bytes(byte_size, source)
    logger.debug("Encoding %d-byte key (url_friendly=%s)", byte_size, url_friendly)
    return encode_key(raw, url_friendly)
