"""
GV Pass: secure password and key generator package.
"""

from .config import GenerationOptions, DEFAULT_OPTIONS
from .entropy import EntropySourceError, RandomSource, SystemRandomSource
from .mapping import build_charset, generate_password
from .keys import generate_key, encode_key, decode_key
from .strength import StrengthResult, estimate_strength
from .cli import generate, generate_password_with_meta, generate_key_with_meta

__all__ = [
    "GenerationOptions",
    "DEFAULT_OPTIONS",
    "EntropySourceError",
    "RandomSource",
    "SystemRandomSource",
    "build_charset",
    "generate_password",
    "generate_key",
    "encode_key",
    "decode_key",
    "StrengthResult",
    "estimate_strength",
    "generate",
    "generate_password_with_meta",
    "generate_key_with_meta",
]
