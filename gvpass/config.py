"""
Configuration for the GV Pass password and key generator.
"""

from dataclasses import dataclass


# Category alphabets, concatenated in this order when enabled.
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Upper bound on requested password length.
MAX_PASSWORD_LENGTH = 1024

# 32 bytes = 256-bit key.
DEFAULT_KEY_BYTES = 32

MODE_PASSWORD = "password"
MODE_BASE64 = "base64"
MODES = (MODE_PASSWORD, MODE_BASE64)


@dataclass
class GenerationOptions:
    # Desired password length in characters.
    length: int = 16

    # Character categories to draw from.
    uppercase: bool = True
    lowercase: bool = True
    numbers: bool = True
    symbols: bool = True

    def enabled_categories(self) -> int:
        """
        Number of categories switched on, regardless of what a generated
        password actually contains.
        """
        return sum(
            1
            for flag in (self.uppercase, self.lowercase, self.numbers, self.symbols)
            if flag
        )


# Default options instance you can import elsewhere
DEFAULT_OPTIONS = GenerationOptions()
