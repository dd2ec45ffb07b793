"""
Coarse strength heuristic for generated passwords.

Only length thresholds and the number of declared categories count; no
entropy is measured from the password itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import GenerationOptions

EMPTY_LABEL = "Empty"
LABELS = ("Very Weak", "Weak", "Medium", "Strong", "Secure")
MAX_SCORE = 4


@dataclass(frozen=True)
class StrengthResult:
    score: int
    label: str


EMPTY_RESULT = StrengthResult(score=0, label=EMPTY_LABEL)

# Keys are raw CSPRNG bytes; rated at the top unconditionally.
KEY_RESULT = StrengthResult(score=MAX_SCORE, label="Secure Key")


def estimate_strength(password: str, options: GenerationOptions) -> StrengthResult:
    """
    Score a password from its length and the options that produced it.

    The final score is one above the raw score (capped at 4) while the
    label is looked up with the raw score, so the two are offset by one.
    """
    if not password:
        return EMPTY_RESULT

    length = len(password)
    score = 0

    if length >= 8:
        score += 1
    if length >= 16:
        score += 1

    types = options.enabled_categories()
    if types >= 3 and length >= 12:
        score += 1
    if types == 4 and length >= 16:
        score += 1

    return StrengthResult(
        score=min(score + 1, MAX_SCORE),
        label=LABELS[min(score, MAX_SCORE)],
    )
