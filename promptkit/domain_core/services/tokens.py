"""
Token count heuristics.

Two estimators are exposed and intentionally kept apart:

* ``estimate_tokens`` is the canonical, word/punctuation based estimate used
  for user-facing counts and optimization metrics.
* ``estimate_tokens_by_length`` is a cheap characters/4 approximation used
  for sizing large generated documents such as preambles.
"""

import math
import re
from typing import Any

PUNCTUATION_PATTERN = re.compile(r"[.,!?;:()\[\]{}]")
DIGIT_RUN_PATTERN = re.compile(r"\d+")


def _word_weight(word: str) -> float:
    if len(word) <= 3:
        return 1
    if len(word) <= 6:
        return 1.5
    return 2


def estimate_tokens(text: Any) -> int:
    """Approximate the LLM token count of ``text``."""
    if not text or not isinstance(text, str):
        return 0

    word_tokens = sum(_word_weight(word) for word in text.split())
    punctuation = len(PUNCTUATION_PATTERN.findall(text))
    digit_runs = len(DIGIT_RUN_PATTERN.findall(text))

    return math.ceil(word_tokens + punctuation * 0.5 + digit_runs * 0.75)


def estimate_tokens_by_length(text: Any) -> int:
    """Cheap estimate assuming roughly four characters per token."""
    if not text or not isinstance(text, str):
        return 0
    return math.ceil(len(text) / 4)
