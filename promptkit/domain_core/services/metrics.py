"""
Optimization effectiveness metrics and quality scoring.
"""

import re
from typing import Sequence

from promptkit.domain_core.services.numeric import clamp, round_half_up
from promptkit.domain_core.services.tokens import estimate_tokens
from promptkit.domain_core.value_objects.optimization_metrics import (
    OptimizationMetrics,
)

TECHNICAL_TERM_PATTERN = re.compile(
    r"\b(?:API|REST|CRUD|database|authentication|validation|React|Node\.js|Express|MongoDB)\b",
    re.IGNORECASE,
)

# Length ratio bounds: below is too aggressive, above is barely optimized.
MIN_LENGTH_RATIO = 0.3
MAX_LENGTH_RATIO = 0.9
MAX_GOOD_STEP_COUNT = 10


def optimization_metrics(original: str, optimized: str) -> OptimizationMetrics:
    """Compare token estimates before and after optimization."""
    original_tokens = estimate_tokens(original)
    optimized_tokens = estimate_tokens(optimized)
    tokens_saved = original_tokens - optimized_tokens

    if original_tokens > 0:
        savings_percentage = round_half_up(tokens_saved / original_tokens * 100)
        compression_ratio = round(optimized_tokens / original_tokens, 2)
    else:
        savings_percentage = 0
        compression_ratio = 1.0

    return OptimizationMetrics(
        original_tokens=original_tokens,
        optimized_tokens=optimized_tokens,
        tokens_saved=tokens_saved,
        savings_percentage=savings_percentage,
        compression_ratio=compression_ratio,
    )


def quality_score(
    original: str, optimized: str, atomized: Sequence[str] = ()
) -> int:
    """Score an optimize + atomize result between 0 and 100.

    Penalizes optimizations that are too aggressive or too timid, scales by
    how many technical terms from the original survived, and rewards a
    reasonable number of atomized steps.
    """
    score = 100.0

    length_ratio = len(optimized) / len(original) if original else 1.0
    if length_ratio < MIN_LENGTH_RATIO:
        score -= 20
    if length_ratio > MAX_LENGTH_RATIO:
        score -= 10

    terms = TECHNICAL_TERM_PATTERN.findall(original)
    if terms:
        lowered = optimized.lower()
        preserved = [term for term in terms if term.lower() in lowered]
        score *= len(preserved) / len(terms)

    if 0 < len(atomized) <= MAX_GOOD_STEP_COUNT:
        score += 5
    elif len(atomized) > MAX_GOOD_STEP_COUNT:
        score -= 5

    return int(clamp(round_half_up(score), 0, 100))
