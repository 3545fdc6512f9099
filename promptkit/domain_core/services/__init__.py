"""Pure text-transformation services."""

from .atomizer import atomize_problem
from .classifier import analyze_problem_type
from .metrics import optimization_metrics, quality_score
from .optimizer import optimize
from .preamble import (
    generate_concise_preamble,
    generate_preamble,
    model_instructions,
    normalize_model_id,
    tdd_instructions,
)
from .recommender import recommend_model
from .tokens import estimate_tokens, estimate_tokens_by_length

__all__ = [
    "analyze_problem_type",
    "atomize_problem",
    "estimate_tokens",
    "estimate_tokens_by_length",
    "generate_concise_preamble",
    "generate_preamble",
    "model_instructions",
    "normalize_model_id",
    "optimization_metrics",
    "optimize",
    "quality_score",
    "recommend_model",
    "tdd_instructions",
]
