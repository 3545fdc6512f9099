"""
Suggests which assistant model a prompt should be sent to.
"""

from typing import Any, Tuple

from promptkit.domain_core.value_objects.model_recommendation import (
    ModelRecommendation,
)

CLAUDE_SONNET = "Claude 3.5 Sonnet"
GPT_4 = "GPT-4"

# Checked in order; the first bucket with any keyword in the prompt wins.
RECOMMENDATION_RULES: Tuple[Tuple[Tuple[str, ...], ModelRecommendation], ...] = (
    (
        (
            "code",
            "programming",
            "debug",
            "algorithm",
            "function",
            "script",
            "api",
            "database",
        ),
        ModelRecommendation(
            primary=CLAUDE_SONNET,
            secondary=GPT_4,
            reason="Excellent for code generation, debugging, and technical documentation",
        ),
    ),
    (
        ("write", "story", "creative", "article", "content", "blog"),
        ModelRecommendation(
            primary=GPT_4,
            secondary=CLAUDE_SONNET,
            reason="Superior creative writing and content generation capabilities",
        ),
    ),
    (
        ("analyze", "research", "explain", "compare", "evaluate", "strategy"),
        ModelRecommendation(
            primary=CLAUDE_SONNET,
            secondary=GPT_4,
            reason="Excellent analytical and reasoning capabilities with nuanced understanding",
        ),
    ),
    (
        ("math", "calculate", "data", "statistics", "formula", "equation"),
        ModelRecommendation(
            primary=GPT_4,
            secondary=CLAUDE_SONNET,
            reason="Strong mathematical reasoning and data analysis capabilities",
        ),
    ),
)

DEFAULT_RECOMMENDATION = ModelRecommendation(
    primary=CLAUDE_SONNET,
    secondary=GPT_4,
    reason="Balanced performance across most tasks with excellent instruction following",
)


def recommend_model(text: Any) -> ModelRecommendation:
    if not isinstance(text, str):
        return DEFAULT_RECOMMENDATION

    lowered = text.lower()
    for keywords, recommendation in RECOMMENDATION_RULES:
        if any(keyword in lowered for keyword in keywords):
            return recommendation
    return DEFAULT_RECOMMENDATION
