"""
Keyword based problem classification.

Each category owns a fixed keyword list. A category scores one point per
distinct keyword found as a substring of the lowercased prompt; the best
score wins and ties go to the category declared first in ``CATEGORY_ORDER``.
"""

import re
from typing import Any, Dict, List, Tuple

from promptkit.domain_core.services.numeric import clamp, round_half_up
from promptkit.domain_core.value_objects.problem_type import (
    CATEGORY_ORDER,
    ProblemAnalysis,
    ProblemType,
)

CATEGORY_KEYWORDS: Dict[ProblemType, Tuple[str, ...]] = {
    ProblemType.CODING: (
        "code",
        "programming",
        "develop",
        "build",
        "create",
        "implement",
        "debug",
        "function",
        "class",
        "component",
        "api",
        "database",
        "algorithm",
        "script",
        "react",
        "javascript",
        "python",
        "java",
        "nodejs",
        "frontend",
        "backend",
        "testing",
        "deployment",
        "git",
        "docker",
        "kubernetes",
        "microservices",
    ),
    ProblemType.WRITING: (
        "write",
        "article",
        "blog",
        "content",
        "copy",
        "documentation",
        "email",
        "proposal",
        "report",
        "story",
        "creative",
        "marketing",
        "technical writing",
        "communication",
        "presentation",
        "summary",
        "review",
    ),
    ProblemType.ANALYSIS: (
        "analyze",
        "research",
        "compare",
        "evaluate",
        "assess",
        "investigate",
        "study",
        "examine",
        "review",
        "critique",
        "audit",
        "benchmark",
        "strategy",
        "planning",
        "decision",
        "recommendation",
        "insights",
    ),
    ProblemType.DESIGN: (
        "design",
        "ui",
        "ux",
        "interface",
        "mockup",
        "wireframe",
        "prototype",
        "visual",
        "layout",
        "branding",
        "graphics",
        "user experience",
    ),
}


def _term_pattern(*terms: str) -> "re.Pattern[str]":
    return re.compile(r"\b(?:" + "|".join(re.escape(t) for t in terms) + r")\b")


TECHNICAL_TERMS = _term_pattern(
    "architecture",
    "framework",
    "integration",
    "optimization",
    "scalability",
    "security",
    "performance",
    "testing",
    "deployment",
    "monitoring",
)
SCOPE_TERMS = _term_pattern(
    "full",
    "complete",
    "entire",
    "comprehensive",
    "end-to-end",
    "production",
    "enterprise",
)
MULTI_STEP_TERMS = _term_pattern(
    "and",
    "then",
    "also",
    "additionally",
    "furthermore",
    "moreover",
    "including",
)

MIN_COMPLEXITY = 1
MAX_COMPLEXITY = 10
# Word count contributes at most this much to complexity.
MAX_LENGTH_FACTOR = 5


def score_categories(lowered: str) -> Dict[str, int]:
    return {
        category.value: sum(
            1 for keyword in CATEGORY_KEYWORDS[category] if keyword in lowered
        )
        for category in CATEGORY_ORDER
    }


def pick_category(scores: Dict[str, int]) -> ProblemType:
    best = CATEGORY_ORDER[0]
    for category in CATEGORY_ORDER[1:]:
        if scores[category.value] > scores[best.value]:
            best = category
    return best


def estimate_complexity(text: str) -> int:
    """Score task difficulty from length, vocabulary, scope and connectors."""
    lowered = text.lower()

    raw = (
        min(len(text.split()) / 10, MAX_LENGTH_FACTOR)
        + len(TECHNICAL_TERMS.findall(lowered)) * 1.5
        + len(SCOPE_TERMS.findall(lowered)) * 2
        + len(MULTI_STEP_TERMS.findall(lowered)) * 0.5
    )
    return round_half_up(clamp(raw, MIN_COMPLEXITY, MAX_COMPLEXITY))


def matched_keywords(lowered: str) -> List[str]:
    return [
        keyword
        for category in CATEGORY_ORDER
        for keyword in CATEGORY_KEYWORDS[category]
        if keyword in lowered
    ]


def analyze_problem_type(text: Any) -> ProblemAnalysis:
    """Classify a prompt and estimate its complexity.

    Non-string input is treated as an empty prompt.
    """
    if not isinstance(text, str):
        text = ""

    lowered = text.lower()
    scores = score_categories(lowered)

    return ProblemAnalysis(
        type=pick_category(scores),
        complexity=estimate_complexity(text),
        keywords=matched_keywords(lowered),
        scores=scores,
    )
