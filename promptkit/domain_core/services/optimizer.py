"""
Heuristic prompt optimizer.

The rewrite is an ordered sequence of (pattern, replacement) rules. Order
matters: the generic "that"/"which" removal runs before "with the ability to",
so the "that" introduced by the latter survives.
"""

import re
from typing import Any, Tuple

Rule = Tuple[re.Pattern, str]

FILLER_WORDS = (
    "please",
    "kindly",
    "just",
    "really",
    "very",
    "actually",
    "simply",
    "like",
    "basically",
    "essentially",
    "literally",
    "obviously",
)


def _rule(pattern: str, replacement: str) -> Rule:
    return re.compile(pattern, re.IGNORECASE), replacement


# Hyphen-joined fillers belong to a compound such as just-in-time.
FILLER_RULES: Tuple[Rule, ...] = tuple(
    _rule(rf"(?<![\w-]){word}(?![\w-])\s*", "") for word in FILLER_WORDS
)

VERBOSE_RULES: Tuple[Rule, ...] = (
    _rule(r"\bthat will\b", ""),
    _rule(r"\bwhich will\b", ""),
    _rule(r"\bthat\s+", ""),
    _rule(r"\bwhich\s+", ""),
    _rule(r",?\s+supporting\s+", ": "),
    _rule(r"\bin order to\b", "to"),
    _rule(r"\bfor the purpose of\b", "to"),
    _rule(r"\bwith the ability to\b", "that can"),
    _rule(r"\bis capable of\b", "can"),
    _rule(r"\bmake sure to\b", ""),
    _rule(r"\bensure that\b", "ensure"),
)

PASSIVE_RULES: Tuple[Rule, ...] = (
    _rule(r"\bis created by\b", "creates"),
    _rule(r"\bis handled by\b", "handles"),
    _rule(r"\bis managed by\b", "manages"),
    _rule(r"\bis processed by\b", "processes"),
)

SPACING_RULES: Tuple[Rule, ...] = (
    (re.compile(r"\s+"), " "),
    (re.compile(r"\s+([,.!?;:])"), r"\1"),
    (re.compile(r"([,.!?;:])\s*([,.!?;:])"), r"\1 \2"),
    (re.compile(r"^[\s,.!?;:]+"), ""),
    (re.compile(r"[\s,;:]+$"), ""),
)

OPTIMIZATION_RULES: Tuple[Rule, ...] = (
    FILLER_RULES + VERBOSE_RULES + PASSIVE_RULES + SPACING_RULES
)


def apply_rules(text: str, rules: Tuple[Rule, ...]) -> str:
    """Apply each rule to the output of the previous one."""
    for pattern, replacement in rules:
        text = pattern.sub(replacement, text)
    return text


def optimize(text: Any) -> str:
    """Strip filler and verbose language from a prompt.

    Never raises. Non-string or empty input yields an empty string, and a
    prompt that would be reduced to nothing is returned trimmed instead.
    """
    if not isinstance(text, str) or not text:
        return ""

    optimized = apply_rules(text, OPTIMIZATION_RULES).strip()
    if not optimized:
        return text.strip()
    return optimized
