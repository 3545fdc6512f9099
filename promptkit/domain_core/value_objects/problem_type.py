"""
Problem type value objects.
"""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ProblemType(str, Enum):
    """Category a prompt is classified into."""

    CODING = "coding"
    WRITING = "writing"
    ANALYSIS = "analysis"
    DESIGN = "design"


# Iteration order for scoring; earlier categories win ties.
CATEGORY_ORDER = (
    ProblemType.CODING,
    ProblemType.WRITING,
    ProblemType.ANALYSIS,
    ProblemType.DESIGN,
)


class ProblemAnalysis(BaseModel):
    """Result of classifying a single prompt."""

    model_config = ConfigDict(frozen=True)

    type: ProblemType = Field(..., description="Highest scoring category")
    complexity: int = Field(..., ge=1, le=10, description="Difficulty estimate")
    keywords: List[str] = Field(
        default_factory=list, description="Matched keywords in declaration order"
    )
    scores: Dict[str, int] = Field(
        default_factory=dict, description="Keyword match count per category"
    )
