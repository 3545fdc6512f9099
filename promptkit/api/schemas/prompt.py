"""
Request/response schemas for the prompt pipeline endpoints.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from promptkit.domain_core.value_objects import (
    ModelRecommendation,
    OptimizationMetrics,
    ProblemAnalysis,
)


# ---------- REQUESTS ----------
class PromptRequest(BaseModel):
    prompt: str = Field(
        ...,
        description="Free-text problem description",
        json_schema_extra={
            "example": "Please build a REST API that will handle user authentication"
        },
    )


class PreambleRequest(PromptRequest):
    model: Optional[str] = Field(
        None,
        description="Target assistant model. Defaults to the recommended model.",
        json_schema_extra={"example": "claude"},
    )
    concise: bool = Field(
        False, description="Use the short template for low complexity prompts"
    )


class ProcessRequest(PromptRequest):
    model: Optional[str] = Field(None, description="Target assistant model")


class TokenRequest(BaseModel):
    text: str = Field(..., max_length=200_000, description="Text to estimate")


# ---------- RESPONSES ----------
class OptimizeResponse(BaseModel):
    optimized: str
    metrics: OptimizationMetrics


class AtomizeResponse(BaseModel):
    atomized: List[str] = Field(default_factory=list)


class PreambleResponse(BaseModel):
    preamble: str
    model: str = Field(..., description="Model the preamble was written for")
    estimated_tokens: int = Field(
        ..., ge=0, description="Length based token approximation"
    )


class TokenResponse(BaseModel):
    tokens: int = Field(..., ge=0, description="Word and punctuation estimate")
    approximate_tokens: int = Field(..., ge=0, description="Characters / 4 estimate")


class ProcessResponse(BaseModel):
    """Everything the pipeline derives from one prompt."""

    original: str
    optimized: str
    atomized: List[str]
    analysis: ProblemAnalysis
    recommendation: ModelRecommendation
    metrics: OptimizationMetrics
    quality_score: int = Field(..., ge=0, le=100)
    preamble: PreambleResponse
