"""
Token savings of an optimization.
"""

from pydantic import BaseModel, ConfigDict, Field


class OptimizationMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    original_tokens: int = Field(..., ge=0)
    optimized_tokens: int = Field(..., ge=0)
    tokens_saved: int
    savings_percentage: int
    compression_ratio: float
