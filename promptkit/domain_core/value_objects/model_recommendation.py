"""
Model recommendation value object.
"""

from pydantic import BaseModel, ConfigDict, Field


class ModelRecommendation(BaseModel):
    """Primary/secondary assistant model pair suggested for a prompt."""

    model_config = ConfigDict(frozen=True)

    primary: str = Field(..., description="Best suited model")
    secondary: str = Field(..., description="Fallback model")
    reason: str = Field(..., description="Why this pair fits the prompt")
