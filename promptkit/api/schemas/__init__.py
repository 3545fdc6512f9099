"""
API schemas.

- base: error and health responses
- prompt: prompt pipeline requests and responses
"""

from __future__ import annotations

from .base import ErrorResponse, HealthResponse
from .prompt import (
    AtomizeResponse,
    OptimizeResponse,
    PreambleRequest,
    PreambleResponse,
    ProcessRequest,
    ProcessResponse,
    PromptRequest,
    TokenRequest,
    TokenResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "AtomizeResponse",
    "OptimizeResponse",
    "PreambleRequest",
    "PreambleResponse",
    "ProcessRequest",
    "ProcessResponse",
    "PromptRequest",
    "TokenRequest",
    "TokenResponse",
]
