"""
API dependencies for dependency injection.
"""

from fastapi import Depends

from promptkit.application.services.prompt_pipeline import PromptPipelineService
from promptkit.infra.config.settings import Settings, get_settings


def get_prompt_pipeline_service(
    settings: Settings = Depends(get_settings),
) -> PromptPipelineService:
    return PromptPipelineService(
        max_prompt_length=settings.max_prompt_length,
        default_model=settings.default_model,
    )
