from .prompt_pipeline import PromptPipelineService

__all__ = ["PromptPipelineService"]
