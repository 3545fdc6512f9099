"""
Domain validators for prompt business rules.
"""

from promptkit.domain_core.exceptions import EmptyPromptError, PromptTooLongError


class PromptValidators:
    @staticmethod
    def validate_prompt(prompt: str, max_length: int) -> None:
        """Validate a prompt before it enters the pipeline."""
        if not prompt or not prompt.strip():
            raise EmptyPromptError()

        if len(prompt) > max_length:
            raise PromptTooLongError(len(prompt), max_length)
