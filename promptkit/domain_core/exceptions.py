"""
Domain errors raised at the request boundary.

The text-transformation services never raise; these errors only come from
input validation performed before a request reaches them.
"""


class DomainError(Exception):
    """Base class for domain-specific errors."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class EmptyPromptError(DomainError):
    """Raised when a prompt is missing or blank."""

    def __init__(self):
        super().__init__(
            "Prompt is required and must be a non-empty string", "MISSING_PROMPT"
        )


class PromptTooLongError(DomainError):
    """Raised when a prompt exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Prompt exceeds maximum length of {max_length} characters (got {length})",
            "PROMPT_TOO_LONG",
        )
        self.length = length
        self.max_length = max_length
