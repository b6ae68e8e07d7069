class ValidationError(ValueError):
    """Raised when a request is missing the resume or the job description"""


class GenerationError(RuntimeError):
    """Raised when no LLM backend produced a usable JSON object"""
