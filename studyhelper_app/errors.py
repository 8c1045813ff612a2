"""
Exception types shared by the dispatcher, the tools and the HTTP layer.
"""


class StudyHelperError(Exception):
    """Base class for all Student Helper errors."""


class InvalidInputError(StudyHelperError):
    """The request body did not carry a usable message."""


class ToolOutputParseError(StudyHelperError, ValueError):
    """LLM output was not JSON or did not match the tool's schema."""


class ProviderError(StudyHelperError, RuntimeError):
    """The LLM provider call failed (network, auth, timeout, ...)."""
