"""Domain exceptions."""


class CodeCompareError(Exception):
    """Base error for the matcher."""

    pass


class ValidationError(CodeCompareError, ValueError):
    """Input problem or feedback payload is missing required data."""

    pass
