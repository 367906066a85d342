"""Errors raised by candidate providers and their clients."""

from domain.exceptions import CodeCompareError


class ProviderError(CodeCompareError):
    """A candidate or scoring provider failed to deliver a result."""

    def __init__(self, message: str, provider: str | None = None):
        super().__init__(message)
        self.provider = provider


class ProviderTimeoutError(ProviderError):
    """Provider did not answer within its timeout."""

    pass


class ProviderAuthError(ProviderError):
    """Provider rejected the configured credentials."""

    pass
