from .cache import TTLCache
from .errors import ProviderAuthError, ProviderError, ProviderTimeoutError
from .feedback_store import InMemoryFeedbackStore, RedisFeedbackStore

__all__ = [
    "InMemoryFeedbackStore",
    "ProviderAuthError",
    "ProviderError",
    "ProviderTimeoutError",
    "RedisFeedbackStore",
    "TTLCache",
]
