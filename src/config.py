"""Runtime configuration loaded from the environment."""

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv
from loguru import logger

from infrastructure.providers.clist_client import CLIST_API_BASE
from infrastructure.providers.semantic_client import DEFAULT_EMBEDDINGS_URL


@dataclass(frozen=True)
class Settings:
    """Matcher settings; every remote collaborator is optional."""

    clist_api_key: str | None = None
    clist_api_base: str = CLIST_API_BASE
    hf_api_key: str | None = None
    embeddings_url: str = DEFAULT_EMBEDDINGS_URL
    redis_url: str | None = None
    provider_timeout: float = 10.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from environment variables (and a ``.env`` file if present)."""
        load_dotenv()

        timeout = os.getenv("PROVIDER_TIMEOUT")
        try:
            provider_timeout = float(timeout) if timeout else cls.provider_timeout
        except ValueError:
            logger.warning(f"Invalid PROVIDER_TIMEOUT={timeout!r}, using {cls.provider_timeout}s")
            provider_timeout = cls.provider_timeout

        return cls(
            clist_api_key=os.getenv("CLIST_API_KEY") or None,
            clist_api_base=os.getenv("CLIST_API_BASE") or CLIST_API_BASE,
            hf_api_key=os.getenv("HF_API_KEY") or None,
            embeddings_url=os.getenv("EMBEDDINGS_URL") or DEFAULT_EMBEDDINGS_URL,
            redis_url=os.getenv("REDIS_URL") or None,
            provider_timeout=provider_timeout,
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        )


def setup_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)
