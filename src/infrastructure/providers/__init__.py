"""Candidate providers and the semantic scorer."""

from .clist_client import ClistSearchProvider
from .local_catalog import LocalCatalogProvider
from .semantic_client import EmbeddingSemanticScorer

__all__ = ["ClistSearchProvider", "EmbeddingSemanticScorer", "LocalCatalogProvider"]
