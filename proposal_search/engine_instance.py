"""Shared search engine instance, built once per process."""

from functools import lru_cache

from .config import get_settings
from .core.engine import SearchEngine


@lru_cache()
def get_search_engine() -> SearchEngine:
    """Load the corpus and build the engine on first use."""
    settings = get_settings()
    return SearchEngine.from_directory(
        settings.corpus_dir,
        settings.corpus_pattern,
        fuzzy_threshold=settings.fuzzy_threshold,
        min_match_char_length=settings.min_match_char_length,
        slow_batch_terms=settings.max_cross_match_terms,
    )
