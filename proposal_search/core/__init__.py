"""Core indexing and matching functionality."""

from .engine import SearchEngine
from .fuzzy_matcher import FuzzyMatcher
from .normalizer import TextNormalizer
from .store import DocumentStore
from .index import FuzzyIndex
from .cross_match import CrossMatchEngine

__all__ = [
    "SearchEngine",
    "FuzzyMatcher",
    "TextNormalizer",
    "DocumentStore",
    "FuzzyIndex",
    "CrossMatchEngine",
]
