"""
Proposal Search - fuzzy, substring and whole-word search over a corpus of
proposal records written as markdown with YAML front matter.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .models.document import Document, ProposalMetadata
from .models.response import SearchHit, SearchResponse, CrossMatchRow

__all__ = [
    "SearchEngine",
    "Document",
    "ProposalMetadata",
    "SearchHit",
    "SearchResponse",
    "CrossMatchRow",
]
