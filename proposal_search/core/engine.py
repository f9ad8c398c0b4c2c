"""Main search engine implementation."""

import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import structlog

from ..models.document import Document, ProposalMetadata
from ..models.response import CrossMatchResponse, CrossMatchRow, MetadataPage, SearchResponse
from .cross_match import CrossMatchEngine
from .export import rows_to_csv
from .fuzzy_matcher import FuzzyMatcher
from .index import FuzzyIndex
from .listing import MetadataQuery, query_metadata
from .loader import load_directory, load_documents
from .store import DocumentStore

logger = structlog.get_logger(__name__)


class SearchEngine:
    """Search, lookup and cross-match over one immutable corpus."""

    def __init__(
        self,
        documents: Iterable[Document],
        fuzzy_threshold: float = 0.15,
        min_match_char_length: int = 2,
        field_weights: Optional[Mapping[str, float]] = None,
        slow_batch_terms: int = 50,
    ) -> None:
        """
        Initialize the search engine.

        The store and index are built here once and never modified, so one
        engine can be shared by every caller.

        Args:
            documents: Parsed corpus documents, in load order
            fuzzy_threshold: Approximate-match tolerance for the fuzzy index
            min_match_char_length: Shortest query the fuzzy index will match
            field_weights: Override of the fuzzy index field weights
            slow_batch_terms: Cross-match batch size above which a warning is logged
        """
        self.fuzzy_threshold = fuzzy_threshold
        self.slow_batch_terms = slow_batch_terms
        self.store = DocumentStore(documents)
        self.fuzzy_matcher = FuzzyMatcher(fuzzy_threshold, min_match_char_length)
        self.index = FuzzyIndex(self.store, self.fuzzy_matcher, field_weights)
        self.cross_matcher = CrossMatchEngine(self.store, self.index)

        # Performance tracking
        self._stats = {
            "total_queries": 0,
            "empty_queries": 0,
            "no_matches": 0,
            "total_cross_matches": 0,
            "total_cross_match_terms": 0,
            "total_execution_time": 0.0,
        }

    @classmethod
    def from_blobs(cls, blobs: Iterable[Tuple[str, str]], **kwargs: Any) -> "SearchEngine":
        """Build an engine from ``(source_name, text)`` pairs."""
        return cls(load_documents(blobs), **kwargs)

    @classmethod
    def from_directory(
        cls,
        directory: Union[str, Path],
        pattern: str = "*.md",
        **kwargs: Any,
    ) -> "SearchEngine":
        """Build an engine from the markdown files of a directory."""
        return cls(load_directory(directory, pattern), **kwargs)

    def get_all_documents(self) -> Tuple[Document, ...]:
        """Get every document in load order."""
        return self.store.get_all()

    def get_metadata(self) -> List[ProposalMetadata]:
        """Get the metadata of every document in load order."""
        return self.store.get_metadata_list()

    def get_document(self, program_id: Any) -> Optional[Document]:
        """Look up a document by program id, None when unknown."""
        return self.store.get_by_id(program_id)

    def search(self, query: str) -> SearchResponse:
        """
        Fuzzy search the corpus.

        Args:
            query: Search query

        Returns:
            SearchResponse with every hit, closest first
        """
        start_time = time.time()
        self._stats["total_queries"] += 1

        if not query or not query.strip():
            self._stats["empty_queries"] += 1
            hits = []
        else:
            hits = self.index.search(query)
            if not hits:
                self._stats["no_matches"] += 1

        execution_time = (time.time() - start_time) * 1000
        self._stats["total_execution_time"] += execution_time

        return SearchResponse(
            query=query or "",
            execution_time_ms=execution_time,
            total_results=len(hits),
            results=hits,
        )

    def cross_match(self, terms: Union[str, Sequence[str]], delimiter: str = ",") -> CrossMatchResponse:
        """
        Cross-match a batch of terms.

        Runs to completion on the calling thread; there are no partial results.

        Args:
            terms: Raw delimited text or a sequence of terms
            delimiter: Separator used when terms is raw text

        Returns:
            CrossMatchResponse with one row per term
        """
        start_time = time.time()
        rows = self.cross_matcher.run(terms, delimiter)
        execution_time = (time.time() - start_time) * 1000

        self._stats["total_cross_matches"] += 1
        self._stats["total_cross_match_terms"] += len(rows)

        if len(rows) > self.slow_batch_terms:
            logger.warning(
                "Large cross-match batch",
                terms=len(rows),
                execution_time_ms=round(execution_time, 2),
            )

        return CrossMatchResponse(
            terms=[row.term for row in rows],
            rows=rows,
            execution_time_ms=execution_time,
        )

    def export_csv(self, rows: Iterable[CrossMatchRow]) -> str:
        """Render cross-match rows as CSV text."""
        return rows_to_csv(rows)

    def list_metadata(self, query: Optional[MetadataQuery] = None) -> MetadataPage:
        """Filter, sort and paginate the metadata listing."""
        return query_metadata(self.store.get_metadata_list(), query or MetadataQuery())

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats = self._stats.copy()

        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
            stats["no_match_rate"] = stats["no_matches"] / stats["total_queries"]
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["no_match_rate"] = 0.0

        stats["store_stats"] = self.store.get_stats()
        return stats
