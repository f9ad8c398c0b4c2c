"""Weighted multi-field fuzzy index over the document store."""

import sys
from typing import Callable, Dict, List, Mapping, Optional, Tuple

import structlog

from ..models.document import Document
from ..models.response import MatchDetail, SearchHit
from .fuzzy_matcher import FuzzyMatcher
from .store import DocumentStore

logger = structlog.get_logger(__name__)

# Relative importance of each indexed field, higher ranks stronger
DEFAULT_FIELD_WEIGHTS: Dict[str, float] = {
    "metadata.id": 1.0,
    "metadata.program_title": 0.9,
    "content": 0.7,
    "metadata.instrument_mode": 0.6,
    "metadata.pi_and_co_pis": 0.5,
    "metadata.type": 0.4,
    "metadata.cycle": 0.3,
}

FIELD_GETTERS: Dict[str, Callable[[Document], Optional[str]]] = {
    "metadata.id": lambda doc: doc.metadata.id_text(),
    "metadata.program_title": lambda doc: doc.metadata.program_title,
    "content": lambda doc: doc.content,
    "metadata.instrument_mode": lambda doc: doc.metadata.instrument_mode,
    "metadata.pi_and_co_pis": lambda doc: doc.metadata.pi_and_co_pis,
    "metadata.type": lambda doc: doc.metadata.type,
    "metadata.cycle": lambda doc: doc.metadata.cycle,
}

# Stands in for a perfect field score so the product keeps the field weight
EPSILON = sys.float_info.epsilon


class FuzzyIndex:
    """Approximate search across the weighted fields of every document."""

    def __init__(
        self,
        store: DocumentStore,
        matcher: Optional[FuzzyMatcher] = None,
        field_weights: Optional[Mapping[str, float]] = None,
    ) -> None:
        """
        Build the index from a store snapshot.

        Args:
            store: The loaded documents
            matcher: Field scorer, defaults to FuzzyMatcher()
            field_weights: Field path to weight, defaults to DEFAULT_FIELD_WEIGHTS
        """
        weights = dict(field_weights if field_weights is not None else DEFAULT_FIELD_WEIGHTS)
        unknown = set(weights) - set(FIELD_GETTERS)
        if unknown:
            raise ValueError(f"Unknown index fields: {sorted(unknown)}")
        if not weights or any(weight <= 0 for weight in weights.values()):
            raise ValueError("Field weights must be positive")

        total_weight = sum(weights.values())
        self.field_weights: Dict[str, float] = {
            name: weight / total_weight for name, weight in weights.items()
        }
        self.matcher = matcher or FuzzyMatcher()
        self.store = store

        # Field values are normalized once, queries only pay for matching
        self._entries: List[Tuple[Document, List[Tuple[str, float, str]]]] = []
        for document in store.get_all():
            fields = []
            for name, weight in self.field_weights.items():
                value = FIELD_GETTERS[name](document)
                if value:
                    fields.append((name, weight, self.matcher.normalizer.normalize(value)))
            self._entries.append((document, fields))

        logger.debug(
            "Fuzzy index built",
            documents=len(self._entries),
            fields=list(self.field_weights),
        )

    def search(self, query: str) -> List[SearchHit]:
        """
        Search every document for a query.

        Args:
            query: Search query

        Returns:
            Hits ordered by score (closest first), ties in store order.
            Empty for a blank query.
        """
        if not query or not query.strip():
            return []

        normalized_query = self.matcher.normalizer.normalize(query.strip())

        ranked = []
        for position, (document, fields) in enumerate(self._entries):
            matches = []
            total = 1.0
            for name, weight, text in fields:
                field_match = self.matcher.match(normalized_query, text)
                if field_match is None:
                    continue
                total *= max(field_match.score, EPSILON) ** weight
                matches.append(
                    MatchDetail(
                        field=name,
                        score=field_match.score,
                        start=field_match.start,
                        end=field_match.end,
                    )
                )
            if matches:
                ranked.append((total, position, SearchHit(document=document, score=total, matches=matches)))

        ranked.sort(key=lambda item: (item[0], item[1]))
        return [hit for _, _, hit in ranked]

    def __len__(self) -> int:
        return len(self._entries)
