"""Batch matching of many terms against the whole corpus."""

from typing import Iterable, List, Optional, Sequence, Union

import structlog

from ..models.document import Document
from ..models.response import CrossMatchRow
from .index import FuzzyIndex
from .normalizer import TextNormalizer
from .store import DocumentStore

logger = structlog.get_logger(__name__)

_normalizer = TextNormalizer()


def _text_fields(document: Document) -> List[str]:
    """Fields scanned by the substring and whole-word matchers, normalized."""
    return [
        _normalizer.normalize(document.content),
        _normalizer.normalize(document.metadata.program_title),
        _normalizer.normalize(document.metadata.pi_and_co_pis),
        _normalizer.normalize(document.metadata.instrument_mode),
    ]


def _unique(ids: Iterable[str]) -> List[str]:
    """Drop repeated ids, keeping first occurrence order."""
    return list(dict.fromkeys(ids))


def fuzzy_ids(index: FuzzyIndex, term: str) -> List[str]:
    """Program ids of the fuzzy search hits for a term, in relevance order."""
    return _unique(
        hit.document.metadata.id_text()
        for hit in index.search(term)
        if hit.document.metadata.id is not None
    )


def contains_ids(store: DocumentStore, term: str) -> List[str]:
    """
    Program ids of documents containing the term as a substring.

    Text fields are compared case-insensitively. The id is compared with the
    term as typed.
    """
    if not term:
        return []

    needle = _normalizer.normalize(term)
    matched = []
    for document in store.get_all():
        id_text = document.metadata.id_text()
        if not id_text:
            continue
        if term in id_text or any(needle in field for field in _text_fields(document)):
            matched.append(id_text)
    return _unique(matched)


def exact_ids(store: DocumentStore, term: str) -> List[str]:
    """
    Program ids of documents containing the term as a whole word.

    The term must be bounded by a non-word character or the edge of the
    text on both sides. The id only matches when it equals the term.
    """
    if not term:
        return []

    pattern = _normalizer.word_boundary_pattern(term)
    matched = []
    for document in store.get_all():
        id_text = document.metadata.id_text()
        if not id_text:
            continue
        if id_text == term or any(pattern.search(field) for field in _text_fields(document)):
            matched.append(id_text)
    return _unique(matched)


class CrossMatchEngine:
    """Runs fuzzy, contains and exact matching for a batch of terms."""

    def __init__(self, store: DocumentStore, index: FuzzyIndex) -> None:
        self.store = store
        self.index = index
        self.normalizer = _normalizer

    def match_term(self, term: str) -> CrossMatchRow:
        """Compute the three match sets for one term."""
        return CrossMatchRow(
            term=term,
            fuzzy=fuzzy_ids(self.index, term),
            contains=contains_ids(self.store, term),
            exact=exact_ids(self.store, term),
        )

    def run(self, terms: Union[str, Sequence[str]], delimiter: Optional[str] = ",") -> List[CrossMatchRow]:
        """
        Cross-match a batch of terms.

        Args:
            terms: Raw delimited text or a sequence of terms
            delimiter: Separator used when terms is raw text

        Returns:
            One row per non-blank term, in input order; repeated terms give
            repeated rows
        """
        if isinstance(terms, str):
            cleaned = self.normalizer.parse_terms(terms, delimiter or ",")
        else:
            cleaned = self.normalizer.clean_terms(list(terms))

        if not cleaned:
            return []

        logger.debug("Cross-match started", terms=len(cleaned), documents=len(self.store))
        return [self.match_term(term) for term in cleaned]
