"""Approximate matching of a query inside a single field."""

from typing import NamedTuple, Optional

from rapidfuzz import fuzz

from .normalizer import TextNormalizer


class FieldMatch(NamedTuple):
    """Score and aligned span of a query inside one field value."""

    score: float
    start: int
    end: int


class FuzzyMatcher:
    """Scores how closely a query occurs somewhere inside a text."""

    def __init__(self, threshold: float = 0.15, min_match_char_length: int = 2) -> None:
        """
        Initialize the fuzzy matcher.

        Args:
            threshold: Highest field score that still counts as a match,
                0.0 only accepts perfect matches and 1.0 accepts anything
            min_match_char_length: Shortest query that may match at all
        """
        self.threshold = threshold
        self.min_match_char_length = min_match_char_length
        self.normalizer = TextNormalizer()

    @property
    def score_cutoff(self) -> float:
        """Threshold expressed as a rapidfuzz similarity (0-100)."""
        return (1.0 - self.threshold) * 100

    def match(self, query: str, text: Optional[str]) -> Optional[FieldMatch]:
        """
        Find the best approximate occurrence of a query in a text.

        Both arguments are normalized here, so callers may pass raw values.
        The alignment ignores where in the text the query lands, and long
        texts are not penalised for their length.

        Args:
            query: Search query
            text: Field value to search in

        Returns:
            FieldMatch with a score where 0.0 is perfect, or None when the
            best alignment is worse than the threshold
        """
        normalized_query = self.normalizer.normalize(query).strip()
        normalized_text = self.normalizer.normalize(text)

        if len(normalized_query) < self.min_match_char_length or not normalized_text:
            return None

        if len(normalized_text) < len(normalized_query):
            # A field shorter than the query must match as a whole
            similarity = fuzz.ratio(
                normalized_query, normalized_text, score_cutoff=self.score_cutoff
            )
            if not similarity:
                return None
            return FieldMatch(self._to_score(similarity), 0, len(normalized_text))

        alignment = fuzz.partial_ratio_alignment(
            normalized_query, normalized_text, score_cutoff=self.score_cutoff
        )
        if alignment is None:
            return None
        return FieldMatch(self._to_score(alignment.score), alignment.dest_start, alignment.dest_end)

    def _to_score(self, similarity: float) -> float:
        """Convert a rapidfuzz similarity into a 0-1 distance score."""
        return max(0.0, min(1.0, 1.0 - similarity / 100.0))
