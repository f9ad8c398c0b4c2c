"""Text normalization utilities shared by the matchers."""

import re
from typing import List, Optional, Pattern

# Characters that count as part of a word for whole-word matching
WORD_CHARS = "a-zA-Z0-9_"


class TextNormalizer:
    """Handles case folding, term splitting and whole-word patterns."""
    
    def normalize(self, text: Optional[str]) -> str:
        """
        Normalize text for case-insensitive comparison.
        
        Args:
            text: Input text, may be None
            
        Returns:
            Lowercased text, empty string for missing input
        """
        if not text:
            return ""
        return text.lower()
    
    def parse_terms(self, raw: str, delimiter: str = ",") -> List[str]:
        """
        Split a pasted list of terms.
        
        Args:
            raw: Delimited text, e.g. "NGC 1068, M82, 1234"
            delimiter: Separator between terms
            
        Returns:
            Trimmed, non-empty terms in input order (duplicates kept)
        """
        if not raw:
            return []
        return self.clean_terms(raw.split(delimiter))
    
    def clean_terms(self, terms: List[str]) -> List[str]:
        """Trim terms and drop the blank ones."""
        return [term.strip() for term in terms if term and term.strip()]
    
    def word_boundary_pattern(self, term: str) -> Pattern[str]:
        """
        Compile a whole-word pattern for a term.
        
        The term is normalized and escaped, so punctuation such as ``M82+``
        or ``N.G.C.`` is matched literally.
        
        Args:
            term: The raw term
            
        Returns:
            Compiled pattern to run against normalized text
        """
        escaped = re.escape(self.normalize(term))
        return re.compile(rf"(?:^|[^{WORD_CHARS}]){escaped}(?:[^{WORD_CHARS}]|$)")
