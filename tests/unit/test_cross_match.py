"""Unit tests for the cross-match engine."""

import pytest

from proposal_search.core.cross_match import (
    CrossMatchEngine,
    contains_ids,
    exact_ids,
    fuzzy_ids,
)
from proposal_search.core.index import FuzzyIndex
from proposal_search.core.loader import load_document, load_documents
from proposal_search.core.store import DocumentStore


class TestCrossMatchEngine:
    """Test cases for the CrossMatchEngine class."""
    
    @pytest.fixture
    def engine(self, scenario_store, scenario_index):
        """Create a cross-match engine over the scenario corpus."""
        return CrossMatchEngine(scenario_store, scenario_index)
    
    @pytest.fixture
    def punctuated_store(self, blob_factory):
        """A corpus where regex metacharacters matter."""
        return DocumentStore(load_documents([
            ("lit.md", blob_factory(201, "Catalogue Work", "Observations of M82+ and N.G.C. catalogues")),
            ("decoy.md", blob_factory(202, "Decoy", "M821 and NXGXCX fields")),
        ]))
    
    def test_end_to_end_scenario(self, engine):
        """Test the three-document reference scenario."""
        rows = engine.run("M82, NGC 1068, 999")
        
        assert [row.term for row in rows] == ["M82", "NGC 1068", "999"]
        
        m82, ngc, missing = rows
        assert m82.contains == ["101"]
        assert m82.exact == ["101"]
        assert "101" in m82.fuzzy
        
        assert ngc.contains == ["102"]
        assert ngc.exact == ["102"]
        assert "102" in ngc.fuzzy
        
        assert missing.fuzzy == []
        assert missing.contains == []
        assert missing.exact == []
    
    def test_duplicate_terms_keep_rows(self, engine):
        """Test that repeated terms produce repeated rows in input order."""
        rows = engine.run(["M82", " m82 ", "M82"])
        
        assert [row.term for row in rows] == ["M82", "m82", "M82"]
        assert rows[0].contains == rows[1].contains == rows[2].contains == ["101"]
    
    @pytest.mark.parametrize("terms", ["", "   ", " , ,  ", [], ["", "  "]])
    def test_empty_batch(self, engine, terms):
        """Test that blank batches give no rows instead of an error."""
        assert engine.run(terms) == []
    
    def test_custom_delimiter(self, engine):
        """Test splitting raw text on another delimiter."""
        rows = engine.run("M82; NGC 1068", delimiter=";")
        
        assert [row.term for row in rows] == ["M82", "NGC 1068"]
    
    def test_deterministic(self, engine):
        """Test that the same batch gives the same rows twice."""
        terms = "M82, NGC, nucleus, 10, Target"
        
        assert engine.run(terms) == engine.run(terms)
    
    def test_partial_word_contains_but_not_exact(self, scenario_store):
        """Test that a word fragment is a substring hit only."""
        assert contains_ids(scenario_store, "M8") == ["101"]
        assert exact_ids(scenario_store, "M8") == []
    
    def test_id_substring_and_equality(self, scenario_store):
        """Test how the program id takes part in each mode."""
        assert contains_ids(scenario_store, "10") == ["101", "102", "103"]
        assert exact_ids(scenario_store, "10") == []
        
        assert contains_ids(scenario_store, "102") == ["102"]
        assert exact_ids(scenario_store, "102") == ["102"]
    
    def test_case_insensitive_text_fields(self, scenario_store):
        """Test that text fields ignore case in both modes."""
        assert contains_ids(scenario_store, "ACTIVE NUCLEUS") == ["102"]
        assert exact_ids(scenario_store, "Active Nucleus") == ["102"]
    
    def test_searches_investigators_and_instrument(self, blob_factory):
        """Test the metadata fields scanned besides title and content."""
        store = DocumentStore(load_documents([
            ("x.md", blob_factory(401, "T", "body", pi_and_co_pis='"PI: Vera Rubin"', instrument_mode="MIRI/MRS")),
        ]))
        
        assert exact_ids(store, "rubin") == ["401"]
        assert exact_ids(store, "MRS") == ["401"]
        assert contains_ids(store, "miri/m") == ["401"]
    
    def test_regex_metacharacters_are_literal(self, punctuated_store):
        """Test that punctuation in a term is matched as text."""
        assert exact_ids(punctuated_store, "N.G.C.") == ["201"]
        assert contains_ids(punctuated_store, "N.G.C.") == ["201"]
        assert exact_ids(punctuated_store, "M82+") == ["201"]
        assert contains_ids(punctuated_store, "M82+") == ["201"]
    
    @pytest.mark.parametrize("term", ["(", "[", "a|b", "\\", "*", "M82)", "?"])
    def test_pattern_syntax_does_not_raise(self, punctuated_store, term):
        """Test that terms that would be invalid patterns are safe."""
        exact = exact_ids(punctuated_store, term)
        contains = contains_ids(punctuated_store, term)
        
        assert set(exact) <= set(contains)
    
    def test_documents_without_id_are_skipped(self, scenario_documents):
        """Test that id-less documents never appear in any column."""
        store = DocumentStore(scenario_documents + [load_document("notes.md", "M82 notes")])
        
        assert contains_ids(store, "M82") == ["101"]
        assert exact_ids(store, "M82") == ["101"]
        assert fuzzy_ids(FuzzyIndex(store), "M82") == ["101"]
    
    def test_fuzzy_ids_are_unique(self, sample_engine):
        """Test that the fuzzy column holds each id once."""
        found = fuzzy_ids(sample_engine.index, "nir")
        
        assert len(found) == len(set(found))
    
    def test_exact_is_subset_of_contains(self, sample_engine):
        """Test that a whole-word hit is always a substring hit."""
        store = sample_engine.store
        words = set()
        for document in store.get_all():
            words.update(document.content.split())
            words.update((document.metadata.program_title or "").split())
        terms = sorted(words) + ["10", "1021", "NIRSpec/IFU", "M82+", "a.b", "", "Co-PIs:", "2744"]
        
        for term in terms:
            exact = set(exact_ids(store, term))
            contains = set(contains_ids(store, term))
            assert exact <= contains, term
