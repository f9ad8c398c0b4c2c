"""Performance benchmarks for the proposal search engine."""

import random

import pytest

from proposal_search.core.engine import SearchEngine
from proposal_search.core.index import FuzzyIndex

INSTRUMENTS = ["NIRSpec/IFU", "MIRI/MRS", "NIRCam/Imaging", "NIRISS/SOSS", "MIRI/Imaging"]
TARGETS = ["M82", "NGC 1068", "Abell 2744", "TRAPPIST-1", "SN 1987A", "Orion Bar", "WASP-39b"]
WORDS = ["galaxy", "outflow", "spectroscopy", "dust", "torus", "transit", "lensing",
         "cluster", "star", "formation", "molecular", "hydrogen", "redshift", "survey"]


class TestPerformanceBenchmarks:
    """Performance benchmark tests."""
    
    @pytest.fixture
    def large_engine(self):
        """Create a search engine over a few hundred synthetic proposals."""
        rng = random.Random(42)
        blobs = []
        for i in range(300):
            target = rng.choice(TARGETS)
            abstract = " ".join(rng.choice(WORDS) for _ in range(120))
            text = "\n".join([
                "---",
                f"id: {1000 + i}",
                f"program_title: {rng.choice(WORDS).title()} of {target}",
                f"instrument_mode: {rng.choice(INSTRUMENTS)}",
                f'pi_and_co_pis: "PI: Investigator {i}"',
                f"cycle: {rng.randint(1, 4)}",
                "type: GO",
                "---",
                f"We observe {target}. {abstract}",
            ])
            blobs.append((f"{1000 + i}.md", text))
        return SearchEngine.from_blobs(blobs)
    
    def test_single_search_performance(self, large_engine, benchmark):
        """Benchmark a single fuzzy search."""
        result = benchmark(large_engine.search, "molecular hydrogen")
        
        assert result.total_results > 0
    
    def test_cross_match_performance(self, large_engine, benchmark):
        """Benchmark a batch of tens of terms."""
        terms = TARGETS + WORDS + ["1001", "1150", "Investigator 7", "nircam"]
        
        result = benchmark.pedantic(large_engine.cross_match, args=(terms,), rounds=3, iterations=1)
        
        assert len(result.rows) == len(terms)
        assert result.rows[0].exact
    
    def test_index_build_performance(self, large_engine, benchmark):
        """Benchmark rebuilding the index from the store."""
        index = benchmark(FuzzyIndex, large_engine.store)
        
        assert len(index) == 300
