"""Unit tests for the cross-match CSV export."""

import csv
import io

from proposal_search.core.export import CSV_HEADER, rows_to_csv
from proposal_search.models.response import CrossMatchRow


class TestRowsToCsv:
    """Test cases for rows_to_csv."""
    
    def test_header_only(self):
        """Test exporting no rows."""
        assert rows_to_csv([]) == (
            '"Terms","Fuzzy Search Results","Contains Match Results","Exact Match Results"\n'
        )
    
    def test_ids_are_joined_in_one_cell(self):
        """Test that id lists stay in a single quoted column."""
        rows = [CrossMatchRow(term="M82", fuzzy=["101", "102"], contains=["101"], exact=[])]
        lines = rows_to_csv(rows).splitlines()
        
        assert lines[1] == '"M82","101, 102","101",""'
    
    def test_quotes_are_escaped(self):
        """Test embedded quotes and delimiters in a term."""
        rows = [CrossMatchRow(term='say "hi", twice')]
        text = rows_to_csv(rows)
        
        assert '"say ""hi"", twice","","",""' in text
        parsed = list(csv.reader(io.StringIO(text)))
        assert parsed[0] == CSV_HEADER
        assert parsed[1] == ['say "hi", twice', "", "", ""]
    
    def test_row_order_follows_input(self, scenario_engine):
        """Test exporting a cross-match, duplicates included."""
        result = scenario_engine.cross_match("999, M82, 999")
        parsed = list(csv.reader(io.StringIO(rows_to_csv(result.rows))))
        
        assert [row[0] for row in parsed[1:]] == ["999", "M82", "999"]
        assert parsed[2][2] == "101"
