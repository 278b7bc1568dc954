"""
Tests for citation extraction and the pattern catalog.
"""

import re

from legal_citations.catalog.patterns import CITATION_PATTERNS, CitationPattern
from legal_citations.core.extractor import CitationExtractor, extract_citations
from tests.conftest import SAMPLE_ANALYSIS, SAMPLE_CODE_CITATION


# ---------------------------------------------------------------------------
# Pattern catalog
# ---------------------------------------------------------------------------


class TestPatternCatalog:
    """Ordering and naming of the pattern catalog."""

    def test_catalog_is_ordered_tuple(self):
        """The catalog should be a tuple in priority order."""
        assert isinstance(CITATION_PATTERNS, tuple)
        assert CITATION_PATTERNS[0].name == "texas_code_section"
        assert CITATION_PATTERNS[-1].name == "case_name_emphasis"

    def test_pattern_names_unique(self):
        """Pattern names should be unique."""
        names = [p.name for p in CITATION_PATTERNS]
        assert len(names) == len(set(names))

    def test_patterns_are_case_insensitive(self):
        """Lowercase citations should still be recognised."""
        assert extract_citations("(tex. bus. & com. code § 17.46)") == ["(tex. bus. & com. code § 17.46)"]


# ---------------------------------------------------------------------------
# Statute citations
# ---------------------------------------------------------------------------


class TestStatuteCitations:
    """Parenthetical statute citations."""

    def test_parenthetical_code_citation(self):
        """A code citation in parentheses is extracted whole."""
        text = f"See {SAMPLE_CODE_CITATION} for details."
        assert extract_citations(text) == [SAMPLE_CODE_CITATION]

    def test_html_escaped_forms(self):
        """Entity-encoded ampersands and section signs should match."""
        citation = "(Tex. Bus. &amp; Com. Code &sect; 17.46)"
        assert extract_citations(f"See {citation} here.") == [citation]

    def test_long_form_code_name_with_subsections(self):
        """Spelled-out code names with subsections should match."""
        citation = "(Texas Business and Commerce Code Section 17.50(b)(1))"
        assert extract_citations(f"Relief {citation}.") == [citation]

    def test_annotated_code_citation(self):
        """"Code Ann." citations should match."""
        citation = "(Tex. Civ. Prac. & Rem. Code Ann. § 101.021)"
        assert extract_citations(citation) == [citation]

    def test_parenthetical_section(self):
        """A bare section in parentheses keeps its subsections."""
        text = "This is a laundry-list violation (§ 17.46(b)(24))."
        assert extract_citations(text) == ["(§ 17.46(b)(24))"]

    def test_dtpa_section(self):
        """DTPA-prefixed sections should match."""
        assert extract_citations("Damages (DTPA § 17.50) apply.") == ["(DTPA § 17.50)"]

    def test_parenthetical_act(self):
        """Named acts in parentheses should match."""
        text = "claims under the consumer statute (Texas Deceptive Trade Practices-Consumer Protection Act)"
        assert extract_citations(text) == ["(Texas Deceptive Trade Practices-Consumer Protection Act)"]

    def test_parenthetical_chapter(self):
        """Chapter references to a code should match."""
        citation = "(Chapter 17 of the Texas Business & Commerce Code)"
        assert extract_citations(f"See {citation}.") == [citation]

    def test_bare_section_numbers_not_matched(self):
        """Inline references without parentheses are left to the enricher."""
        assert extract_citations("Under 17.46 and § 17.50 the seller is liable.") == []

    def test_empty_text(self):
        """Empty text gives no citations."""
        assert extract_citations("") == []

    def test_no_citations(self):
        """Text without citations gives an empty list."""
        assert extract_citations("The buyer inspected the house twice.") == []


# ---------------------------------------------------------------------------
# Case names
# ---------------------------------------------------------------------------


class TestCaseNames:
    """Italicised and emphasised case names."""

    def test_asterisk_case_name(self):
        """Markdown italics around a case name should match."""
        assert extract_citations("See *Wal-Mart Stores, Inc. v. Wright*.") == [
            "*Wal-Mart Stores, Inc. v. Wright*"
        ]

    def test_bold_case_name(self):
        """Markdown bold around a case name should match."""
        assert extract_citations("**Logan v. Mullis** controls.") == ["**Logan v. Mullis**"]

    def test_curly_apostrophe(self):
        """Curly apostrophes in party names should match."""
        assert extract_citations("In *O’Neal v. Sears* the court held") == ["*O’Neal v. Sears*"]

    def test_encoded_apostrophe(self):
        """Entity-encoded apostrophes in party names should match."""
        assert extract_citations("In *O&#39;Neal v. Sears* the court held") == ["*O&#39;Neal v. Sears*"]

    def test_emphasis_tag(self):
        """An <em> case name should match with its tags."""
        text = "<p>Compare <em>Riverside National Bank v. Lewis</em>.</p>"
        assert extract_citations(text) == ["<em>Riverside National Bank v. Lewis</em>"]

    def test_emphasis_without_case_name_ignored(self):
        """Emphasis without "v." is not a case name."""
        assert extract_citations("*Note:* this is *important*") == []


# ---------------------------------------------------------------------------
# Ordering and deduplication
# ---------------------------------------------------------------------------


class TestOrdering:
    """First-occurrence order and exact-string deduplication."""

    def test_first_occurrence_order_without_duplicates(self):
        """Repeats are dropped and first positions kept."""
        text = "(§ 17.50) and *Smith v. Jones*, again (§ 17.50), then (DTPA) and *Smith v. Jones*."
        assert extract_citations(text) == ["(§ 17.50)", "*Smith v. Jones*", "(DTPA)"]

    def test_different_formats_not_merged(self):
        """Different spellings of one section stay separate."""
        text = "(§ 17.46) and (Section 17.46)"
        assert extract_citations(text) == ["(§ 17.46)", "(Section 17.46)"]

    def test_sample_analysis(self):
        """The sample analysis yields its five citations in order."""
        assert extract_citations(SAMPLE_ANALYSIS) == [
            "(§ 17.46(b)(24))",
            SAMPLE_CODE_CITATION,
            "(Section 17.50)",
            "*Wal-Mart Stores, Inc. v. Wright*",
            "*Riverside National Bank v. Lewis*",
        ]


# ---------------------------------------------------------------------------
# Extractor class
# ---------------------------------------------------------------------------


class TestCitationExtractor:
    """The extractor class API."""

    def test_finditer_positions(self):
        """Matches should carry positions and the pattern name."""
        text = f"See {SAMPLE_CODE_CITATION}."
        matches = CitationExtractor().finditer(text)
        assert len(matches) == 1
        match = matches[0]
        assert text[match.start : match.end] == SAMPLE_CODE_CITATION
        assert match.pattern == "texas_code_section"

    def test_count(self):
        """Repeated citations should be counted."""
        counts = CitationExtractor().count("(DTPA) then (DTPA) then (§ 17.50)")
        assert counts["(DTPA)"] == 2
        assert counts["(§ 17.50)"] == 1

    def test_custom_patterns(self):
        """A custom pattern tuple replaces the catalog."""
        extractor = CitationExtractor(
            patterns=(CitationPattern("rule", re.compile(r"Rule\s+\d+", re.IGNORECASE)),)
        )
        assert extractor.extract("Rule 91a and rule 166a; Rule 91 again") == ["Rule 91", "rule 166"]
