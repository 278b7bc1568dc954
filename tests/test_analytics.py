"""
Tests for citation analytics and consumer protection helpers.
"""

import pytest

from legal_citations.analytics import (
    analyze_citations,
    count_citations,
    extract_case_names,
    extract_dtpa_references,
    extract_legal_topics,
    extract_statute_references,
    format_consumer_statute,
    is_consumer_protection_statute,
)
from legal_citations.catalog.statutes import DTPA_CASE_LAW
from tests.conftest import SAMPLE_ANALYSIS

CODE = "Texas Business & Commerce Code"


# ---------------------------------------------------------------------------
# Consumer protection
# ---------------------------------------------------------------------------


class TestFormatConsumerStatute:
    """Consumer statute labels."""

    def test_violation(self):
        """A laundry-list item gets its violation label."""
        assert format_consumer_statute("17.46(b)(24)") == (
            f"{CODE} § 17.46(b)(24) - Failing to disclose information concerning goods "
            "or services known at the time of the transaction"
        )

    def test_section_with_subsection(self):
        """An unknown subsection uses the section label."""
        assert format_consumer_statute("17.50(b)") == f"{CODE} § 17.50(b) - Relief for Consumers"

    def test_unknown_violation_uses_section(self):
        """An unknown laundry-list item uses the 17.46 label."""
        assert format_consumer_statute("17.46(b)(99)") == (
            f"{CODE} § 17.46(b)(99) - Deceptive Trade Practices Unlawful (the 'laundry list')"
        )

    def test_home_solicitation(self):
        """Home Solicitation Act sections are labelled."""
        assert format_consumer_statute("601.051") == (
            f"{CODE} § 601.051 - Cancellation and Refund - Right to Cancel"
        )

    def test_unknown(self):
        """Unknown sections get the code name only."""
        assert format_consumer_statute("42.07") == f"{CODE} § 42.07"


class TestIsConsumerProtection:
    """Consumer protection statute detection."""

    @pytest.mark.parametrize("statute", ["17.50", "601.002", "DTPA claim", "Deceptive practices"])
    def test_consumer_statutes(self, statute):
        """DTPA sections and wording are detected."""
        assert is_consumer_protection_statute(statute)

    def test_other_statute(self):
        """Other sections are not."""
        assert not is_consumer_protection_statute("42.07")


class TestExtractDtpaReferences:
    """DTPA section scans."""

    def test_mixed_forms(self):
        """All section-mark spellings are found in order."""
        text = "See § 17.46(b)(24) and Section 17.50; also sec. 17.505."
        assert extract_dtpa_references(text) == ["17.46(b)(24)", "17.50", "17.505"]

    def test_other_sections_ignored(self):
        """Non-DTPA sections are skipped."""
        assert extract_dtpa_references("Penal Code § 42.07") == []

    def test_empty(self):
        """Empty text gives no references."""
        assert extract_dtpa_references("") == []


class TestCaseLaw:
    """Bundled DTPA case law."""

    def test_entries(self):
        """Case entries serialize to dicts."""
        assert len(DTPA_CASE_LAW) == 5
        assert DTPA_CASE_LAW[0].to_dict() == {
            "case_name": "Riverside National Bank v. Lewis",
            "citation": "603 S.W.2d 169 (Tex. 1980)",
            "summary": "Defined who qualifies as a 'consumer' under the DTPA",
        }


# ---------------------------------------------------------------------------
# Topics
# ---------------------------------------------------------------------------


class TestTopics:
    """Keyword and regex scans."""

    def test_legal_topics(self):
        """Topic keywords are found in table order."""
        text = "A premises liability and negligence claim for damages"
        assert extract_legal_topics(text) == ["premises liability", "negligence", "damages"]

    def test_statute_references(self):
        """Section numbers are found."""
        assert extract_statute_references("Under Section 101.021 and § 42.07") == ["101.021", "42.07"]

    def test_case_names(self):
        """Case names are found with or without the period."""
        assert extract_case_names("In Roe v. Wade and Smith v Jones") == ["Roe v. Wade", "Smith v Jones"]


# ---------------------------------------------------------------------------
# Citation statistics
# ---------------------------------------------------------------------------


class TestCountCitations:
    """Per-text citation counts."""

    def test_counts(self):
        """Repeated citations are counted."""
        counts = count_citations("(DTPA) and (DTPA) and (§ 17.50)")
        assert counts["(DTPA)"] == 2
        assert counts["(§ 17.50)"] == 1

    def test_empty(self):
        """Empty text gives no references."""
        assert not count_citations("")


class TestAnalyzeCitations:
    """Statistics over many documents."""

    def test_across_documents(self):
        """Totals, averages and law documents are computed."""
        documents = [
            {"text": SAMPLE_ANALYSIS},
            {"text": "No citations here."},
            {"body": "(DTPA)"},
        ]
        result = analyze_citations(documents)
        assert result["total_citations"] == 5
        assert result["unique_citations"] == 5
        assert result["documents_analyzed"] == 3
        assert result["documents_with_citations"] == 1
        assert result["avg_per_document"] == pytest.approx(5 / 3)
        assert result["law_documents"] == ["Texas Business & Commerce Code"]

    def test_custom_field(self):
        """The text field can be chosen."""
        result = analyze_citations([{"body": "(DTPA)"}, {"body": "(DTPA)"}], text_field="body")
        assert result["most_cited"] == [("(DTPA)", 2)]
        assert result["documents_with_citations"] == 2

    def test_no_documents(self):
        """No documents give zeroed statistics."""
        result = analyze_citations([])
        assert result["total_citations"] == 0
        assert result["avg_per_document"] == 0
        assert result["law_documents"] == []
