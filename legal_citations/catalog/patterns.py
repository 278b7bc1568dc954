"""
Citation pattern catalog.

Ordered recognizers for statute and case-law citations embedded in narrative
legal text. Earlier entries are more specific and win when two patterns
produce the same citation string.

Statute patterns only recognize parenthetical citations, e.g.
"(Tex. Bus. & Com. Code § 17.46)". A bare "17.46" in running text is left to
the context enricher. Upstream text is often partially HTML-escaped, so
ampersands, section signs and apostrophes are accepted in encoded form too.
"""

import re
from dataclasses import dataclass
from re import Pattern

AMPERSAND = r"(?:&amp;|&#38;|&)"
APOSTROPHE = r"(?:'|’|‘|&#39;|&#x27;|&rsquo;|&lsquo;|&apos;)"
SECTION_SIGN = r"(?:§{1,2}|&sect;|&#167;|Sec(?:tion|s?\.))"
SECTION_NUMBER = r"\d+\.\d+(?:\([a-z0-9]{1,3}\))*"

_CODE_WORD = rf"(?:[A-Za-z.]+|{AMPERSAND})"
_PARTY = rf"(?:[\w.,\-\s]|{AMPERSAND}|{APOSTROPHE})"

_FLAGS = re.IGNORECASE


@dataclass(frozen=True)
class CitationPattern:
    """A named recognizer. Priority is the position in the catalog."""

    name: str
    regex: Pattern[str]

    def finditer(self, text: str):
        return self.regex.finditer(text)


CITATION_PATTERNS: tuple[CitationPattern, ...] = (
    # (Tex. Bus. & Com. Code § 17.46), (Texas Civil Practice and Remedies Code Ann. § 101.021)
    CitationPattern(
        "texas_code_section",
        re.compile(
            rf"\(Tex(?:as|\.)\s+{_CODE_WORD}(?:\s+{_CODE_WORD})*?\s+Code(?:\s+Ann\.)?,?"
            rf"\s*{SECTION_SIGN}\s*{SECTION_NUMBER}\)",
            _FLAGS,
        ),
    ),
    # (DTPA § 17.50)
    CitationPattern(
        "dtpa_section",
        re.compile(rf"\(DTPA\s+{SECTION_SIGN}\s*{SECTION_NUMBER}\)", _FLAGS),
    ),
    # (§ 17.46(b)(24)), (Section 17.50)
    CitationPattern(
        "parenthetical_section",
        re.compile(rf"\({SECTION_SIGN}\s*{SECTION_NUMBER}\)", _FLAGS),
    ),
    # (Chapter 17 of the Texas Business & Commerce Code)
    CitationPattern(
        "parenthetical_chapter",
        re.compile(
            rf"\(Chapter\s+\d+(?:\s+of)?(?:\s+the)?\s+Tex(?:as|\.)\s+{_CODE_WORD}"
            rf"(?:\s+{_CODE_WORD})*?\s+Code\)",
            _FLAGS,
        ),
    ),
    # (Texas Deceptive Trade Practices-Consumer Protection Act), (DTPA)
    CitationPattern(
        "parenthetical_act",
        re.compile(
            r"\((?:the\s+)?(?:Texas\s+)?"
            r"(?:Deceptive\s+Trade\s+Practices(?:\s*[-–]\s*Consumer\s+Protection)?\s+Act"
            r"|DTPA|Lemon\s+Law|Home\s+Solicitation\s+Act|Debt\s+Collection\s+Act"
            r"|Magnuson-?Moss\s+Warranty\s+Act)\)",
            _FLAGS,
        ),
    ),
    # *Wal-Mart Stores, Inc. v. Wright*, **Logan v. Mullis**
    CitationPattern(
        "case_name_asterisk",
        re.compile(rf"(\*{{1,2}})(?=[A-Z0-9])({_PARTY}{{1,200}}?\s+v\.\s+{_PARTY}{{1,200}}?)\1(?!\*)", _FLAGS),
    ),
    # <em>Riverside National Bank v. Lewis</em>
    CitationPattern(
        "case_name_emphasis",
        re.compile(r"<(em|i)>([^<>]{1,200}?\s+v\.\s+[^<>]{1,200}?)</\1>", _FLAGS),
    ),
)
