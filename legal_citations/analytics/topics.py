"""Keyword and regex scans for legal topics, section numbers and case names."""

import re

LEGAL_TOPICS = (
    "personal injury", "premises liability", "negligence", "tort",
    "civil practice", "CPRC", "family law", "divorce", "custody",
    "property division", "criminal", "DUI", "DWI", "theft",
    "assault", "battery", "contract", "breach", "damages",
    "real estate", "landlord tenant", "eviction", "workers compensation",
    "employment", "discrimination", "estate planning", "probate", "will",
    "trust", "guardianship", "business formation", "LLC", "corporation",
    "insurance", "malpractice", "wrongful death", "product liability",
)

_STATUTE_REFERENCE = re.compile(r"(?:\bsection|§)\s*\d+(?:\.\d+)*\b", re.IGNORECASE)
_STATUTE_PREFIX = re.compile(r"^(?:section|§)\s*", re.IGNORECASE)
_CASE_NAME = re.compile(r"\b[A-Z][a-z]+\s+v\.?\s+[A-Z][a-z]+\b")


def extract_legal_topics(text: str) -> list[str]:
    """Topics from LEGAL_TOPICS mentioned anywhere in the text."""
    lowered = text.lower()
    return [topic for topic in LEGAL_TOPICS if topic.lower() in lowered]


def extract_statute_references(text: str) -> list[str]:
    """Section numbers such as "101.021" from "Section 101.021" or "§ 101.021"."""
    return [_STATUTE_PREFIX.sub("", m.group(0)) for m in _STATUTE_REFERENCE.finditer(text)]


def extract_case_names(text: str) -> list[str]:
    """Simple "Roe v. Wade" style case names."""
    return _CASE_NAME.findall(text)
