"""
Consumer protection statute helpers.
"""

import re

from ..catalog.statutes import DTPA_SECTIONS, DTPA_VIOLATIONS, HOME_SOLICITATION_PROVISIONS

CODE_NAME = "Texas Business & Commerce Code"

_DTPA_REFERENCE = re.compile(r"(?:§|section|sec\.?)\s*17\.\d+(?:\([a-z]\)(?:\(\d+\))?)?", re.IGNORECASE)
_REFERENCE_PREFIX = re.compile(r"^(?:§|section|sec\.?)\s*", re.IGNORECASE)


def format_consumer_statute(statute: str) -> str:
    """Format a consumer protection statute for display."""
    if statute.startswith("17.46(b)") and statute in DTPA_VIOLATIONS:
        return f"{CODE_NAME} § {statute} - {DTPA_VIOLATIONS[statute]}"

    base = statute.split("(")[0]
    if statute.startswith("17.") and base in DTPA_SECTIONS:
        return f"{CODE_NAME} § {statute} - {DTPA_SECTIONS[base]}"

    if statute.startswith("601.") and statute in HOME_SOLICITATION_PROVISIONS:
        return f"{CODE_NAME} § {statute} - {HOME_SOLICITATION_PROVISIONS[statute]}"

    return f"{CODE_NAME} § {statute}"


def is_consumer_protection_statute(statute: str) -> bool:
    return (
        statute.startswith("17.")
        or statute.startswith("601.")
        or "DTPA" in statute
        or "deceptive" in statute.lower()
    )


def extract_dtpa_references(text: str) -> list[str]:
    """
    Extract DTPA section numbers referenced in text.

    "See § 17.46(b)(24) and Section 17.50" -> ["17.46(b)(24)", "17.50"]
    """
    return [
        _REFERENCE_PREFIX.sub("", match.group(0)).strip()
        for match in _DTPA_REFERENCE.finditer(text or "")
    ]
