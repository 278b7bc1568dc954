"""
Statute description tables.

Texas Business & Commerce Code sections used to annotate citations with a
human-readable description. All tables are read-only mappings shared across
the process.
"""

from dataclasses import dataclass
from types import MappingProxyType

# Deceptive Trade Practices-Consumer Protection Act, Subchapter E of Chapter 17
DTPA_SECTIONS = MappingProxyType(
    {
        "17.41": "Purpose of the DTPA (legislative intent)",
        "17.42": "Waivers: Void",
        "17.43": "Cumulative Remedies",
        "17.44": "Construction and Application of the DTPA",
        "17.45": "Definitions under the DTPA",
        "17.46": "Deceptive Trade Practices Unlawful (the 'laundry list')",
        "17.47": "Restraining Orders",
        "17.48": "Duty of District and County Attorney",
        "17.49": "Exemptions",
        "17.50": "Relief for Consumers",
        "17.505": "Settlement Procedures",
        "17.5051": "Mediation",
        "17.5052": "Offers of Settlement",
        "17.506": "Damages: Defenses",
        "17.55": "Promotional Material",
        "17.555": "Indemnity",
        "17.56": "Venue",
        "17.565": "Limitation",
        "17.57": "Subpoenas",
        "17.58": "Voluntary Compliance",
        "17.59": "Post Judgment Relief",
        "17.60": "Reports and Examinations",
        "17.61": "Civil Investigative Demand",
        "17.62": "Penalties",
        "17.63": "Application of the DTPA",
    }
)

# The "laundry list" of enumerated violations in 17.46(b)
DTPA_VIOLATIONS = MappingProxyType(
    {
        "17.46(b)(1)": "Passing off goods or services as those of another",
        "17.46(b)(2)": (
            "Causing confusion about the source, sponsorship, approval, "
            "or certification of goods or services"
        ),
        "17.46(b)(3)": "Causing confusion about affiliation, connection, or association with another",
        "17.46(b)(4)": "Using deceptive representations about geographic origin",
        "17.46(b)(5)": "Representing goods or services have characteristics, uses, benefits they do not have",
        "17.46(b)(6)": (
            "Representing goods are original or new if they are deteriorated, "
            "reconditioned, or secondhand"
        ),
        "17.46(b)(7)": (
            "Representing goods or services are of a particular standard, quality, "
            "or grade if they are of another"
        ),
        "17.46(b)(8)": "Disparaging goods, services, or business by false or misleading representations",
        "17.46(b)(9)": "Advertising goods or services with intent not to sell them as advertised",
        "17.46(b)(10)": (
            "Advertising with intent not to supply a reasonable demand, "
            "for the purpose of bait-and-switch"
        ),
        "17.46(b)(11)": "Making false or misleading statements about price reductions",
        "17.46(b)(12)": "Representing that an agreement confers rights which it does not",
        "17.46(b)(13)": (
            "Knowingly making false or misleading statements about the need for "
            "parts, replacement, or repair"
        ),
        "17.46(b)(14)": "Misrepresenting the authority of a representative to claim special price or advantage",
        "17.46(b)(17)": (
            "Advertising under the guise of obtaining sales personnel when the "
            "purpose is to sell to the personnel"
        ),
        "17.46(b)(20)": "Selling a warranty without disclosing terms, conditions, and limitations conspicuously",
        "17.46(b)(24)": (
            "Failing to disclose information concerning goods or services known "
            "at the time of the transaction"
        ),
    }
)

# Home Solicitation Act, Chapter 601
HOME_SOLICITATION_PROVISIONS = MappingProxyType(
    {
        "601.002": "Definitions under Home Solicitation Act",
        "601.051": "Cancellation and Refund - Right to Cancel",
        "601.052": "Notice of Cancellation Required",
        "601.053": "Form of Notice of Cancellation",
        "601.103": "Violation of Home Solicitation Act is a deceptive trade practice",
    }
)

# Every section-level description, keyed by section number
STATUTE_DESCRIPTIONS = MappingProxyType({**DTPA_SECTIONS, **HOME_SOLICITATION_PROVISIONS})

# Bare numbers that analyses commonly use as shorthand for "17.<n>"
SHORTHAND_DTPA_SECTIONS: frozenset[str] = frozenset({"50", "505", "501"})


@dataclass(frozen=True)
class CaseLawEntry:
    """A leading DTPA decision."""

    case_name: str
    citation: str
    summary: str

    def to_dict(self) -> dict:
        return {"case_name": self.case_name, "citation": self.citation, "summary": self.summary}


DTPA_CASE_LAW: tuple[CaseLawEntry, ...] = (
    CaseLawEntry(
        "Riverside National Bank v. Lewis",
        "603 S.W.2d 169 (Tex. 1980)",
        "Defined who qualifies as a 'consumer' under the DTPA",
    ),
    CaseLawEntry(
        "Spradling v. Williams",
        "566 S.W.2d 561 (Tex. 1978)",
        "Established treble damages for deceptive practices",
    ),
    CaseLawEntry(
        "Woods v. Littleton",
        "554 S.W.2d 662 (Tex. 1977)",
        "Defined 'knowingly' under the DTPA",
    ),
    CaseLawEntry(
        "Cameron v. Terrell & Garrett, Inc.",
        "618 S.W.2d 535 (Tex. 1981)",
        "Consumer doesn't need privity with the defendant to sue under DTPA",
    ),
    CaseLawEntry(
        "PPG Industries, Inc. v. JMB/Houston Centers",
        "146 S.W.3d 79 (Tex. 2004)",
        "DTPA claims generally cannot be assigned to other parties",
    ),
)


def describe_section(section: str, subsection: str = "") -> str | None:
    """
    Look up the most specific description for a section reference.

    Violation-level entries ("17.46(b)(1)") win over the section-level
    entry ("17.46").

    Args:
        section: Section number, e.g. "17.46"
        subsection: Trailing subsection markers, e.g. "(b)(1)"

    Returns:
        Description or None if the section is unknown
    """
    if subsection:
        violation = DTPA_VIOLATIONS.get(f"{section}{subsection}")
        if violation:
            return violation
    return STATUTE_DESCRIPTIONS.get(section)
