"""
Direct document URLs for well-known citations.
"""

from types import MappingProxyType

STATUTES_BASE_URL = "https://statutes.capitol.texas.gov/Docs"

CPRC_CHAPTER_101_URL = f"{STATUTES_BASE_URL}/CP/htm/CP.101.htm"
BC_CHAPTER_2_URL = f"{STATUTES_BASE_URL}/BC/htm/BC.2.htm"
BC_CHAPTER_17_URL = f"{STATUTES_BASE_URL}/BC/htm/BC.17.htm"
BC_CHAPTER_541_URL = f"{STATUTES_BASE_URL}/BC/htm/BC.541.htm"
LEMON_LAW_URL = f"{STATUTES_BASE_URL}/BC/htm/BC.2301.htm"

WAL_MART_V_WRIGHT_URL = "https://caselaw.findlaw.com/tx-supreme-court/1372854.html"
WAL_MART_V_GONZALEZ_URL = "https://caselaw.findlaw.com/tx-supreme-court/1031086.html"

# Keys are matched exactly as authored
HARDCODED_URLS = MappingProxyType(
    {
        "§ 101.021": CPRC_CHAPTER_101_URL,
        "Texas Civil Practice and Remedies Code": f"{STATUTES_BASE_URL}/CP/htm/CP.75.htm",
        "Texas Lemon Law": LEMON_LAW_URL,
        "Magnuson-Moss Warranty Act": "https://www.law.cornell.edu/uscode/text/15/2301",
        "Deceptive Trade Practices Act": BC_CHAPTER_17_URL,
        "DTPA": BC_CHAPTER_17_URL,
        "Texas Business & Commerce Code": BC_CHAPTER_17_URL,
        "Texas Motor Vehicle Commission Code": f"{STATUTES_BASE_URL}/OC/htm/OC.2301.htm",
        "Chapter 573": LEMON_LAW_URL,
        "Wal-Mart Stores, Inc. v. Wright": WAL_MART_V_WRIGHT_URL,
        "Wal-Mart Stores, Inc. v. Gonzalez": WAL_MART_V_GONZALEZ_URL,
    }
)
