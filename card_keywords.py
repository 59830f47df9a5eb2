"""
Static vocabularies used by the business card field classifiers.

Everything here is immutable configuration data: job-title keywords,
company suffixes, postal address words, top-level domains and mailbox
names that never belong to a person.
"""

import re
from typing import FrozenSet, Iterable, Optional, Pattern

DESIGNATION_KEYWORDS: FrozenSet[str] = frozenset({
    # Executive
    "ceo", "cto", "cfo", "coo", "cio", "cmo", "cso", "cpo", "cdo", "cco",
    "chief", "chairman", "chairwoman", "chairperson", "president",
    "vice president", "vp", "svp", "evp", "avp", "founder", "co-founder",
    "cofounder", "co founder", "owner", "proprietor", "partner", "managing partner",
    "managing director", "director", "executive", "principal", "head",
    "board member", "trustee", "secretary", "treasurer",
    # Management
    "manager", "general manager", "gm", "supervisor", "superintendent",
    "lead", "team lead", "leader", "officer", "administrator", "coordinator",
    "controller", "comptroller", "in-charge", "in charge", "incharge",
    # Technical
    "engineer", "developer", "programmer", "architect", "designer",
    "analyst", "scientist", "researcher", "technician", "technologist",
    "devops", "sre", "tester", "qa",
    # Commercial and operational
    "consultant", "advisor", "adviser", "specialist", "associate",
    "representative", "rep", "agent", "broker", "sales", "marketing",
    "account executive", "business development", "strategist", "planner",
    "buyer", "merchandiser", "recruiter", "hr", "human resources",
    "operations", "logistics", "procurement", "assistant",
    "trainee", "clerk", "receptionist", "executive assistant",
    # Seniority qualifiers
    "senior", "junior", "deputy", "assistant manager",
    # Domain specific
    "accountant", "auditor", "attorney", "lawyer", "advocate", "counsel",
    "solicitor", "paralegal", "notary", "physician", "surgeon", "doctor",
    "dentist", "nurse", "pharmacist", "therapist", "psychologist",
    "veterinarian", "professor", "lecturer", "teacher", "instructor",
    "tutor", "dean", "principal investigator", "editor", "journalist",
    "writer", "author", "photographer", "artist", "producer",
    "realtor", "real estate", "contractor", "electrician", "plumber",
    "mechanic", "chef", "pilot", "captain", "inspector",
    "surveyor", "underwriter", "actuary", "banker", "trader", "investor",
    "coach", "trainer", "counselor", "counsellor", "evangelist",
})

COMPANY_SUFFIXES: FrozenSet[str] = frozenset({
    "inc", "incorporated", "llc", "llp", "lp", "ltd", "limited", "plc",
    "corp", "corporation", "co", "company", "companies", "group",
    "holdings", "enterprises", "enterprise", "industries", "international",
    "solutions", "technologies", "technology", "tech", "systems",
    "services", "consulting", "consultants", "associates", "partners",
    "labs", "laboratories", "studio", "studios", "agency", "ventures",
    "capital", "foundation", "institute", "pvt", "private", "gmbh", "ag",
    "sa", "bv", "nv", "pty", "infotech", "software", "networks",
    "global", "media", "logistics", "pharma", "pharmaceuticals", "bank",
    "trust", "fund", "firm",
})

ADDRESS_KEYWORDS: FrozenSet[str] = frozenset({
    "street", "st", "road", "rd", "avenue", "ave", "av", "boulevard",
    "blvd", "suite", "ste", "floor", "fl", "flr", "building", "bldg",
    "tower", "city", "zip", "zipcode", "pin", "pincode", "postcode",
    "lane", "ln", "drive", "dr", "court", "ct", "apartment", "apt",
    "unit", "block", "sector", "plot", "nagar", "colony", "highway",
    "hwy", "parkway", "pkwy", "place", "pl", "plaza", "square", "sq",
    "terrace", "way", "circle", "cir", "po box", "p.o. box", "box",
    "district", "state", "province", "county", "industrial area",
    "estate", "park", "main", "cross", "marg", "chowk", "house",
})

# Multi-label suffixes come first so "co.uk" wins over "uk".
KNOWN_TLDS = (
    "co.in", "co.uk", "co.jp", "co.nz", "co.za", "com.au", "com.br",
    "com.sg", "org.uk", "ac.uk", "gov.in", "net.in", "org.in",
    "com", "net", "org", "io", "edu", "gov", "biz", "info", "me", "tv",
    "us", "uk", "ca", "au", "de", "fr", "jp", "cn", "in", "app", "dev",
    "tech", "online", "store", "shop", "site", "xyz", "club", "pro",
    "asia", "eu", "co", "ai", "nl", "se", "ch", "es", "it", "sg", "ae",
)

FREE_MAIL_DOMAINS: FrozenSet[str] = frozenset({
    "gmail.com", "googlemail.com", "yahoo.com", "yahoo.co.in",
    "yahoo.co.uk", "ymail.com", "outlook.com", "hotmail.com", "live.com",
    "msn.com", "aol.com", "icloud.com", "me.com", "mac.com", "proton.me",
    "protonmail.com", "zoho.com", "gmx.com", "mail.com", "rediffmail.com",
    "yandex.com",
})

ROLE_MAILBOXES: FrozenSet[str] = frozenset({
    "info", "sales", "contact", "contactus", "admin", "office", "hello",
    "support", "enquiry", "enquiries", "inquiry", "inquiries", "mail",
    "team", "hr", "careers", "jobs", "billing", "accounts", "marketing",
    "help", "service", "webmaster", "noreply", "no-reply",
})


def _alternatives(keywords: Iterable[str]) -> str:
    ordered = sorted(set(keywords), key=len, reverse=True)
    return "|".join(re.escape(keyword) for keyword in ordered)


def keyword_pattern(keywords: Iterable[str], substring_min_length: Optional[int] = None) -> Pattern[str]:
    """
    Compile a case-insensitive pattern matching any keyword as a whole word.

    With ``substring_min_length`` set, keywords at least that long also
    match inside a longer word ('Projectmanager', 'Salesforce'); shorter
    ones such as 'cto' or 'hr' still need word boundaries.
    """
    keywords = set(keywords)
    if substring_min_length is None:
        loose = set()
    else:
        loose = {keyword for keyword in keywords if len(keyword) >= substring_min_length}
    whole = keywords - loose

    parts = []
    if whole:
        parts.append(r"(?<![A-Za-z])(?:" + _alternatives(whole) + r")(?![A-Za-z])")
    if loose:
        parts.append(r"(?:" + _alternatives(loose) + r")")
    return re.compile("|".join(parts), re.IGNORECASE)


# Titles this long also match inside longer words.
DESIGNATION_SUBSTRING_MIN_LENGTH = 5

DESIGNATION_PATTERN = keyword_pattern(DESIGNATION_KEYWORDS, DESIGNATION_SUBSTRING_MIN_LENGTH)
COMPANY_SUFFIX_PATTERN = keyword_pattern(COMPANY_SUFFIXES)
ADDRESS_PATTERN = keyword_pattern(ADDRESS_KEYWORDS)

# Post-nominal letters stripped from the end of a name line.
CREDENTIALS: FrozenSet[str] = frozenset({
    "mba", "phd", "ph.d", "md", "m.d", "dds", "dmd", "jd", "esq",
    "cpa", "cfa", "pmp", "rn", "msn", "bsn", "lpn",
    "dnp", "msc", "bsc", "bcom", "mcom", "llb", "llm", "fca", "acca",
})
