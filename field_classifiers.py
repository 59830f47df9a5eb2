"""
Line-based heuristics that pick the name, company, designation and
address of a business card.

The classifiers share an ExtractionContext. Each one reads what the
pattern extractors found and what earlier classifiers claimed, then
records its own result on the context so later classifiers can leave
those lines alone. They run in a fixed order:

    name -> company -> address -> designation

None of them raises; a field nobody can resolve stays ''.
"""

import re
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple

from card_keywords import (
    ADDRESS_PATTERN,
    COMPANY_SUFFIX_PATTERN,
    CREDENTIALS,
    DESIGNATION_PATTERN,
    KNOWN_TLDS,
    ROLE_MAILBOXES,
)
from config import ScannerSettings
from domain_deriver import DomainDerivation
from sanitizer import clean_general
from text_normalizer import CardLine

logger = logging.getLogger(__name__)

WEBSITE_HINT = re.compile(
    r"www\.|https?://|\.(?:" + "|".join(re.escape(tld) for tld in KNOWN_TLDS) + r")(?![a-z0-9-])",
    re.IGNORECASE,
)
TITLE_CASE_WORD = re.compile(r"^(?:[A-Z]')?[A-Z][a-z]+(?:[A-Z][a-z]+)?(?:-[A-Z][a-z]+)?\.?$")
INITIAL_WORD = re.compile(r"^[A-Z]\.?$")
UPPER_WORD = re.compile(r"^[A-Z][A-Z'.-]*$")
CAPITAL_RUN = re.compile(r"[A-Z]{3,}")
DIGIT = re.compile(r"\d")
DESIGNATION_SEPARATORS = " ,|/-–—:;"


@dataclass
class ExtractionContext:
    """Everything known about one card while its fields are being classified"""
    lines: List[CardLine]
    emails: List[str] = field(default_factory=list)
    phones: List[str] = field(default_factory=list)
    website_text: str = ""
    derived: DomainDerivation = field(default_factory=DomainDerivation)

    name: str = ""
    name_line: Optional[CardLine] = None
    provisional_designation: Optional[CardLine] = None
    company: str = ""
    company_line: Optional[CardLine] = None
    address: str = ""
    address_lines: List[CardLine] = field(default_factory=list)
    designation: str = ""

    def has_email(self, text: str) -> bool:
        lowered = text.lower()
        return any(email in lowered for email in self.emails)

    def has_phone(self, text: str) -> bool:
        return any(phone in text for phone in self.phones)

    def has_contact(self, text: str) -> bool:
        """True when the line carries an email, a phone number or a website"""
        return (
            "@" in text
            or self.has_email(text)
            or self.has_phone(text)
            or looks_like_website(text)
        )

    def claimed_indexes(self) -> Set[int]:
        """Line numbers already used by the name, company or address"""
        claimed = {line.index for line in self.address_lines}
        for line in (self.name_line, self.company_line):
            if line is not None:
                claimed.add(line.index)
        return claimed


def looks_like_website(text: str) -> bool:
    return bool(WEBSITE_HINT.search(text))


def has_designation_keyword(text: str) -> bool:
    return bool(DESIGNATION_PATTERN.search(text))


def has_company_suffix(text: str) -> bool:
    return bool(COMPANY_SUFFIX_PATTERN.search(text))


def _squash(value: str) -> str:
    return re.sub(r"[^a-z0-9]", "", value.lower())


# ---------------------------------------------------------------------------
# Name
# ---------------------------------------------------------------------------

def strip_credentials(line: str) -> str:
    """Remove trailing post-nominals such as ', MBA' or ' PhD' from a name line"""
    words = line.replace(",", " , ").split()
    while words and (words[-1] == "," or words[-1].lower().rstrip(".") in CREDENTIALS):
        if len(words) == 1:
            break
        words.pop()
    return " ".join(words).replace(" ,", ",").strip(" ,")


def looks_like_name(text: str) -> bool:
    """
    Shape test for a person's name: 1-4 words, either fully upper-case or
    Title Case. A lone upper-case word reads as an acronym ('IBM'), and a
    mixed-case line with more than one run of 3+ capitals is rejected too.
    """
    words = [word.strip(",") for word in text.split()]
    words = [word for word in words if word]
    if not 1 <= len(words) <= 4:
        return False

    if text.isupper():
        if len(words) < 2 or len(text) <= 1:
            return False
        return all(UPPER_WORD.match(word) for word in words)

    if len(CAPITAL_RUN.findall(text)) > 1:
        return False
    title_words = 0
    for word in words:
        if TITLE_CASE_WORD.match(word):
            title_words += 1
        elif not (INITIAL_WORD.match(word) or UPPER_WORD.match(word)):
            return False
    return title_words >= 1


def name_from_email(email: str) -> str:
    """'jane.smith@example.com' -> 'Jane Smith'; '' for role mailboxes or odd local parts"""
    local = email.split("@")[0].strip()
    if not local or local.lower() in ROLE_MAILBOXES:
        return ""
    words = [part for part in re.split(r"[._-]+", local) if part]
    if not 1 <= len(words) <= 4 or DIGIT.search(local):
        return ""
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def _matches_email(candidate: str, emails: Sequence[str]) -> bool:
    squashed = _squash(candidate)
    if len(squashed) < 3:
        return False
    for email in emails:
        local = _squash(email.split("@")[0])
        if len(local) >= 3 and (local == squashed or local in squashed or squashed in local):
            return True
    return False


def classify_name(ctx: ExtractionContext, settings: ScannerSettings) -> str:
    candidates: List[Tuple[CardLine, str]] = []

    for line in ctx.lines[:settings.name_scan_lines]:
        text = line.text
        if DIGIT.search(text) or ctx.has_contact(text):
            continue
        if has_designation_keyword(text):
            if ctx.provisional_designation is None:
                ctx.provisional_designation = line
            continue
        if has_company_suffix(text):
            continue
        candidate = strip_credentials(text)
        if looks_like_name(candidate):
            candidates.append((line, candidate))

    chosen: Optional[Tuple[CardLine, str]] = None
    for line, candidate in candidates:
        if _matches_email(candidate, ctx.emails):
            chosen = (line, candidate)
            break
    if chosen is None and candidates:
        chosen = candidates[0]

    if chosen is not None:
        ctx.name_line, ctx.name = chosen
        logger.debug("Name taken from line %d", ctx.name_line.index)
    elif ctx.emails:
        ctx.name = name_from_email(ctx.emails[0])
        if ctx.name:
            logger.debug("Name derived from email local part")
    return ctx.name


# ---------------------------------------------------------------------------
# Company
# ---------------------------------------------------------------------------

def looks_like_company(text: str) -> bool:
    words = text.split()
    if text.isupper() and len(text) > 1:
        return True
    if 2 <= len(words) <= 6:
        return True
    return has_company_suffix(text)


def company_from_text(ctx: ExtractionContext, settings: ScannerSettings) -> Optional[CardLine]:
    """First line of the logo area that reads like a company name"""
    for line in ctx.lines[:settings.company_scan_lines]:
        text = line.text
        if ctx.name_line is not None and line.index == ctx.name_line.index:
            continue
        if DIGIT.search(text) or ctx.has_contact(text):
            continue
        if has_designation_keyword(text):
            continue
        if looks_like_company(text):
            return line
    return None


def classify_company(ctx: ExtractionContext, settings: ScannerSettings) -> str:
    """Company from the email domain, else the website, else the card text"""
    if ctx.derived.company_from_email:
        ctx.company = ctx.derived.company_from_email
        logger.debug("Company derived from email domain")
    elif ctx.derived.company_from_website:
        ctx.company = ctx.derived.company_from_website
        logger.debug("Company derived from website")
    else:
        line = company_from_text(ctx, settings)
        if line is not None:
            ctx.company_line = line
            ctx.company = line.text
            logger.debug("Company taken from line %d", line.index)
    return ctx.company


# ---------------------------------------------------------------------------
# Address
# ---------------------------------------------------------------------------

def looks_like_address(text: str, min_length: int) -> bool:
    if len(text) <= min_length or not DIGIT.search(text):
        return False
    return "," in text or bool(ADDRESS_PATTERN.search(text))


def classify_address(ctx: ExtractionContext, settings: ScannerSettings) -> str:
    """
    Scan from the bottom of the card up for an address line. When no single
    line qualifies, try joining up to ``address_join_lines`` consecutive
    lines near the bottom and keep the longest join that does. Candidates
    are judged in their cleaned form, the text the record will carry.
    """
    claimed = ctx.claimed_indexes()

    def eligible(line: CardLine) -> bool:
        if line.index in claimed:
            return False
        return not (ctx.has_email(line.text) or ctx.has_phone(line.text) or looks_like_website(line.text))

    for line in reversed(ctx.lines):
        if eligible(line) and looks_like_address(clean_general(line.text), settings.address_min_length):
            ctx.address = line.text
            ctx.address_lines = [line]
            logger.debug("Address taken from line %d", line.index)
            return ctx.address

    def joinable(line: CardLine) -> bool:
        if not eligible(line):
            return False
        designation = ctx.provisional_designation
        return designation is None or line.index != designation.index

    bottom = ctx.lines[-settings.address_join_window:]
    best: List[CardLine] = []
    best_text = ""
    for size in range(2, settings.address_join_lines + 1):
        for start in range(len(bottom) - size, -1, -1):
            window = bottom[start:start + size]
            if not all(joinable(line) for line in window):
                continue
            joined = ", ".join(line.text.strip(" ,") for line in window)
            if looks_like_address(clean_general(joined), settings.address_min_length) and len(joined) > len(best_text):
                best, best_text = window, joined

    if best:
        ctx.address = best_text
        ctx.address_lines = list(best)
        logger.debug("Address joined from lines %s", [line.index for line in best])
    return ctx.address


# ---------------------------------------------------------------------------
# Designation
# ---------------------------------------------------------------------------

def _without_name(text: str, name: str) -> str:
    """Drop the person's name from a shared 'John Doe, CEO' line"""
    if not name:
        return text
    position = text.lower().find(name.lower())
    if position < 0:
        return text
    remainder = text[:position] + " " + text[position + len(name):]
    return " ".join(remainder.split()).strip(DESIGNATION_SEPARATORS)


def classify_designation(ctx: ExtractionContext) -> str:
    """First line carrying a job-title keyword that no other field has consumed"""
    claimed = ctx.claimed_indexes()
    consumed_values = [value.lower() for value in (ctx.name, ctx.company, ctx.address) if value]

    for line in ctx.lines:
        text = line.text
        if line.index in claimed or ctx.has_contact(text):
            continue
        if any(text.lower() in value for value in consumed_values):
            continue
        if not has_designation_keyword(text):
            continue
        candidate = _without_name(text, ctx.name)
        if not candidate or not has_designation_keyword(clean_general(candidate)):
            continue
        if ctx.name and _squash(candidate) == _squash(ctx.name):
            continue
        ctx.designation = candidate
        logger.debug("Designation taken from line %d", line.index)
        break
    return ctx.designation
