import re
import logging
from bisect import bisect_right
from typing import List, Optional, Sequence, Tuple

from card_keywords import KNOWN_TLDS
from text_normalizer import NormalizedCard

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+", re.IGNORECASE)

PHONE_PATTERN = re.compile(
    r"""
    (?<![\w+])
    (?:
        (?:\+\d{1,3}[\s.-]?)?          # country code
        (?:\(\d{1,5}\)[\s.-]?)?        # area code in parentheses
        \d{2,5}(?:[\s.-]\d{2,5}){1,4}  # digit groups
      |
        \+?\d{7,15}                    # unbroken run of digits
    )
    (?![\w])
    """,
    re.VERBOSE,
)

LOOSE_PHONE_PATTERN = re.compile(r"\+?[\d\s()-]{7,20}")

_TLD_ALTERNATIVES = "|".join(re.escape(tld) for tld in KNOWN_TLDS)

WEBSITE_PATTERN = re.compile(
    r"(?:https?://(?:www\.)?|www\.)[a-z0-9-]+(?:\.[a-z0-9-]+)+(?:/[^\s]*)?"
    r"|(?<![\w@.-])[a-z0-9][a-z0-9-]+(?:\.[a-z0-9-]+)*\.(?:" + _TLD_ALTERNATIVES + r")(?![\w-])(?:/[^\s]*)?",
    re.IGNORECASE,
)

MIN_PHONE_DIGITS = 7
MAX_PHONE_DIGITS = 15


def extract_emails(text: str) -> List[str]:
    """Every email address in the text, lower-cased, in order of appearance"""
    if not text:
        return []
    return [match.group().lower() for match in EMAIL_PATTERN.finditer(text)]


def _digit_count(value: str) -> int:
    return sum(1 for ch in value if ch.isdigit())


def _trim_at_line_break(card: NormalizedCard, start: int, end: int) -> Tuple[str, int]:
    """
    Cut a phone match at a line break when the part before it is already a
    full number. Returns the candidate and the offset scanning resumes from.
    """
    text = card.text
    first_line = bisect_right(card.line_starts, start) - 1
    for boundary in card.line_starts[first_line + 1:]:
        if boundary >= end:
            break
        head = text[start:boundary].strip()
        if _digit_count(head) >= MIN_PHONE_DIGITS:
            return head, boundary
    return text[start:end].strip(), end


def extract_phones(card: NormalizedCard) -> List[str]:
    """Distinct phone-like matches from the normalized text, first-seen order"""
    phones: List[str] = []
    seen = set()
    position = 0
    while True:
        match = PHONE_PATTERN.search(card.text, position)
        if not match:
            break
        candidate, position = _trim_at_line_break(card, match.start(), match.end())
        if candidate and candidate not in seen:
            seen.add(candidate)
            phones.append(candidate)
    return phones


def clean_phone(raw: Optional[str]) -> str:
    """Keep digits and a single leading '+'; reject anything outside 7-15 digits"""
    if not raw:
        return ""
    raw = raw.strip()
    digits = re.sub(r"\D", "", raw)
    if not MIN_PHONE_DIGITS <= len(digits) <= MAX_PHONE_DIGITS:
        logger.debug("Discarding phone candidate %r (%d digits)", raw, len(digits))
        return ""
    return ("+" if raw.startswith("+") else "") + digits


def pick_phone(card: NormalizedCard, phones: Sequence[str]) -> str:
    """
    Choose the card's phone number.

    The first candidate that survives cleaning wins. When none does, each
    line is rescanned on its own with a looser pattern, since the primary
    pattern can walk past a number embedded in surrounding text.
    """
    for candidate in phones:
        cleaned = clean_phone(candidate)
        if cleaned:
            return cleaned

    for line in card.lines:
        if EMAIL_PATTERN.search(line.text):
            continue
        for match in LOOSE_PHONE_PATTERN.finditer(line.text):
            cleaned = clean_phone(match.group())
            if cleaned:
                logger.debug("Phone recovered from line %d by loose scan", line.index)
                return cleaned
    return ""


def extract_website(text: str) -> str:
    """First website-like string in the text, lower-cased; email addresses are ignored"""
    if not text:
        return ""
    masked = EMAIL_PATTERN.sub(lambda match: " " * len(match.group()), text)
    match = WEBSITE_PATTERN.search(masked)
    if not match:
        return ""
    return match.group().lower().rstrip(".,;:)")
