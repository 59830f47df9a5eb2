import re
from typing import List, NamedTuple, Optional

SMART_QUOTES = re.compile(r"[‘’‚‛′´`]")


class CardLine(NamedTuple):
    """A trimmed, non-empty line of OCR text and its line number in the raw text"""
    index: int
    text: str


class NormalizedCard(NamedTuple):
    """Two views of the same OCR text: whitespace-collapsed text and its lines"""
    text: str
    lines: List[CardLine]
    line_starts: List[int]


def _collapse(value: str) -> str:
    return " ".join(value.split())


def normalize_text(raw: Optional[str]) -> str:
    """Collapse whitespace runs (newlines included) and straighten single quotes"""
    if not raw:
        return ""
    return SMART_QUOTES.sub("'", _collapse(raw))


def split_lines(raw: Optional[str]) -> List[CardLine]:
    """Split the raw text into trimmed, non-empty lines, keeping their original index"""
    if not raw:
        return []
    lines = []
    for index, line in enumerate(raw.splitlines()):
        line = line.strip()
        if line:
            lines.append(CardLine(index, line))
    return lines


def normalize(raw: Optional[str]) -> NormalizedCard:
    """
    Build both views of a card's OCR text.

    ``text`` is what the regex extractors scan, so that a phone number or
    email wrapped over two lines still matches. ``lines`` keeps the line
    boundaries the field classifiers need. ``line_starts`` holds the offset
    in ``text`` at which each line begins.
    """
    if raw is not None and not isinstance(raw, str):
        raw = str(raw)

    lines = split_lines(raw)
    text = normalize_text(raw)

    line_starts: List[int] = []
    offset = 0
    for line in lines:
        line_starts.append(offset)
        offset += len(_collapse(line.text)) + 1

    return NormalizedCard(text=text, lines=lines, line_starts=line_starts)
