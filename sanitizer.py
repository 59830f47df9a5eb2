import re
from typing import Optional

from domain_deriver import website_host

QUOTE_CHARS = re.compile(r"[\"'“”‘’`´]")
GENERAL_NOISE = re.compile(r"[()\[\]{}<>\-–—/\\|.@!?;:*#~^=_+$%]")
WEBSITE_NOISE = re.compile(r"[()\[\]{}<>–—\\|!?;:*#~^=_+$%,&]")


def _collapse(text: str) -> str:
    return " ".join(text.split())


def clean_general(text: Optional[str]) -> str:
    """Strip punctuation and symbol noise from a name, company, designation or address"""
    if not text:
        return ""
    text = QUOTE_CHARS.sub("", text)
    text = GENERAL_NOISE.sub(" ", text)
    text = re.sub(r"\s+,", ",", text)
    return _collapse(text).strip(", ")


def clean_website(text: Optional[str]) -> str:
    """Like clean_general, but keeps the '.', '@' and '-' a hostname is made of"""
    if not text:
        return ""
    text = QUOTE_CHARS.sub("", text)
    text = WEBSITE_NOISE.sub(" ", text)
    return _collapse(text).replace(" ", "")


def canonical_website(text: Optional[str]) -> str:
    """Bare 'www.' host for a website string, or '' when no dotted host remains"""
    host = clean_website(website_host(text))
    if "." not in host:
        return ""
    return f"www.{host}"
