import re
import logging
from typing import NamedTuple, Optional

from card_keywords import FREE_MAIL_DOMAINS

logger = logging.getLogger(__name__)


class DomainDerivation(NamedTuple):
    company_from_email: str = ""
    company_from_website: str = ""
    website_from_email: str = ""


def capitalize_first(value: str) -> str:
    """Upper-case the first character only ('acme' -> 'Acme', 'eBay' -> 'EBay')"""
    return value[:1].upper() + value[1:]


def website_host(website: Optional[str]) -> str:
    """Reduce a website string to its bare host: no protocol, 'www.', path or port"""
    if not website:
        return ""
    host = re.sub(r"^[a-z]+://", "", website.strip().lower())
    host = re.split(r"[/?#:]", host, maxsplit=1)[0]
    if host.startswith("www."):
        host = host[4:]
    return host.strip(".")


def is_free_mail(domain: str) -> bool:
    return domain.lower() in FREE_MAIL_DOMAINS


def derive_from_domains(
    email: Optional[str],
    website_text: Optional[str],
    skip_free_mail: bool = False,
) -> DomainDerivation:
    """
    Derive company names and a website from the card's email domain and
    website text.

    These are plain string transforms: nothing here checks that the domain
    resolves or that the company exists. With ``skip_free_mail`` set,
    free-mail domains (gmail.com and friends) yield neither a company nor
    a website.
    """
    company_from_email = ""
    company_from_website = ""
    website_from_email = ""

    if email and email.count("@") == 1:
        domain = email.split("@")[1].strip().lower()
        labels = [label for label in domain.split(".") if label]
        skipped = skip_free_mail and is_free_mail(domain)
        if skipped:
            logger.debug("Email domain %s is a free-mail provider; not deriving a company", domain)
        if len(labels) >= 2 and not skipped:
            company_from_email = capitalize_first(labels[0])
            website_from_email = website_text or f"www.{domain}"
        elif website_text:
            website_from_email = website_text

    host = website_host(website_text)
    if host and not (skip_free_mail and is_free_mail(host)):
        labels = [label for label in host.split(".") if label]
        if labels:
            company_from_website = capitalize_first(labels[0])

    return DomainDerivation(
        company_from_email=company_from_email,
        company_from_website=company_from_website,
        website_from_email=website_from_email,
    )
