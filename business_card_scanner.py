import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from config import ScannerSettings
from domain_deriver import derive_from_domains
from field_classifiers import (
    ExtractionContext,
    classify_address,
    classify_company,
    classify_designation,
    classify_name,
)
from models import ContactRecord, new_record_id
from pattern_extractors import extract_emails, extract_phones, extract_website, pick_phone
from sanitizer import canonical_website, clean_general
from text_normalizer import normalize

logger = logging.getLogger(__name__)


class BusinessCardScanner:
    """Turn the raw OCR text of a business card into a ContactRecord"""

    def __init__(
        self,
        settings: Optional[ScannerSettings] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self.settings = settings or ScannerSettings()
        self._id_factory = id_factory or new_record_id

    def extract(self, text: Optional[str], image_data: Optional[str] = None) -> ContactRecord:
        """
        Extract a contact record from OCR text.

        Never raises for malformed or empty text: fields that cannot be
        resolved come back as ''. ``image_data`` is passed through untouched;
        only a missing payload (None) becomes ''.
        """
        contact = self._parse_contact_info(text)
        record = ContactRecord(
            image_data="" if image_data is None else image_data,
            id=self._id_factory(),
            **contact,
        )
        if record.is_empty():
            logger.info("No contact details found in business card text")
        else:
            logger.info(
                "Extracted business card: name=%r, company=%r, email=%r",
                record.name,
                record.company,
                record.email,
            )
        return record

    def extract_many(self, cards: Iterable[Tuple[Optional[str], Optional[str]]]) -> List[ContactRecord]:
        """Extract every (text, image_data) pair, keeping their order"""
        return [self.extract(text, image_data) for text, image_data in cards]

    def _parse_contact_info(self, text: Optional[str]) -> Dict[str, Any]:
        card = normalize(text)
        if not card.lines:
            return {}

        # STEP 1: candidates that later heuristics must steer clear of
        emails = extract_emails(card.text)
        phones = extract_phones(card)
        website_text = extract_website(card.text)
        logger.debug(
            "Candidates: %d email(s), %d phone(s), website=%r",
            len(emails),
            len(phones),
            website_text,
        )

        # STEP 2: company and website hints from the domains
        derived = derive_from_domains(
            emails[0] if emails else None,
            website_text or None,
            skip_free_mail=self.settings.skip_free_mail,
        )

        # STEP 3: line classifiers, in claim order
        ctx = ExtractionContext(
            lines=card.lines,
            emails=emails,
            phones=phones,
            website_text=website_text,
            derived=derived,
        )
        classify_name(ctx, self.settings)
        classify_company(ctx, self.settings)
        classify_address(ctx, self.settings)
        classify_designation(ctx)

        # STEP 4: clean up and assemble
        name = clean_general(ctx.name)
        designation = clean_general(ctx.designation)
        if designation and designation.lower() == name.lower():
            designation = ""

        return {
            "name": name,
            "company": clean_general(ctx.company),
            "designation": designation,
            "email": emails[0] if emails else "",
            "phone": pick_phone(card, phones),
            "website": canonical_website(derived.website_from_email or website_text),
            "address": clean_general(ctx.address),
        }


_default_scanner = BusinessCardScanner()


def extract(text: Optional[str], image_data: Optional[str] = None) -> ContactRecord:
    """Extract a contact record from OCR text with the default settings"""
    return _default_scanner.extract(text, image_data)
