from dataclasses import dataclass, field
import uuid

CONTACT_FIELDS = ("name", "company", "designation", "email", "phone", "website", "address")


def new_record_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class ContactRecord:
    """Contact details extracted from the OCR text of one business card"""
    name: str = ""
    company: str = ""
    designation: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    address: str = ""
    image_data: str = ""
    id: str = field(default_factory=new_record_id, compare=False)

    def contact_fields(self):
        """The seven text fields, in display order"""
        return {name: getattr(self, name) for name in CONTACT_FIELDS}

    def is_empty(self) -> bool:
        return not any(self.contact_fields().values())

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "company": self.company,
            "designation": self.designation,
            "email": self.email,
            "phone": self.phone,
            "website": self.website,
            "address": self.address,
            "image_data": self.image_data,
        }
