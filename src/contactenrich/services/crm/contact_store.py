"""Contact record store interface."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

# CRM properties fetched for every contact
CONTACT_PROPERTIES = [
    "email",
    "jobtitle",
    "firstname",
    "lastname",
    "company",
    "industry",
    "city",
]


class ContactStoreError(Exception):
    """Base error for record store failures."""


class ContactNotFoundError(ContactStoreError):
    """Raised when the contact ID does not exist in the CRM."""


class ContactStoreTransportError(ContactStoreError):
    """Raised when the CRM cannot be reached or rejects the request."""


@dataclass
class ContactRecord:
    """Contact as read from the CRM."""

    id: str
    email: str | None = None
    job_title: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    industry: str | None = None
    city: str | None = None

    @classmethod
    def from_properties(cls, contact_id: str, properties: Mapping) -> "ContactRecord":
        """Build a record from CRM property names."""
        return cls(
            id=contact_id,
            email=properties.get("email"),
            job_title=properties.get("jobtitle"),
            first_name=properties.get("firstname"),
            last_name=properties.get("lastname"),
            company=properties.get("company"),
            industry=properties.get("industry"),
            city=properties.get("city"),
        )


class ContactStoreProtocol(Protocol):
    """Protocol for CRM contact stores."""

    async def get_by_id(self, contact_id: str) -> ContactRecord:
        """Fetch a single contact."""
        ...

    async def update(self, contact_id: str, updates: dict[str, str]) -> None:
        """Write property updates to a contact."""
        ...
