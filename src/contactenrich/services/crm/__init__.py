"""CRM record store module."""

from contactenrich.services.crm.contact_store import (
    ContactNotFoundError,
    ContactRecord,
    ContactStoreError,
    ContactStoreProtocol,
    ContactStoreTransportError,
)
from contactenrich.services.crm.hubspot import HubSpotContactStore

__all__ = [
    "ContactNotFoundError",
    "ContactRecord",
    "ContactStoreError",
    "ContactStoreProtocol",
    "ContactStoreTransportError",
    "HubSpotContactStore",
]
