"""API dependencies for dependency injection."""

from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status

from contactenrich.config import settings
from contactenrich.services.crm.contact_store import ContactStoreProtocol
from contactenrich.services.crm.hubspot import HubSpotContactStore
from contactenrich.services.enrichment.pipeline import ContactEnricher
from contactenrich.services.enrichment.reference_data import ReferenceData, load_reference_data


@lru_cache
def get_reference_data() -> ReferenceData:
    """Load the reference tables once and share them read-only."""
    return load_reference_data(settings.company_data_path, settings.job_title_data_path)


def get_enricher(
    reference: Annotated[ReferenceData, Depends(get_reference_data)],
) -> ContactEnricher:
    """Get an enricher bound to the shared reference tables."""
    return ContactEnricher(companies=reference.companies, patterns=reference.patterns)


async def get_contact_store() -> AsyncGenerator[ContactStoreProtocol, None]:
    """Get a HubSpot contact store for the duration of a request."""
    if not settings.hubspot_access_token:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="HubSpot access token not configured",
        )

    store = HubSpotContactStore(
        access_token=settings.hubspot_access_token.get_secret_value(),
        base_url=settings.hubspot_base_url,
        timeout=settings.hubspot_timeout,
    )
    try:
        yield store
    finally:
        await store.close()


# Type aliases for cleaner dependency injection
ContactStore = Annotated[ContactStoreProtocol, Depends(get_contact_store)]
Enricher = Annotated[ContactEnricher, Depends(get_enricher)]
