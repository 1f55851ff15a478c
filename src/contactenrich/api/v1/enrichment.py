"""Contact enrichment endpoints."""

from fastapi import APIRouter, status
from fastapi.responses import ORJSONResponse

from contactenrich.api.deps import ContactStore, Enricher
from contactenrich.schemas.enrichment import (
    AdditionalInfo,
    EnrichContactRequest,
    EnrichContactResponse,
    ErrorResponse,
    NoEnrichmentResponse,
)
from contactenrich.services.enrichment.pipeline import (
    ContactEnrichmentService,
    EnrichmentStatus,
)

router = APIRouter()


@router.post(
    "/contact",
    response_model=EnrichContactResponse | NoEnrichmentResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def enrich_contact(
    store: ContactStore,
    enricher: Enricher,
    request: EnrichContactRequest | None = None,
) -> EnrichContactResponse | NoEnrichmentResponse | ORJSONResponse:
    """
    Enrich a CRM contact from its email domain and job title.

    Looks up the company behind the contact's email domain and writes
    company, industry and city back to the contact. Seniority, department
    and company size are returned in `additional_info` only.
    """
    service = ContactEnrichmentService(store=store, enricher=enricher)
    outcome = await service.enrich_contact(request.contact_id if request else None)

    if outcome.status == EnrichmentStatus.INVALID_INPUT:
        return ORJSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=outcome.error).model_dump(),
        )

    if outcome.status == EnrichmentStatus.FAILURE:
        return ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=outcome.error or "Enrichment failed").model_dump(),
        )

    if outcome.status == EnrichmentStatus.NO_ENRICHMENT_FOUND:
        return NoEnrichmentResponse(domain=outcome.domain)

    return EnrichContactResponse(
        enriched_data=outcome.updates,
        additional_info=AdditionalInfo(
            seniority=outcome.seniority,
            department=outcome.department,
            company_size=outcome.company_size,
            enrichment_note=outcome.note,
        ),
    )
