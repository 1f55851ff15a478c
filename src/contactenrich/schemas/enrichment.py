"""Enrichment schemas for request/response validation."""

from pydantic import BaseModel


class EnrichContactRequest(BaseModel):
    """Request to enrich a single CRM contact."""

    contact_id: str | None = None


class AdditionalInfo(BaseModel):
    """Inferred attributes that are reported but not written to the contact."""

    seniority: str | None = None
    department: str | None = None
    company_size: str | None = None
    enrichment_note: str


class EnrichContactResponse(BaseModel):
    """Contact was updated with enriched fields."""

    success: bool = True
    message: str = "Contact enriched successfully"
    enriched_data: dict[str, str]
    additional_info: AdditionalInfo


class NoEnrichmentResponse(BaseModel):
    """Nothing was found to write for the contact."""

    success: bool = True
    message: str = "No enrichment data found for this contact"
    domain: str | None = None


class ErrorResponse(BaseModel):
    """Enrichment could not be performed."""

    success: bool = False
    error: str
