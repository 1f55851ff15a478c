"""Pydantic schemas for request/response validation."""

from contactenrich.schemas.enrichment import (
    AdditionalInfo,
    EnrichContactRequest,
    EnrichContactResponse,
    ErrorResponse,
    NoEnrichmentResponse,
)

__all__ = [
    "AdditionalInfo",
    "EnrichContactRequest",
    "EnrichContactResponse",
    "ErrorResponse",
    "NoEnrichmentResponse",
]
