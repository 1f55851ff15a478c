"""Enrichment services module."""

from contactenrich.services.enrichment.company_resolver import (
    CompanyProfile,
    CompanyResolver,
    resolve_company,
)
from contactenrich.services.enrichment.domain import extract_domain
from contactenrich.services.enrichment.pipeline import (
    ContactEnricher,
    ContactEnrichmentService,
    EnrichmentOutcome,
    EnrichmentResult,
    EnrichmentStatus,
)
from contactenrich.services.enrichment.reference_data import (
    ReferenceData,
    ReferenceDataError,
    load_reference_data,
)
from contactenrich.services.enrichment.title_classifier import (
    TitleClassification,
    TitleClassifier,
    TitlePattern,
    classify_title,
)

__all__ = [
    "CompanyProfile",
    "CompanyResolver",
    "resolve_company",
    "extract_domain",
    "ContactEnricher",
    "ContactEnrichmentService",
    "EnrichmentOutcome",
    "EnrichmentResult",
    "EnrichmentStatus",
    "ReferenceData",
    "ReferenceDataError",
    "load_reference_data",
    "TitleClassification",
    "TitleClassifier",
    "TitlePattern",
    "classify_title",
]
