"""Contact enrichment pipeline."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum

import structlog

from contactenrich.services.crm.contact_store import ContactRecord, ContactStoreProtocol
from contactenrich.services.enrichment.company_resolver import (
    CompanyProfile,
    CompanyResolver,
    CompanyTable,
)
from contactenrich.services.enrichment.domain import extract_domain
from contactenrich.services.enrichment.title_classifier import (
    PatternTable,
    TitleClassification,
    TitleClassifier,
)

logger = structlog.get_logger()

UNKNOWN = "Unknown"


class EnrichmentStatus(str, Enum):
    """Outcome of a contact enrichment request."""

    INVALID_INPUT = "invalid_input"
    NO_ENRICHMENT_FOUND = "no_enrichment_found"
    ENRICHED = "enriched"
    FAILURE = "failure"


@dataclass
class EnrichmentResult:
    """Inferred attributes and the updates they produce for one contact."""

    domain: str | None
    company: CompanyProfile
    classification: TitleClassification | None
    updates: dict[str, str] = field(default_factory=dict)
    note: str = ""

    @property
    def has_updates(self) -> bool:
        return bool(self.updates)

    @property
    def seniority(self) -> str | None:
        return self.classification.seniority if self.classification else None

    @property
    def department(self) -> str | None:
        return self.classification.department if self.classification else None


@dataclass
class EnrichmentOutcome:
    """Result of enriching a contact by ID."""

    status: EnrichmentStatus
    contact_id: str | None = None
    domain: str | None = None
    updates: dict[str, str] = field(default_factory=dict)
    seniority: str | None = None
    department: str | None = None
    company_size: str | None = None
    note: str | None = None
    error: str | None = None


class ContactEnricher:
    """
    Decide which fields to write back for a contact.

    Flow:
    1. Extract the domain from the contact's email
    2. Resolve the domain to a company profile
    3. Classify the job title
    4. Build the update payload and summary note

    Pure computation: no I/O, never raises for bad contact data.
    """

    def __init__(self, companies: CompanyTable, patterns: PatternTable):
        self.resolver = CompanyResolver(companies)
        self.classifier = TitleClassifier(patterns)

    def enrich(self, record: ContactRecord, today: date | None = None) -> EnrichmentResult:
        """
        Enrich a single contact record.

        Args:
            record: Contact as read from the CRM
            today: Date stamped on the note (defaults to the current UTC date)

        Returns:
            Enrichment result with updates (possibly empty) and note
        """
        domain = extract_domain(record.email)
        company = self.resolver.resolve(domain)
        classification = self.classifier.classify(record.job_title or "")

        updates: dict[str, str] = {}
        if company.name:
            updates["company"] = company.name
        if company.industry:
            updates["industry"] = company.industry
        if company.location:
            updates["city"] = company.city

        result = EnrichmentResult(
            domain=domain,
            company=company,
            classification=classification,
            updates=updates,
        )
        result.note = self._build_note(result, today or datetime.now(timezone.utc).date())
        return result

    def _build_note(self, result: EnrichmentResult, today: date) -> str:
        return (
            f"Enriched on {today.isoformat()}. "
            f"Seniority: {result.seniority or UNKNOWN}, "
            f"Department: {result.department or UNKNOWN}, "
            f"Company Size: {result.company.size or UNKNOWN}"
        )


class ContactEnrichmentService:
    """
    Fetch a contact, enrich it and write the inferred fields back.

    Exactly one read and at most one write per call. The write is skipped
    when the fetch fails or when there is nothing to update.
    """

    def __init__(self, store: ContactStoreProtocol, enricher: ContactEnricher):
        self.store = store
        self.enricher = enricher

    async def enrich_contact(self, contact_id: str | None) -> EnrichmentOutcome:
        """
        Enrich a contact by ID.

        Args:
            contact_id: CRM contact ID

        Returns:
            Outcome describing what happened; store errors are reported as
            a failure outcome rather than raised
        """
        if not contact_id:
            return EnrichmentOutcome(
                status=EnrichmentStatus.INVALID_INPUT,
                error="Contact ID is required",
            )

        try:
            record = await self.store.get_by_id(contact_id)
            result = self.enricher.enrich(record)

            if not result.has_updates:
                logger.info(
                    "No enrichment data found",
                    contact_id=contact_id,
                    domain=result.domain,
                )
                return EnrichmentOutcome(
                    status=EnrichmentStatus.NO_ENRICHMENT_FOUND,
                    contact_id=contact_id,
                    domain=result.domain,
                    seniority=result.seniority,
                    department=result.department,
                    company_size=result.company.size,
                    note=result.note,
                )

            await self.store.update(contact_id, result.updates)

        except Exception as e:
            logger.error("Enrichment error", contact_id=contact_id, error=str(e), exc_info=e)
            return EnrichmentOutcome(
                status=EnrichmentStatus.FAILURE,
                contact_id=contact_id,
                error=str(e),
            )

        logger.info(
            "Contact enriched",
            contact_id=contact_id,
            domain=result.domain,
            update_fields=sorted(result.updates),
        )
        return EnrichmentOutcome(
            status=EnrichmentStatus.ENRICHED,
            contact_id=contact_id,
            domain=result.domain,
            updates=result.updates,
            seniority=result.seniority,
            department=result.department,
            company_size=result.company.size,
            note=result.note,
        )
