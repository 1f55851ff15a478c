"""Shared fixtures for the test suite."""

from types import MappingProxyType

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from contactenrich.api.deps import get_contact_store, get_enricher
from contactenrich.main import app
from contactenrich.services.crm.contact_store import ContactRecord
from contactenrich.services.enrichment.company_resolver import CompanyProfile
from contactenrich.services.enrichment.pipeline import ContactEnricher
from contactenrich.services.enrichment.title_classifier import TitlePattern


class FakeContactStore:
    """In-memory contact store that records every call."""

    def __init__(self, record: ContactRecord | None = None):
        self.record = record
        self.fetch_error: Exception | None = None
        self.update_error: Exception | None = None
        self.fetched: list[str] = []
        self.updates: list[tuple[str, dict]] = []

    async def get_by_id(self, contact_id: str) -> ContactRecord:
        self.fetched.append(contact_id)
        if self.fetch_error:
            raise self.fetch_error
        return self.record

    async def update(self, contact_id: str, updates: dict[str, str]) -> None:
        self.updates.append((contact_id, updates))
        if self.update_error:
            raise self.update_error


@pytest.fixture
def company_table():
    return MappingProxyType(
        {
            "acme.com": CompanyProfile(
                name="Acme Corp",
                industry="Tech",
                size="201-500",
                location="San Francisco, CA",
            ),
        }
    )


@pytest.fixture
def pattern_table():
    return (
        TitlePattern.build(["vp", "vice president"], seniority="VP", department="Sales"),
        TitlePattern.build(["director"], seniority="Director", department="Management"),
        TitlePattern.build(["manager"], seniority="Manager", department="Operations"),
        TitlePattern.build(["engineer", "developer"], seniority="Individual Contributor", department="Engineering"),
    )


@pytest.fixture
def enricher(company_table, pattern_table) -> ContactEnricher:
    return ContactEnricher(companies=company_table, patterns=pattern_table)


@pytest.fixture
def store() -> FakeContactStore:
    return FakeContactStore(
        ContactRecord(id="101", email="jane@acme.com", job_title="VP of Sales")
    )


@pytest_asyncio.fixture
async def client(store, enricher):
    """HTTP client against the app with the CRM and reference data replaced."""
    app.dependency_overrides[get_contact_store] = lambda: store
    app.dependency_overrides[get_enricher] = lambda: enricher
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_store():
    """Factory for stores holding a custom contact."""
    return FakeContactStore
