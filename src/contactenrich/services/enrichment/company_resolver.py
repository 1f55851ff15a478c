"""Company lookup by email domain."""

from collections.abc import Mapping
from dataclasses import dataclass

import structlog

logger = structlog.get_logger()

WWW_PREFIX = "www."


@dataclass(frozen=True)
class CompanyProfile:
    """Known attributes of a company. Unknown fields are None."""

    name: str | None = None
    industry: str | None = None
    size: str | None = None
    location: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "CompanyProfile":
        """Build a profile from a reference-data entry, dropping blank values."""
        return cls(
            name=data.get("name") or None,
            industry=data.get("industry") or None,
            size=data.get("size") or None,
            location=data.get("location") or None,
        )

    @property
    def is_empty(self) -> bool:
        return not (self.name or self.industry or self.size or self.location)

    @property
    def city(self) -> str | None:
        """First comma-separated segment of the location, trimmed."""
        if not self.location:
            return None
        return self.location.split(",")[0].strip()


EMPTY_PROFILE = CompanyProfile()

CompanyTable = Mapping[str, CompanyProfile]


class CompanyResolver:
    """
    Resolve a domain to a company profile from a static table.

    Lookup order:
    1. Exact domain match
    2. Domain with a leading "www." removed
    3. Empty profile

    Usage:
        resolver = CompanyResolver(companies)
        profile = resolver.resolve("www.acme.com")
    """

    def __init__(self, table: CompanyTable):
        self.table = table

    def resolve(self, domain: str | None) -> CompanyProfile:
        """
        Look up the company for a domain.

        Args:
            domain: Lower-cased email domain, or None

        Returns:
            Matching profile, or an empty profile when nothing matches
        """
        if domain is None:
            return EMPTY_PROFILE

        profile = self.table.get(domain)
        if profile is not None:
            return profile

        clean_domain = domain.removeprefix(WWW_PREFIX)
        profile = self.table.get(clean_domain)
        if profile is not None:
            logger.debug("Company matched without www prefix", domain=domain)
            return profile

        logger.debug("No company found for domain", domain=domain)
        return EMPTY_PROFILE


def resolve_company(domain: str | None, table: CompanyTable) -> CompanyProfile:
    """Resolve a domain against a table without keeping a resolver around."""
    return CompanyResolver(table).resolve(domain)
