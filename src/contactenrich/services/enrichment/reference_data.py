"""Loading of the static company and job-title reference tables."""

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

import structlog

from contactenrich.services.enrichment.company_resolver import CompanyProfile, CompanyTable
from contactenrich.services.enrichment.title_classifier import PatternTable, TitlePattern

logger = structlog.get_logger()


class ReferenceDataError(Exception):
    """Raised when a reference data file cannot be loaded."""


@dataclass(frozen=True)
class ReferenceData:
    """Read-only reference tables shared by all enrichment requests."""

    companies: CompanyTable
    patterns: PatternTable


def _read_json(path: Path):
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ReferenceDataError(f"Could not read reference data from {path}: {e}") from e


def load_company_table(path: Path) -> CompanyTable:
    """
    Load the company-by-domain table.

    File format:
    {
        "acme.com": {"name": "Acme Corp", "industry": "Technology",
                     "size": "201-500", "location": "San Francisco, CA"},
        ...
    }
    """
    data = _read_json(path)
    if not isinstance(data, dict):
        raise ReferenceDataError(f"Company table in {path} must be a JSON object")

    companies: dict[str, CompanyProfile] = {}
    for domain, entry in data.items():
        if not isinstance(entry, dict):
            raise ReferenceDataError(f"Company entry for {domain!r} must be an object")
        companies[domain.lower()] = CompanyProfile.from_dict(entry)

    return MappingProxyType(companies)


def load_pattern_table(path: Path) -> PatternTable:
    """
    Load the ordered job-title pattern table.

    File format:
    {
        "patterns": [
            {"keywords": ["vp", "vice president"], "seniority": "VP", "department": "Management"},
            ...
        ]
    }
    """
    data = _read_json(path)
    raw_patterns = data.get("patterns") if isinstance(data, dict) else None
    if not isinstance(raw_patterns, list):
        raise ReferenceDataError(f"Pattern table in {path} must contain a 'patterns' list")

    patterns = []
    for i, entry in enumerate(raw_patterns):
        keywords = entry.get("keywords") if isinstance(entry, dict) else None
        if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
            raise ReferenceDataError(
                f"Title pattern at index {i} in {path} must have a list of keyword strings"
            )
        try:
            patterns.append(
                TitlePattern.build(
                    keywords=keywords,
                    seniority=entry["seniority"],
                    department=entry["department"],
                )
            )
        except KeyError as e:
            raise ReferenceDataError(f"Invalid title pattern at index {i} in {path}: {e}") from e

    return tuple(patterns)


def load_reference_data(company_path: Path, pattern_path: Path) -> ReferenceData:
    """Load both reference tables."""
    reference = ReferenceData(
        companies=load_company_table(company_path),
        patterns=load_pattern_table(pattern_path),
    )
    logger.info(
        "Loaded reference data",
        companies=len(reference.companies),
        title_patterns=len(reference.patterns),
    )
    return reference
