"""Contact enrichment service."""
