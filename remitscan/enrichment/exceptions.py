class EnrichmentError(Exception):
    """Raised by enrichment clients. The Enricher absorbs it into a placeholder result."""
