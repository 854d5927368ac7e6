"""Keyword catalog, segment enrichment and cross-segment analysis."""
