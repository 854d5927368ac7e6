"""transcribe-turbo: transcript enrichment and caption export."""

__version__ = "0.1.0"
