"""Caption and text serializers for finished transcripts."""

from transcribe_turbo.output.formats import SUPPORTED_FORMATS, emit, resolve_formats

__all__ = ["SUPPORTED_FORMATS", "emit", "resolve_formats"]
