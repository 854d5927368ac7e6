"""End-to-end transcription run."""
