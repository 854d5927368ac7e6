"""Exception hierarchy for transcribe-turbo."""

from __future__ import annotations


class TranscribeTurboError(Exception):
    """Base error for this package."""


class InputNotFoundError(TranscribeTurboError, FileNotFoundError):
    """Raised when the source file does not exist."""


class DirectoryCreateError(TranscribeTurboError, OSError):
    """Raised when the output directory cannot be created."""


class KeywordFileError(TranscribeTurboError, OSError):
    """Raised when a declared custom keyword file cannot be read."""


class UnsupportedFormatError(TranscribeTurboError, ValueError):
    """Raised for an output format token outside srt|vtt|txt|json|all."""


class SerializationError(TranscribeTurboError):
    """Raised when the structured record cannot be serialized."""


class OutputWriteError(TranscribeTurboError, OSError):
    """Raised when an output file cannot be written."""


class EngineError(TranscribeTurboError):
    """Raised when the speech engine fails or returns malformed segments."""


class ConfigurationError(TranscribeTurboError, ValueError):
    """Raised when a run configuration file is invalid."""
