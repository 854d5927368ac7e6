"""Speech-to-text engine adapters."""

from transcribe_turbo.engine.base import EngineOutput, SpeechEngine, select_engine

__all__ = ["EngineOutput", "SpeechEngine", "select_engine"]
