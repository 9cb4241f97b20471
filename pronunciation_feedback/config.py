"""Configuration loading for the pronunciation feedback engine."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from .engine import EngineConfig


class Settings(BaseSettings):
    """Engine settings read from the environment or a ``.env`` file.

    Variables use the ``PRON_FEEDBACK_`` prefix, e.g.
    ``PRON_FEEDBACK_ALIGNER_TYPE=edit_distance``.
    """

    aligner_type: Literal["lookahead", "edit_distance"] = "lookahead"
    acoustic_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    strip_punctuation: bool = False
    segment_correct_words: bool = True

    model_config = {
        "env_prefix": "PRON_FEEDBACK_",
        "env_file": ".env",
        "extra": "ignore",
    }

    def to_engine_config(self) -> EngineConfig:
        return EngineConfig(
            aligner_type=self.aligner_type,
            acoustic_threshold=self.acoustic_threshold,
            strip_punctuation=self.strip_punctuation,
            segment_correct_words=self.segment_correct_words,
        )


def load_config() -> Settings:
    """Load configuration from environment."""
    return Settings()
