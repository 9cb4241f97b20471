"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from pronunciation_feedback.config import Settings, load_config
from pronunciation_feedback.engine import EngineConfig, PronunciationEngine


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Isolate settings from the developer's environment and .env file."""
    for name in (
        "PRON_FEEDBACK_ALIGNER_TYPE",
        "PRON_FEEDBACK_ACOUSTIC_THRESHOLD",
        "PRON_FEEDBACK_STRIP_PUNCTUATION",
        "PRON_FEEDBACK_SEGMENT_CORRECT_WORDS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        settings = load_config()

        assert settings.aligner_type == "lookahead"
        assert settings.acoustic_threshold == 0.7
        assert settings.strip_punctuation is False
        assert settings.segment_correct_words is True

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRON_FEEDBACK_ALIGNER_TYPE", "edit_distance")
        monkeypatch.setenv("PRON_FEEDBACK_ACOUSTIC_THRESHOLD", "0.55")
        monkeypatch.setenv("PRON_FEEDBACK_STRIP_PUNCTUATION", "true")

        settings = load_config()

        assert settings.aligner_type == "edit_distance"
        assert settings.acoustic_threshold == 0.55
        assert settings.strip_punctuation is True

    def test_reads_dotenv_file(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("PRON_FEEDBACK_SEGMENT_CORRECT_WORDS=false\n")
        assert load_config().segment_correct_words is False

    def test_threshold_out_of_range(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRON_FEEDBACK_ACOUSTIC_THRESHOLD", "1.2")
        with pytest.raises(ValidationError):
            load_config()

    def test_unknown_aligner(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRON_FEEDBACK_ALIGNER_TYPE", "dtw")
        with pytest.raises(ValidationError):
            load_config()

    def test_to_engine_config(self) -> None:
        settings = Settings(aligner_type="edit_distance", acoustic_threshold=0.5)
        config = settings.to_engine_config()

        assert config == EngineConfig(
            aligner_type="edit_distance",
            acoustic_threshold=0.5,
            strip_punctuation=False,
            segment_correct_words=True,
        )
        assert PronunciationEngine(config).aligner.name == "edit_distance"
