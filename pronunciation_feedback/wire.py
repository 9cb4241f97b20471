"""Models for the forced-alignment service response."""

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator

from .errors import MalformedInputError
from .types import Phoneme, RecognizedWord, Severity, WordScoreType


class WordData(BaseModel):
    """One word of the forced-alignment response."""

    word: str = ""
    word_orig: str | None = None  # original casing, preferred for display
    start_index: int
    end_index: int
    score_type: WordScoreType = WordScoreType.CORRECT
    nativeness_score: float = Field(
        default=0.0,
        validation_alias=AliasChoices("nativeness_score_user", "nativeness_score"),
    )

    def to_recognized_word(self) -> RecognizedWord:
        """Convert to the engine's word type.

        Raises:
            MalformedInputError: If the index span is invalid.
        """
        return RecognizedWord(
            text=self.word_orig or self.word,
            start_index=self.start_index,
            end_index=self.end_index,
            nativeness_score=self.nativeness_score,
            score_type=self.score_type,
        )


class PhonemeData(BaseModel):
    """One phoneme of the forced-alignment response."""

    text: str = Field(default="", validation_alias=AliasChoices("phoneme", "text"))
    start_index: int
    end_index: int
    score_type: Severity = Severity.NORMAL
    nativeness_score: float = 0.0

    def to_phoneme(self) -> Phoneme:
        """Convert to the engine's phoneme type.

        Raises:
            MalformedInputError: If the index span is invalid.
        """
        return Phoneme(
            text=self.text,
            start_index=self.start_index,
            end_index=self.end_index,
            score_type=self.score_type,
            nativeness_score=self.nativeness_score,
        )


class ForcedAlignmentResponse(BaseModel):
    """Word and phoneme scores returned for one recording."""

    sentence: str = ""  # transcript heard by the service
    words: list[WordData] = Field(default_factory=list)
    phonemes: list[PhonemeData] = Field(default_factory=list)

    @field_validator("words", "phonemes", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def recognized_words(self) -> list[RecognizedWord]:
        return [w.to_recognized_word() for w in self.words]

    def phoneme_list(self) -> list[Phoneme]:
        return [p.to_phoneme() for p in self.phonemes]


def parse_forced_alignment(payload: dict[str, Any]) -> ForcedAlignmentResponse:
    """Validate a raw JSON payload from the forced-alignment service.

    Args:
        payload: Decoded JSON object.

    Returns:
        The validated response.

    Raises:
        MalformedInputError: If the payload does not have the expected shape.
    """
    try:
        return ForcedAlignmentResponse.model_validate(payload)
    except ValidationError as e:
        raise MalformedInputError(f"Invalid forced-alignment payload: {e}") from e
