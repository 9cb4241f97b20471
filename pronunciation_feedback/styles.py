"""Data-driven highlight styles for rendering feedback.

Styling is a presentation concern and is kept apart from alignment: the
engine only reports severities and statuses, and this table maps them,
plus optional per-keyword overrides, to style entries.
"""

import json
from pathlib import Path

from pydantic import BaseModel, Field

from .types import CharSegment, ComparisonStatus, Severity, WordComparison


class Style(BaseModel):
    """Visual style of a word or segment."""

    text_color: str
    background: str = ""
    bold: bool = False


class KeywordStyle(BaseModel):
    """Style override for words containing a keyword."""

    keyword: str
    style: Style
    severity: Severity | None = None  # None applies to every severity


class StyleTable(BaseModel):
    """Lookup table from severity, status and keyword to style."""

    severities: dict[Severity, Style]
    statuses: dict[ComparisonStatus, Style] = Field(default_factory=dict)
    keywords: list[KeywordStyle] = Field(default_factory=list)

    @classmethod
    def default(cls) -> "StyleTable":
        """Built-in palette: red errors, orange warnings, yellow missing words."""
        return cls(
            severities={
                Severity.ERROR: Style(text_color="red-950", background="red-300"),
                Severity.WARNING: Style(text_color="orange-950", background="orange-300"),
                Severity.NORMAL: Style(text_color="gray-900"),
            },
            statuses={
                ComparisonStatus.SUBSTITUTION: Style(text_color="red-950", background="red-300"),
                ComparisonStatus.DELETION: Style(text_color="yellow-950", background="yellow-300"),
                ComparisonStatus.INSERTION: Style(text_color="orange-950", background="orange-300"),
            },
        )

    @classmethod
    def from_json_file(cls, path: Path) -> "StyleTable":
        """Load a style table from a JSON file.

        Args:
            path: Path to the JSON file

        Returns:
            A StyleTable populated from the JSON data
        """
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return cls.model_validate(data)

    def style_for_word(self, word: str, severity: Severity) -> Style:
        """Style for a word, honoring the first matching keyword override."""
        lowered = word.lower()
        for entry in self.keywords:
            if entry.keyword.lower() in lowered and entry.severity in (None, severity):
                return entry.style
        return self.severities[severity]

    def style_for_segment(self, segment: CharSegment) -> Style:
        return self.severities[segment.severity]

    def style_for_comparison(self, comparison: WordComparison) -> Style:
        """Whole-word style for a comparison without phoneme detail."""
        if comparison.status == ComparisonStatus.MATCH:
            severity = Severity.NORMAL if comparison.is_acoustically_correct else Severity.ERROR
            return self.severities[severity]
        style = self.statuses.get(comparison.status)
        if style is not None:
            return style
        return self.severities[Severity.WARNING]
