from __future__ import annotations
from dataclasses import dataclass, field, replace

NoteId = str


@dataclass(frozen=True)
class TextRange:
    start: int  # anchor; may be greater than end for a backward selection
    end: int

    @property
    def min(self) -> int:
        return min(self.start, self.end)

    @property
    def max(self) -> int:
        return max(self.start, self.end)

    @property
    def collapsed(self) -> bool:
        return self.start == self.end

    @classmethod
    def cursor(cls, offset: int) -> "TextRange":
        return cls(offset, offset)

    def clamp(self, length: int) -> "TextRange":
        return TextRange(
            max(0, min(self.start, length)),
            max(0, min(self.end, length)),
        )


@dataclass(frozen=True)
class SpanStyle:
    bold: bool | None = None  # None = facet not set on this span
    italic: bool | None = None
    font_size: float | None = None

    @property
    def is_empty(self) -> bool:
        return self.bold is None and self.italic is None and self.font_size is None


@dataclass(frozen=True)
class StyleRange:
    start: int
    end: int
    style: SpanStyle

    def overlaps(self, selection: TextRange) -> bool:
        return self.start < selection.max and self.end > selection.min


@dataclass(frozen=True)
class TextValue:
    text: str = ""
    spans: tuple[StyleRange, ...] = ()
    selection: TextRange = field(default_factory=lambda: TextRange(0, 0))

    def with_selection(self, selection: TextRange) -> "TextValue":
        return replace(self, selection=selection)

    def validate(self) -> list[StyleRange]:
        """Return every span that breaks 0 <= start < end <= len(text)."""
        n = len(self.text)
        return [s for s in self.spans if not (0 <= s.start < s.end <= n)]


@dataclass(frozen=True)
class Note:
    id: NoteId
    value: TextValue = field(default_factory=TextValue)
