"""Selection-driven span operations: query, add, split-on-remove, flags."""

from dataclasses import dataclass, replace
from typing import Any, Callable

from .model import SpanStyle, StyleRange, TextRange, TextValue


@dataclass(frozen=True)
class Facet:
    """One orthogonal style attribute carried by a SpanStyle."""
    name: str  # attribute name on SpanStyle
    active: Callable[[Any], bool]

    def matches(self, style: SpanStyle) -> bool:
        return self.active(getattr(style, self.name))

    def strip(self, style: SpanStyle) -> SpanStyle:
        return replace(style, **{self.name: None})

    def style(self, value: Any = True) -> SpanStyle:
        return SpanStyle(**{self.name: value})


BOLD = Facet("bold", lambda v: v is True)
ITALIC = Facet("italic", lambda v: v is True)
FONT_SIZE = Facet("font_size", lambda v: v is not None)

FACETS = {f.name: f for f in (BOLD, ITALIC, FONT_SIZE)}


def has_style_in_selection(value: TextValue, selection: TextRange, facet: Facet) -> bool:
    return any(s.overlaps(selection) and facet.matches(s.style) for s in value.spans)


def add_style(value: TextValue, style: SpanStyle) -> TextValue:
    """
    Append a span over the selection; existing spans are left alone.

    A collapsed selection returns the value unchanged. Otherwise the
    selection collapses to its end.
    """
    sel = value.selection
    if sel.collapsed:
        return value
    spans = value.spans + (StyleRange(sel.min, sel.max, style),)
    return TextValue(value.text, spans, TextRange.cursor(sel.max))


def remove_style(value: TextValue, selection: TextRange, facet: Facet) -> TextValue:
    """
    Cut `facet` out of the selection.

    Matching spans that overlap are split: the parts before and after the
    selection are kept. The middle keeps whatever other facets the span
    carried. The selection collapses to its end.
    """
    lo, hi = selection.min, selection.max
    spans: list[StyleRange] = []
    for span in value.spans:
        if not (facet.matches(span.style) and span.overlaps(selection)):
            spans.append(span)
            continue
        if span.start < lo:
            spans.append(StyleRange(span.start, lo, span.style))
        rest = facet.strip(span.style)
        if not rest.is_empty:
            spans.append(StyleRange(max(span.start, lo), min(span.end, hi), rest))
        if span.end > hi:
            spans.append(StyleRange(hi, span.end, span.style))
    return TextValue(value.text, tuple(spans), TextRange.cursor(hi))


def style_flags(value: TextValue) -> tuple[bool, bool] | None:
    """
    (bold, italic) for the current selection, or None when the flags
    should be left as they are (collapsed selection, or selection at/past
    the end of the text). Any overlap with a span is enough.
    """
    sel = value.selection
    if sel.collapsed or sel.min >= len(value.text):
        return None
    bold = italic = False
    for span in value.spans:
        if span.overlaps(sel):
            bold = bold or BOLD.matches(span.style)
            italic = italic or ITALIC.matches(span.style)
    return bold, italic


def style_runs(value: TextValue) -> list[tuple[int, int, SpanStyle]]:
    """
    Flatten overlapping spans into consecutive runs with their effective style.

    Later spans win where facets conflict. Unstyled stretches are included
    with an empty SpanStyle so the runs cover the whole text.
    """
    n = len(value.text)
    bounds = {0, n}
    for s in value.spans:
        bounds.add(max(0, min(s.start, n)))
        bounds.add(max(0, min(s.end, n)))
    edges = sorted(bounds)

    runs: list[tuple[int, int, SpanStyle]] = []
    for start, end in zip(edges, edges[1:]):
        if start == end:
            continue
        merged: dict[str, Any] = {}
        for s in value.spans:
            if s.start <= start and s.end >= end:
                for name in FACETS:
                    v = getattr(s.style, name)
                    if v is not None:
                        merged[name] = v
        style = SpanStyle(**merged)
        if runs and runs[-1][2] == style and runs[-1][1] == start:
            runs[-1] = (runs[-1][0], end, style)
        else:
            runs.append((start, end, style))
    return runs
