"""Plain-dict conversion of text values for the CLI, YAML scripts and HTTP."""

from typing import Any

from .model import SpanStyle, StyleRange, TextRange, TextValue
from .styling import style_runs


def style_to_dict(style: SpanStyle) -> dict[str, Any]:
    return {k: v for k, v in vars(style).items() if v is not None}


def value_to_dict(value: TextValue, runs: bool = False) -> dict[str, Any]:
    out: dict[str, Any] = {
        "text": value.text,
        "selection": [value.selection.start, value.selection.end],
        "spans": [
            {"start": s.start, "end": s.end, **style_to_dict(s.style)}
            for s in value.spans
        ],
    }
    if runs:
        out["runs"] = [
            {"start": start, "end": end, **style_to_dict(style)}
            for start, end, style in style_runs(value)
        ]
    return out


def value_from_dict(data: dict[str, Any]) -> TextValue:
    """
    Build a TextValue from {"text", "selection", "spans"}.

    `selection` may be [start, end] or a single cursor offset and
    defaults to the end of the text.
    """
    text = str(data.get("text", ""))
    sel = data.get("selection", len(text))
    if isinstance(sel, (list, tuple)):
        start, end = int(sel[0]), int(sel[1])
    else:
        start = end = int(sel)

    spans = []
    for raw in data.get("spans") or []:
        style = SpanStyle(
            bold=raw.get("bold"),
            italic=raw.get("italic"),
            font_size=raw.get("font_size"),
        )
        spans.append(StyleRange(int(raw["start"]), int(raw["end"]), style))

    return TextValue(text=text, spans=tuple(spans), selection=TextRange(start, end))
