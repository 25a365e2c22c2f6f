"""Re-anchor style spans after a plain-text edit.

The input layer may hand back a new text with its style annotations dropped.
Assuming a single contiguous insert/delete/replace that starts at or before the
new cursor, the old spans are shifted onto the new text.
"""

import logging

from .model import StyleRange, TextValue

log = logging.getLogger(__name__)


def change_offset(old_text: str, new_text: str, cursor: int) -> int:
    """
    Length of the common prefix of both texts.

    The scan stops at the cursor and at the end of the shorter text.
    """
    limit = min(len(old_text), len(new_text), max(cursor, 0))
    offset = 0
    while offset < limit and old_text[offset] == new_text[offset]:
        offset += 1
    return offset


def adjust_position(position: int, offset: int, length_diff: int) -> int:
    """Shift a position at or after the edit point, never before the edit point."""
    if position < offset:
        return position
    return max(position + length_diff, offset)


def reconcile_spans(old: TextValue, new: TextValue) -> TextValue:
    """
    Map old.spans onto new.text.

    Returns new text and selection with the remapped spans. Spans that
    collapse or start past the end of the new text are dropped; ends are
    clamped to the new text length.
    """
    offset = change_offset(old.text, new.text, new.selection.start)
    diff = len(new.text) - len(old.text)
    size = len(new.text)

    spans: list[StyleRange] = []
    for span in old.spans:
        start = adjust_position(span.start, offset, diff)
        end = adjust_position(span.end, offset, diff)
        if start >= end or start >= size:
            log.debug("dropping span %s after edit at %d (%+d)", span, offset, diff)
            continue
        spans.append(StyleRange(start, min(end, size), span.style))

    return TextValue(text=new.text, spans=tuple(spans), selection=new.selection)
