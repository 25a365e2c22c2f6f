"""Note collection and style-aware text engine."""

from __future__ import annotations

import logging
from typing import Any, Callable

from . import styling
from .convert import value_to_dict
from .model import Note, NoteId, SpanStyle, TextValue
from .ports import IdGenerator, Listener
from .reconcile import reconcile_spans
from .styling import BOLD, FONT_SIZE, ITALIC, Facet

log = logging.getLogger(__name__)


class Notebook:
    """
    Ordered notes, the selected tab and the bold/italic flags mirrored to
    the style controls.

    Every change replaces whole values; readers never see a half-updated
    note. Single-threaded: callers serialize access.
    """

    def __init__(self, idgen: IdGenerator, tab_label: str = "Note {n}"):
        self.idgen = idgen
        self.tab_label = tab_label
        self.notes: list[Note] = []
        self.selected_index = 0
        self.is_bold = False
        self.is_italic = False
        self.version = 0
        self._listeners: list[Listener] = []
        self.add_note()

    # observers

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        self.version += 1
        for listener in list(self._listeners):
            listener(self, self.version)

    # collection

    def current_note(self) -> Note:
        if not self.notes:
            return Note(id=self.idgen.new_id())
        if self.selected_index >= len(self.notes):
            self.selected_index = len(self.notes) - 1
        elif self.selected_index < 0:
            self.selected_index = 0
        return self.notes[self.selected_index]

    def add_note(self) -> Note:
        note = Note(id=self.idgen.new_id())
        self.notes.append(note)
        self.selected_index = len(self.notes) - 1
        log.debug("added note %s at %d", note.id, self.selected_index)
        self._changed()
        return note

    def select_tab(self, index: int) -> None:
        if not 0 <= index < len(self.notes):
            return
        self.selected_index = index
        self._refresh_flags()
        self._changed()

    def tabs(self) -> list[tuple[int, NoteId, str]]:
        return [
            (i, note.id, self.tab_label.format(n=i + 1))
            for i, note in enumerate(self.notes)
        ]

    def _index_of(self, note: Note) -> int:
        for i, candidate in enumerate(self.notes):
            if candidate.id == note.id:
                return i
        return -1

    def _store(self, note: Note, value: TextValue) -> bool:
        index = self._index_of(note)
        if index < 0:
            return False
        self.notes[index] = Note(id=note.id, value=value)
        return True

    # text engine

    def update_text(self, new: TextValue) -> None:
        """
        Accept a value from the input layer, repairing dropped spans.

        - text changed, no spans offered, old spans present: re-anchor old spans
        - same text and selection but fewer spans: ignore the update
        - otherwise take the value as given
        """
        note = self.current_note()
        if self._index_of(note) < 0:
            return
        old = note.value
        new = new.with_selection(new.selection.clamp(len(new.text)))

        if new.text != old.text and not new.spans and old.spans:
            value = reconcile_spans(old, new)
            log.debug("reconciled %d spans into %d", len(old.spans), len(value.spans))
        elif (
            new.text == old.text
            and new.selection == old.selection
            and len(new.spans) < len(old.spans)
        ):
            log.debug("ignoring update that only drops spans")
            return
        else:
            value = new

        self._store(note, value)
        if old.text != value.text or old.selection != value.selection:
            self._refresh_flags()
        self._changed()

    def toggle_bold(self) -> None:
        self._toggle(BOLD, "is_bold")

    def toggle_italic(self) -> None:
        self._toggle(ITALIC, "is_italic")

    def _toggle(self, facet: Facet, flag: str) -> None:
        value = self.current_note().value
        if value.selection.collapsed:
            # pending style for the next typed character
            setattr(self, flag, not getattr(self, flag))
            self._changed()
        elif styling.has_style_in_selection(value, value.selection, facet):
            self.remove_style(facet)
        else:
            self.apply_style(facet.style())

    def apply_font_size(self, size: float) -> None:
        self.apply_style(FONT_SIZE.style(size))

    def apply_style(self, style: SpanStyle) -> None:
        note = self.current_note()
        if note.value.selection.collapsed:
            return
        if self._store(note, styling.add_style(note.value, style)):
            self._changed()

    def remove_style(self, facet: Facet) -> None:
        note = self.current_note()
        value = note.value
        if self._store(note, styling.remove_style(value, value.selection, facet)):
            self._changed()

    def refresh_style_flags(self) -> None:
        if self._refresh_flags():
            self._changed()

    def _refresh_flags(self) -> bool:
        flags = styling.style_flags(self.current_note().value)
        if flags is None or flags == (self.is_bold, self.is_italic):
            return False
        self.is_bold, self.is_italic = flags
        return True

    # read side

    def snapshot(self) -> dict[str, Any]:
        note = self.current_note()
        return {
            "version": self.version,
            "selected_index": self.selected_index,
            "is_bold": self.is_bold,
            "is_italic": self.is_italic,
            "notes": [
                {"index": i, "id": nid, "label": label}
                for i, nid, label in self.tabs()
            ],
            "current": {"id": note.id, **value_to_dict(note.value, runs=True)},
        }
