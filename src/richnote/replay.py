"""Replay scripted user intents against a notebook."""

from typing import Any, Iterable

from .core.convert import value_from_dict
from .core.notebook import Notebook


class ReplayError(ValueError):
    pass


def apply_intent(notebook: Notebook, intent: dict[str, Any]) -> None:
    """Run one intent. Bad field values raise ReplayError."""
    try:
        _dispatch(notebook, intent)
    except ReplayError:
        raise
    except (ValueError, TypeError, KeyError, IndexError, AttributeError) as e:
        raise ReplayError(f"bad {intent.get('op')!r} intent: {e}") from e


def _dispatch(notebook: Notebook, intent: dict[str, Any]) -> None:
    op = intent.get("op")
    if op == "edit":
        value = value_from_dict(intent)
        bad = value.validate()
        if bad:
            span = bad[0]
            raise ReplayError(
                f"span [{span.start}, {span.end}) outside text of length {len(value.text)}"
            )
        notebook.update_text(value)
    elif op == "select":
        # move the selection; text and spans stay as they are
        value = notebook.current_note().value
        moved = value_from_dict({
            "text": value.text,
            "selection": intent.get("selection", len(value.text)),
        })
        notebook.update_text(value.with_selection(moved.selection))
    elif op == "toggle_bold":
        notebook.toggle_bold()
    elif op == "toggle_italic":
        notebook.toggle_italic()
    elif op == "font_size":
        if "size" not in intent:
            raise ReplayError("font_size intent needs 'size'")
        notebook.apply_font_size(float(intent["size"]))
    elif op == "add_note":
        notebook.add_note()
    elif op == "select_tab":
        if "index" not in intent:
            raise ReplayError("select_tab intent needs 'index'")
        notebook.select_tab(int(intent["index"]))
    else:
        raise ReplayError(f"unknown intent: {op!r}")


def replay(notebook: Notebook, intents: Iterable[dict[str, Any]]) -> int:
    count = 0
    for intent in intents:
        apply_intent(notebook, intent)
        count += 1
    return count
