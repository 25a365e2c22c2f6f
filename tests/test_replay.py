"""Tests for YAML intent scripts and replay."""

import json

import pytest
import yaml

from richnote.adapters.yaml_codec import ScriptError, dump_snapshot, load_script
from richnote.core.convert import value_from_dict
from richnote.core.model import SpanStyle, StyleRange, TextRange
from richnote.replay import ReplayError, apply_intent, replay


def test_load_script_forms():
    """Test list, mapping and bare-string intents."""
    assert load_script("- toggle_bold\n- op: add_note\n") == [
        {"op": "toggle_bold"},
        {"op": "add_note"},
    ]
    assert load_script("intents:\n  - add_note\n") == [{"op": "add_note"}]
    assert load_script("") == []


def test_load_script_errors():
    """Test malformed scripts are rejected."""
    with pytest.raises(ScriptError):
        load_script("op: edit\n")
    with pytest.raises(ScriptError):
        load_script("- text: no op here\n")


def test_replay_bold_round_trip(notebook):
    """Test apply then remove bold through a script."""
    intents = load_script("""
- op: edit
  text: hello world
  selection: [2, 5]
- toggle_bold
- op: select
  selection: [2, 5]
- toggle_bold
""")

    assert replay(notebook, intents) == 4
    value = notebook.current_note().value
    assert value.text == "hello world"
    assert value.spans == ()


def test_replay_edit_reanchors_spans(notebook):
    """Test a scripted insertion keeps bold on the word."""
    intents = load_script("""
- op: edit
  text: hello
  selection: [0, 5]
- toggle_bold
- op: edit
  text: heXllo
  selection: 3
""")

    replay(notebook, intents)

    assert notebook.current_note().value.spans == (
        StyleRange(0, 6, SpanStyle(bold=True)),
    )


def test_replay_tabs_and_font_size(notebook):
    """Test note switching and font size intents."""
    replay(notebook, [
        {"op": "edit", "text": "abc", "selection": [0, 3]},
        {"op": "font_size", "size": 20},
        {"op": "add_note"},
        {"op": "select_tab", "index": 0},
    ])

    assert notebook.selected_index == 0
    assert len(notebook.notes) == 2
    assert notebook.current_note().value.spans == (
        StyleRange(0, 3, SpanStyle(font_size=20.0)),
    )


def test_apply_intent_errors(notebook):
    """Test unknown or incomplete intents raise ReplayError."""
    with pytest.raises(ReplayError):
        apply_intent(notebook, {"op": "underline"})
    with pytest.raises(ReplayError):
        apply_intent(notebook, {"op": "font_size"})
    with pytest.raises(ReplayError):
        apply_intent(notebook, {"op": "select_tab"})


def test_value_from_dict():
    """Test dict input with a cursor and combined span."""
    value = value_from_dict({
        "text": "hey",
        "selection": 1,
        "spans": [{"start": 0, "end": 3, "bold": True, "italic": True}],
    })

    assert value.selection == TextRange(1, 1)
    assert value.spans == (StyleRange(0, 3, SpanStyle(bold=True, italic=True)),)
    assert value_from_dict({"text": "abc"}).selection == TextRange(3, 3)


def test_dump_snapshot(notebook):
    """Test snapshot output in both formats."""
    snap = notebook.snapshot()

    assert json.loads(dump_snapshot(snap, "json")) == snap
    assert yaml.safe_load(dump_snapshot(snap)) == snap


def test_replay_rejects_span_outside_text(notebook):
    """Test an edit whose spans run past the text is refused."""
    intents = load_script("""
- op: edit
  text: abc
  spans:
    - {start: 1, end: 9, bold: true}
""")

    with pytest.raises(ReplayError):
        replay(notebook, intents)

    assert notebook.current_note().value.text == ""
    assert notebook.current_note().value.validate() == []


def test_apply_intent_bad_field_values(notebook):
    """Test unconvertible field values become ReplayError."""
    with pytest.raises(ReplayError):
        apply_intent(notebook, {"op": "font_size", "size": "big"})
    with pytest.raises(ReplayError):
        apply_intent(notebook, {"op": "edit", "text": "abc", "selection": "abc"})
    with pytest.raises(ReplayError):
        apply_intent(notebook, {"op": "edit", "text": "abc", "spans": [{"end": 2}]})
    with pytest.raises(ReplayError):
        apply_intent(notebook, {"op": "edit", "text": "abc", "selection": [1]})


def test_load_script_invalid_yaml():
    """Test YAML syntax errors surface as ScriptError."""
    with pytest.raises(ScriptError):
        load_script("- op: edit\n  text: [unclosed\n")
