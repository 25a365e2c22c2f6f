import io
import json
from typing import Any

import yaml


class ScriptError(ValueError):
    pass


def load_script(text: str) -> list[dict[str, Any]]:
    """
    Parse a YAML intent script.

    Accepts either a top-level list or a mapping with an `intents` list.
    Bare strings such as `- toggle_bold` become `{"op": "toggle_bold"}`.
    """
    try:
        data = yaml.safe_load(io.StringIO(text))
    except yaml.YAMLError as e:
        raise ScriptError(f"invalid YAML: {e}") from e
    if data is None:
        return []
    if isinstance(data, dict):
        if "intents" not in data:
            raise ScriptError("script mapping needs an 'intents' list")
        data = data["intents"] or []
    if not isinstance(data, list):
        raise ScriptError("script must be a list of intents")

    intents = []
    for i, item in enumerate(data):
        if isinstance(item, str):
            item = {"op": item}
        if not isinstance(item, dict) or "op" not in item:
            raise ScriptError(f"intent #{i + 1} has no 'op'")
        intents.append(item)
    return intents


def dump_snapshot(snapshot: dict[str, Any], fmt: str = "yaml") -> str:
    if fmt == "json":
        return json.dumps(snapshot, indent=2, ensure_ascii=False)
    buf = io.StringIO()
    yaml.safe_dump(snapshot, buf, sort_keys=False, allow_unicode=True)
    return buf.getvalue()
