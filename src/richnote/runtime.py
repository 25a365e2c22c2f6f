"""Runtime wiring helper for CLI and server entry points."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.idgen import make_idgen
from .config import RichnoteConfig, load_config
from .core.notebook import Notebook
from .core.ports import IdGenerator


@dataclass
class Runtime:
    """Container for all wired components."""
    notebook: Notebook
    idgen: IdGenerator
    config: RichnoteConfig


def build_runtime(config_path: Path | None = None) -> Runtime:
    """Build and wire a fresh notebook from configuration."""
    config = load_config(config_path=config_path)
    idgen = make_idgen(config.id.strategy, config.id.bytes)
    notebook = Notebook(idgen, tab_label=config.editor.tab_label)
    return Runtime(notebook=notebook, idgen=idgen, config=config)
