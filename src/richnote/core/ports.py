from typing import Protocol

from .model import NoteId


class IdGenerator(Protocol):
    def new_id(self) -> NoteId:
        pass


class Listener(Protocol):
    """
    Called synchronously after every committed notebook change.
    Receives the notebook and its new version number.
    """

    def __call__(self, notebook, version: int) -> None:
        pass
