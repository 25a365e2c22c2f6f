import secrets
import uuid

from ..core.ports import IdGenerator


class UuidId(IdGenerator):
    def new_id(self) -> str:
        return uuid.uuid4().hex


class HexId(IdGenerator):
    def __init__(self, nbytes: int = 4):  # 4 bytes -> 8 hex chars
        self.nbytes = nbytes

    def new_id(self) -> str:
        return secrets.token_hex(self.nbytes)


def make_idgen(strategy: str = "uuid", nbytes: int = 6) -> IdGenerator:
    if strategy == "hex":
        return HexId(nbytes=nbytes)
    return UuidId()
