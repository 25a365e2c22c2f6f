import pytest

from richnote.core.notebook import Notebook


class CountingId:
    def __init__(self):
        self.n = 0

    def new_id(self) -> str:
        self.n += 1
        return f"note{self.n}"


@pytest.fixture
def notebook():
    return Notebook(CountingId())
