"""Tests for note ID generators."""

import re

from richnote.adapters.idgen import HexId, UuidId, make_idgen


def test_uuid_ids():
    """Test default ids are unique 32-char hex strings."""
    gen = UuidId()
    ids = {gen.new_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(re.fullmatch(r"[0-9a-f]{32}", i) for i in ids)


def test_hex_ids():
    """Test short hex ids honour the byte count."""
    assert len(HexId(nbytes=4).new_id()) == 8
    assert len(HexId(nbytes=6).new_id()) == 12


def test_make_idgen():
    """Test strategy selection."""
    assert isinstance(make_idgen("uuid"), UuidId)
    gen = make_idgen("hex", 3)
    assert isinstance(gen, HexId)
    assert gen.nbytes == 3
