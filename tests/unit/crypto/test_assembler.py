"""Tests for compact token assembly."""

from esjwt.crypto.assembler import assemble, signing_input


def test_signing_input_joins_two_segments() -> None:
    assert signing_input("aGVhZA", "Ym9keQ") == b"aGVhZA.Ym9keQ"


def test_assemble_joins_three_segments() -> None:
    assert assemble("aGVhZA", "Ym9keQ", "c2ln") == "aGVhZA.Ym9keQ.c2ln"


def test_assemble_extends_signing_input() -> None:
    token = assemble("a", "b", "c")
    assert token.encode().startswith(signing_input("a", "b") + b".")
