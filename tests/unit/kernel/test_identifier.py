"""Unit tests for Identifier."""

from __future__ import annotations

import pytest

from resource_cache.kernel.errors import ValidationError
from resource_cache.kernel.identity import Identifier


class TestIdentifier:
    def test_structural_equality(self) -> None:
        assert Identifier("posts", "1") == Identifier("posts", "1")
        assert Identifier("posts", "1") != Identifier("likes", "1")
        assert Identifier("posts", "1") != Identifier("posts", "2")

    def test_hashable(self) -> None:
        assert len({Identifier("posts", "1"), Identifier("posts", "1")}) == 1

    def test_of_coerces_key(self) -> None:
        assert Identifier.of("posts", 7) == Identifier("posts", "7")

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Identifier("posts", "")

    def test_immutable(self) -> None:
        ident = Identifier("posts", "1")
        with pytest.raises(AttributeError):
            ident.key = "2"  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Identifier("posts", "1")) == "posts:1"
        assert str(Identifier(None, "op")) == "~:op"


class TestOneOff:
    def test_has_no_category(self) -> None:
        ident = Identifier.one_off()
        assert ident.category is None
        assert ident.is_one_off

    def test_fresh_keys_are_unique(self) -> None:
        assert Identifier.one_off() != Identifier.one_off()

    def test_explicit_key_keeps_equality(self) -> None:
        assert Identifier.one_off("save") == Identifier(None, "save")

    def test_typed_identifier_is_not_one_off(self) -> None:
        assert not Identifier("posts", "1").is_one_off
