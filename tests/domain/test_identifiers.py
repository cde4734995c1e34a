"""Tests for identifier rules and keyword sets."""

from __future__ import annotations

import itertools
import re

import pytest

from scalanew.domain import identifiers
from scalanew.domain.identifiers import (
    is_java_identifier_part,
    is_java_identifier_start,
    is_single_identifier_token,
    is_valid_package_ident,
    is_valid_type_ident,
)
from scalanew.domain.keywords import JAVA_KEYWORDS, SCALA_KEYWORDS, is_reserved_word

_SIMPLE_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def _simple_candidates() -> list[str]:
    words = ("".join(p) for n in range(1, 4) for p in itertools.product("a1_Z", repeat=n))
    return [w for w in words if not is_reserved_word(w, SCALA_KEYWORDS)]


class TestKeywordSets:
    def test_sets_are_frozen(self) -> None:
        assert isinstance(SCALA_KEYWORDS, frozenset)
        assert isinstance(JAVA_KEYWORDS, frozenset)

    def test_scala_only_keywords(self) -> None:
        assert "type" in SCALA_KEYWORDS
        assert "type" not in JAVA_KEYWORDS

    def test_java_only_keywords(self) -> None:
        assert "int" in JAVA_KEYWORDS
        assert "int" not in SCALA_KEYWORDS

    def test_reserved_word_checks_both_sets(self) -> None:
        assert is_reserved_word("public", SCALA_KEYWORDS, JAVA_KEYWORDS)
        assert not is_reserved_word("public", SCALA_KEYWORDS)
        assert not is_reserved_word("example", SCALA_KEYWORDS, JAVA_KEYWORDS)


class TestJavaIdentifierChars:
    @pytest.mark.parametrize("ch", ["a", "Z", "_", "$", "é", "中"])
    def test_start(self, ch: str) -> None:
        assert is_java_identifier_start(ch)

    @pytest.mark.parametrize("ch", ["1", "-", ".", " ", "`"])
    def test_not_start(self, ch: str) -> None:
        assert not is_java_identifier_start(ch)

    def test_digits_are_parts(self) -> None:
        assert is_java_identifier_part("7")
        assert not is_java_identifier_part("-")


class TestPackageIdent:
    @pytest.mark.parametrize("segment", ["com", "example", "_internal", "v2", "$gen", "ünïcode"])
    def test_valid(self, segment: str) -> None:
        assert is_valid_package_ident(segment)

    @pytest.mark.parametrize("segment", ["", "1st", "my-pkg", "a b", "`quoted`"])
    def test_invalid_grammar(self, segment: str) -> None:
        assert not is_valid_package_ident(segment)

    @pytest.mark.parametrize("segment", ["type", "object", "int", "public", "enum"])
    def test_keywords_rejected(self, segment: str) -> None:
        assert not is_valid_package_ident(segment)


class TestTypeIdent:
    @pytest.mark.parametrize("name", ["Foo", "foo", "Foo_+", "`Foo Bar`", "`type`", "+", " Foo "])
    def test_valid(self, name: str) -> None:
        assert is_valid_type_ident(name)

    @pytest.mark.parametrize("name", ["int", "public", "interface"])
    def test_java_keywords_allowed(self, name: str) -> None:
        assert is_valid_type_ident(name)

    @pytest.mark.parametrize("name", ["type", "class", "_", "=>", ""])
    def test_scala_keywords_rejected(self, name: str) -> None:
        assert not is_valid_type_ident(name)

    @pytest.mark.parametrize("name", ["Foo Bar", "Foo-Bar", "1Foo", "`Foo", "Fo`o`", "42", '"Foo"'])
    def test_not_a_single_identifier(self, name: str) -> None:
        assert not is_valid_type_ident(name)

    @pytest.mark.parametrize("word", _simple_candidates())
    def test_agrees_with_identifier_grammar(self, word: str) -> None:
        assert is_single_identifier_token(word) == bool(_SIMPLE_IDENT.fullmatch(word))


class TestLexerFailures:
    def test_unexpected_failure_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken(_source: str) -> list[object]:
            raise RuntimeError("lexer bug")

        monkeypatch.setattr(identifiers, "tokenize", broken)
        with pytest.raises(RuntimeError, match="lexer bug"):
            is_single_identifier_token("Foo")

    def test_lexer_error_means_not_an_identifier(self) -> None:
        assert is_single_identifier_token("`unclosed") is False
