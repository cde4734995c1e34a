"""Tests for qualified-name splitting and template variables."""

from __future__ import annotations

import pytest

from scalanew.domain.names import (
    VARIABLE_PACKAGE_NAME,
    VARIABLE_TYPE_NAME,
    generate_template_variables,
    has_dots_after_back_quote,
    split_qualified_name,
)


class TestBackQuoteRule:
    @pytest.mark.parametrize("name", ["`a.b`.C", "a.`b`.C", "`a`.b"])
    def test_dot_after_back_quote(self, name: str) -> None:
        assert has_dots_after_back_quote(name)

    @pytest.mark.parametrize("name", ["a.b.C", "a.b.`C`", "a.b.`C D`", "`C`"])
    def test_no_dot_after_back_quote(self, name: str) -> None:
        assert not has_dots_after_back_quote(name)


class TestSplitQualifiedName:
    def test_plain(self) -> None:
        assert split_qualified_name("com.example.Foo") == ["com", "example", "Foo"]

    def test_single_segment(self) -> None:
        assert split_qualified_name("Foo") == ["Foo"]

    def test_empty_segments_kept(self) -> None:
        assert split_qualified_name("a..b") == ["a", "", "b"]
        assert split_qualified_name(".Foo") == ["", "Foo"]

    def test_back_quoted_span_not_split(self) -> None:
        assert split_qualified_name("a.`b.c`.D") == ["a", "`b.c`", "D"]

    def test_custom_separator(self) -> None:
        assert split_qualified_name("a/b/C", sep="/") == ["a", "b", "C"]


class TestTemplateVariables:
    def test_qualified(self) -> None:
        assert generate_template_variables("com.x.Y") == {
            VARIABLE_PACKAGE_NAME: "com.x",
            VARIABLE_TYPE_NAME: "Y",
        }

    def test_unqualified(self) -> None:
        assert generate_template_variables("Y") == {VARIABLE_TYPE_NAME: "Y"}

    def test_splits_on_last_dot_only(self) -> None:
        variables = generate_template_variables("a.b.c.D")
        assert variables[VARIABLE_PACKAGE_NAME] == "a.b.c"
        assert variables[VARIABLE_TYPE_NAME] == "D"

    def test_back_quoted_type(self) -> None:
        assert generate_template_variables("a.`B C`") == {
            VARIABLE_PACKAGE_NAME: "a",
            VARIABLE_TYPE_NAME: "`B C`",
        }
