"""Qualified-name helpers — splitting and template variables."""

from __future__ import annotations

VARIABLE_TYPE_NAME = "type_name"
VARIABLE_PACKAGE_NAME = "package_name"


def has_dots_after_back_quote(name: str) -> bool:
    """Return True if a ``.`` follows the first back-quote anywhere in *name*.

    Examples:
        >>> has_dots_after_back_quote("`a.b`.C")
        True
        >>> has_dots_after_back_quote("a.b.`C`")
        False
        >>> has_dots_after_back_quote("a.b.C")
        False
    """
    quote = name.find("`")
    return quote >= 0 and "." in name[quote:]


def split_qualified_name(name: str, sep: str = ".") -> list[str]:
    """Split *name* on *sep*, never inside a back-quoted span.

    Empty segments are kept, so a trailing separator yields a trailing ``""``.

    Examples:
        >>> split_qualified_name("com.example.Foo")
        ['com', 'example', 'Foo']
        >>> split_qualified_name("a.b.")
        ['a', 'b', '']
        >>> split_qualified_name("a.`b.c`")
        ['a', '`b.c`']
    """
    parts: list[str] = []
    current: list[str] = []
    quoted = False
    for ch in name:
        if ch == "`":
            quoted = not quoted
        if ch == sep and not quoted:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


def generate_template_variables(name: str) -> dict[str, str]:
    """Split an accepted name on its last dot into template variables.

    Only non-empty values are included.

    Examples:
        >>> generate_template_variables("com.x.Y")
        {'package_name': 'com.x', 'type_name': 'Y'}
        >>> generate_template_variables("Y")
        {'type_name': 'Y'}
    """
    package, _, type_name = name.rpartition(".")
    variables = {VARIABLE_PACKAGE_NAME: package, VARIABLE_TYPE_NAME: type_name}
    return {key: value for key, value in variables.items() if value}
