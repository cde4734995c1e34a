"""Reserved words of Scala and of its host platform (Java).

Both sets are static and never mutated. Package segments are checked
against both; type names only against :data:`SCALA_KEYWORDS`.
"""

from __future__ import annotations

SCALA_KEYWORDS: frozenset[str] = frozenset(
    {
        "abstract",
        "case",
        "catch",
        "class",
        "def",
        "do",
        "else",
        "extends",
        "false",
        "final",
        "finally",
        "for",
        "forSome",
        "if",
        "implicit",
        "import",
        "lazy",
        "macro",
        "match",
        "new",
        "null",
        "object",
        "override",
        "package",
        "private",
        "protected",
        "return",
        "sealed",
        "super",
        "this",
        "throw",
        "trait",
        "try",
        "true",
        "type",
        "val",
        "var",
        "while",
        "with",
        "yield",
        # Reserved operators
        "_",
        ":",
        "=",
        "=>",
        "<-",
        "<:",
        "<%",
        ">:",
        "#",
        "@",
    }
)

JAVA_KEYWORDS: frozenset[str] = frozenset(
    {
        "abstract",
        "assert",
        "boolean",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "class",
        "const",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extends",
        "false",
        "final",
        "finally",
        "float",
        "for",
        "goto",
        "if",
        "implements",
        "import",
        "instanceof",
        "int",
        "interface",
        "long",
        "native",
        "new",
        "null",
        "package",
        "private",
        "protected",
        "public",
        "return",
        "short",
        "static",
        "strictfp",
        "super",
        "switch",
        "synchronized",
        "this",
        "throw",
        "throws",
        "transient",
        "true",
        "try",
        "void",
        "volatile",
        "while",
    }
)


def is_reserved_word(
    word: str,
    language_keywords: frozenset[str] = SCALA_KEYWORDS,
    platform_keywords: frozenset[str] = frozenset(),
) -> bool:
    """Return True if *word* is in either keyword set.

    Examples:
        >>> is_reserved_word("type")
        True
        >>> is_reserved_word("int")
        False
        >>> is_reserved_word("int", SCALA_KEYWORDS, JAVA_KEYWORDS)
        True
    """
    return word in language_keywords or word in platform_keywords
