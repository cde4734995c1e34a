"""Identifier rules for package segments and type names.

Package segments follow the Java identifier grammar and may not collide with
a Scala or a Java keyword. Type names are whatever the Scala lexer accepts
as a single identifier token, minus the Scala keywords.
"""

from __future__ import annotations

import unicodedata

from scalanew.domain.keywords import JAVA_KEYWORDS, SCALA_KEYWORDS, is_reserved_word
from scalanew.domain.lexer import ScalaLexerError, tokenize

# Unicode categories accepted by java.lang.Character.isJavaIdentifierStart.
_JAVA_START_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo", "Nl", "Sc", "Pc"})
# ... and the additional ones accepted by isJavaIdentifierPart.
_JAVA_PART_CATEGORIES = _JAVA_START_CATEGORIES | {"Nd", "Mn", "Mc", "Cf"}


def is_java_identifier_start(ch: str) -> bool:
    """Return True if *ch* may start a Java identifier."""
    return unicodedata.category(ch) in _JAVA_START_CATEGORIES


def is_java_identifier_part(ch: str) -> bool:
    """Return True if *ch* may appear after the first character of a Java identifier."""
    if unicodedata.category(ch) in _JAVA_PART_CATEGORIES:
        return True
    # Identifier-ignorable ISO control characters.
    code = ord(ch)
    return 0x00 <= code <= 0x08 or 0x0E <= code <= 0x1B or 0x7F <= code <= 0x9F


def is_valid_package_ident(segment: str) -> bool:
    """Check one package segment against the Java grammar and both keyword sets.

    Examples:
        >>> is_valid_package_ident("util")
        True
        >>> is_valid_package_ident("1st")
        False
        >>> is_valid_package_ident("int")
        False
        >>> is_valid_package_ident("")
        False
    """
    valid_ident = (
        bool(segment)
        and is_java_identifier_start(segment[0])
        and all(is_java_identifier_part(ch) for ch in segment[1:])
    )
    return valid_ident and not is_reserved_word(segment, SCALA_KEYWORDS, JAVA_KEYWORDS)


def is_single_identifier_token(text: str) -> bool:
    """Return True if the trimmed *text* lexes to exactly one identifier token.

    A :class:`ScalaLexerError` counts as "not an identifier". Any other
    exception raised by the lexer is a defect and propagates.
    """
    try:
        tokens = tokenize(text.strip())
    except ScalaLexerError:
        return False
    return len(tokens) == 2 and tokens[0].type.is_id


def is_valid_type_ident(segment: str) -> bool:
    """Check a type name: a single identifier token that is not a Scala keyword.

    Java keywords are allowed here on purpose (``class int`` is legal Scala).

    Examples:
        >>> is_valid_type_ident("Foo")
        True
        >>> is_valid_type_ident("`Foo Bar`")
        True
        >>> is_valid_type_ident("type")
        False
        >>> is_valid_type_ident("Foo-Bar")
        False
    """
    return is_single_identifier_token(segment) and not is_reserved_word(
        segment.strip(), SCALA_KEYWORDS
    )
