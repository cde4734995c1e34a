"""Lexical scanner for Scala source fragments.

Converts raw text into a sequence of tokens. The scanner never forgives
errors: malformed literals, unclosed back-quotes, and characters that are not
part of the Scala alphabet raise :class:`ScalaLexerError`.

Only the token categories needed to tell identifiers apart from keywords,
literals, and delimiters are distinguished. Whitespace and comments are
consumed and not included in the output.
"""

from __future__ import annotations

import enum
import unicodedata
from dataclasses import dataclass

from scalanew.domain.keywords import SCALA_KEYWORDS

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the Scala lexer."""

    # Identifiers
    VARID = "VARID"
    OTHERID = "OTHERID"

    # Keywords and reserved operators
    KEYWORD = "KEYWORD"

    # Literals
    INTEGER_LITERAL = "INTEGER_LITERAL"
    FLOATING_POINT_LITERAL = "FLOATING_POINT_LITERAL"
    CHARACTER_LITERAL = "CHARACTER_LITERAL"
    STRING_LITERAL = "STRING_LITERAL"
    SYMBOL_LITERAL = "SYMBOL_LITERAL"

    # Delimiters
    LPAREN = "("
    RPAREN = ")"
    LBRACKET = "["
    RBRACKET = "]"
    LBRACE = "{"
    RBRACE = "}"
    DOT = "."
    COMMA = ","
    SEMI = ";"

    EOF = "EOF"

    @property
    def is_id(self) -> bool:
        """Whether tokens of this type are identifiers."""
        return self in _ID_TYPES


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Attributes:
        type: The kind of token.
        text: The raw source text of the token.
        offset: 0-based offset of the first character.
    """

    type: TokenType
    text: str
    offset: int


class ScalaLexerError(Exception):
    """Raised when the scanner cannot turn the input into tokens.

    Attributes:
        offset: 0-based offset where scanning failed.
    """

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"Offset {offset}: {message}")
        self.offset = offset


def tokenize(source: str) -> list[Token]:
    """Tokenize *source* into a list of tokens ending with a single EOF token.

    Raises:
        ScalaLexerError: On illegal characters, malformed numbers, and
            unterminated strings, characters, comments, or back-quotes.
    """
    return _Lexer(source).tokenize()


# ################
# Implementation
# ################

_ID_TYPES = frozenset({TokenType.VARID, TokenType.OTHERID})

_OP_CHARS = frozenset("!#%&*+-/:<=>?@\\^|~")

_DELIMITERS: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMI,
}

_LETTER_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo", "Nl"})
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_ident_start(ch: str) -> bool:
    return ch in "_$" or unicodedata.category(ch) in _LETTER_CATEGORIES


def _is_ident_part(ch: str) -> bool:
    return _is_ident_start(ch) or unicodedata.category(ch) == "Nd"


def _is_op_char(ch: str) -> bool:
    return ch in _OP_CHARS or unicodedata.category(ch) in ("Sm", "So")


def _classify_name(text: str) -> TokenType:
    if text in SCALA_KEYWORDS:
        return TokenType.KEYWORD
    if unicodedata.category(text[0]) == "Ll":
        return TokenType.VARID
    return TokenType.OTHERID


class _Lexer:
    """Internal scanner state machine."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        while True:
            self._skip_whitespace_and_comments()
            if self._pos >= len(self._source):
                break
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", self._pos))
        return self._tokens

    # ------------------------------------------------------------------
    # Character access
    # ------------------------------------------------------------------

    def _current(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _peek(self) -> str:
        if self._pos + 1 < len(self._source):
            return self._source[self._pos + 1]
        return ""

    def _emit(self, token_type: TokenType, start: int) -> None:
        self._tokens.append(Token(token_type, self._source[start : self._pos], start))

    # ------------------------------------------------------------------
    # Whitespace and comments
    # ------------------------------------------------------------------

    def _skip_whitespace_and_comments(self) -> None:
        while self._pos < len(self._source):
            ch = self._current()
            if ch.isspace():
                self._pos += 1
            elif ch == "/" and self._peek() == "/":
                while self._pos < len(self._source) and self._current() != "\n":
                    self._pos += 1
            elif ch == "/" and self._peek() == "*":
                self._skip_block_comment()
            else:
                return

    def _skip_block_comment(self) -> None:
        start = self._pos
        self._pos += 2
        depth = 1
        while depth > 0:
            if self._pos >= len(self._source):
                raise ScalaLexerError("unclosed comment", start)
            if self._current() == "/" and self._peek() == "*":
                depth += 1
                self._pos += 2
            elif self._current() == "*" and self._peek() == "/":
                depth -= 1
                self._pos += 2
            else:
                self._pos += 1

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._current()
        if ch == "`":
            self._scan_back_quoted()
        elif _is_ident_start(ch):
            self._scan_plain_id()
        elif _is_digit(ch) or (ch == "." and _is_digit(self._peek())):
            self._scan_number()
        elif ch == '"':
            self._scan_string()
        elif ch == "'":
            self._scan_quote()
        elif ch in _DELIMITERS:
            start = self._pos
            self._pos += 1
            self._emit(_DELIMITERS[ch], start)
        elif _is_op_char(ch):
            self._scan_op_id()
        else:
            raise ScalaLexerError(f"illegal character {ch!r}", self._pos)

    def _scan_plain_id(self) -> None:
        start = self._pos
        self._pos += 1
        while self._pos < len(self._source) and _is_ident_part(self._current()):
            self._pos += 1
        # idrest ::= {letter | digit} ['_' op]
        if self._source[self._pos - 1] == "_":
            while self._pos < len(self._source) and _is_op_char(self._current()):
                self._pos += 1
        self._emit(_classify_name(self._source[start : self._pos]), start)

    def _scan_op_id(self) -> None:
        start = self._pos
        while self._pos < len(self._source) and _is_op_char(self._current()):
            if self._current() == "/" and self._peek() in ("/", "*"):
                break
            self._pos += 1
        text = self._source[start : self._pos]
        token_type = TokenType.KEYWORD if text in SCALA_KEYWORDS else TokenType.OTHERID
        self._emit(token_type, start)

    def _scan_back_quoted(self) -> None:
        start = self._pos
        self._pos += 1
        while self._current() != "`":
            if self._pos >= len(self._source) or self._current() in "\r\n":
                raise ScalaLexerError("unclosed quoted identifier", start)
            self._pos += 1
        if self._pos == start + 1:
            raise ScalaLexerError("empty quoted identifier", start)
        self._pos += 1
        inner = self._source[start + 1]
        token_type = TokenType.VARID if unicodedata.category(inner) == "Ll" else TokenType.OTHERID
        self._emit(token_type, start)

    def _scan_number(self) -> None:
        start = self._pos
        if self._current() == "0" and self._peek() in ("x", "X"):
            self._pos += 2
            digits_start = self._pos
            while self._current() in _HEX_DIGITS:
                self._pos += 1
            if self._pos == digits_start:
                raise ScalaLexerError("malformed integer literal", start)
            if self._current() in ("l", "L"):
                self._pos += 1
            self._emit(TokenType.INTEGER_LITERAL, start)
            return

        is_float = False
        while _is_digit(self._current()):
            self._pos += 1
        if self._current() == "." and _is_digit(self._peek()):
            is_float = True
            self._pos += 1
            while _is_digit(self._current()):
                self._pos += 1
        if self._current() in ("e", "E"):
            self._pos += 1
            if self._current() in ("+", "-"):
                self._pos += 1
            if not _is_digit(self._current()):
                raise ScalaLexerError("malformed floating point literal", start)
            while _is_digit(self._current()):
                self._pos += 1
            is_float = True
        if self._current() in ("f", "F", "d", "D"):
            self._pos += 1
            is_float = True
        elif not is_float and self._current() in ("l", "L"):
            self._pos += 1
        token_type = TokenType.FLOATING_POINT_LITERAL if is_float else TokenType.INTEGER_LITERAL
        self._emit(token_type, start)

    def _scan_string(self) -> None:
        start = self._pos
        if self._source.startswith('"""', self._pos):
            end = self._source.find('"""', self._pos + 3)
            if end < 0:
                raise ScalaLexerError("unclosed multi-line string literal", start)
            self._pos = end + 3
            # A multi-line string may end with extra quotes: """a""""
            while self._current() == '"':
                self._pos += 1
            self._emit(TokenType.STRING_LITERAL, start)
            return

        self._pos += 1
        while True:
            ch = self._current()
            if ch == "" or ch in "\r\n":
                raise ScalaLexerError("unclosed string literal", start)
            if ch == "\\":
                self._scan_escape(start)
                continue
            self._pos += 1
            if ch == '"':
                break
        self._emit(TokenType.STRING_LITERAL, start)

    def _scan_quote(self) -> None:
        start = self._pos
        self._pos += 1
        ch = self._current()
        if ch and _is_ident_start(ch) and self._peek() != "'":
            while self._pos < len(self._source) and _is_ident_part(self._current()):
                self._pos += 1
            self._emit(TokenType.SYMBOL_LITERAL, start)
            return

        if ch == "" or ch in "\r\n'":
            raise ScalaLexerError("empty character literal", start)
        if ch == "\\":
            self._scan_escape(start)
        else:
            self._pos += 1
        if self._current() != "'":
            raise ScalaLexerError("unclosed character literal", start)
        self._pos += 1
        self._emit(TokenType.CHARACTER_LITERAL, start)

    def _scan_escape(self, literal_start: int) -> None:
        self._pos += 1
        ch = self._current()
        if ch == "":
            raise ScalaLexerError("unclosed escape sequence", literal_start)
        if ch == "u":
            while self._current() == "u":
                self._pos += 1
            digits = self._source[self._pos : self._pos + 4]
            if len(digits) < 4 or any(d not in _HEX_DIGITS for d in digits):
                raise ScalaLexerError("malformed unicode escape", literal_start)
            self._pos += 4
        elif ch in "btnfr\"'\\" or "0" <= ch <= "7":
            self._pos += 1
        else:
            raise ScalaLexerError(f"invalid escape character {ch!r}", literal_start)
