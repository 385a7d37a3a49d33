"""
FurryScript Lexer
=================
Tokenizes FurryScript source code into a flat list of typed tokens.
Handles keywords, operators, punctuation, and string/number literals.
"""
import logging
import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from .errors import LexError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """All token types in the FurryScript language."""
    # Literals
    STRING      = auto()   # "..."
    INTEGER     = auto()   # 42
    FLOAT       = auto()   # 3.14
    IDENTIFIER  = auto()   # variable/function names

    # Keywords
    PURR        = auto()   # print
    MEOW        = auto()   # variable declaration
    WOOF        = auto()   # variable access
    TRICK       = auto()   # function declaration

    # Punctuation
    EQUALS      = auto()   # =
    LPAREN      = auto()   # (
    RPAREN      = auto()   # )
    LBRACE      = auto()   # {
    RBRACE      = auto()   # }
    COMMA       = auto()   # ,

    # Arithmetic operators
    PLUS        = auto()   # +
    MINUS       = auto()   # -
    STAR        = auto()   # *
    SLASH       = auto()   # /

    # Special
    EOF         = auto()


@dataclass(frozen=True)
class Token:
    """A single token from the FurryScript source."""
    type: TokenType
    value: str
    line: int
    col: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, L{self.line}:{self.col})"


SINGLE_CHAR_TOKENS = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ",": TokenType.COMMA,
    "=": TokenType.EQUALS,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
}

KEYWORDS = {
    "purr": TokenType.PURR,
    "meow": TokenType.MEOW,
    "woof": TokenType.WOOF,
    "trick": TokenType.TRICK,
}

ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\", '"': '"'}

IDENTIFIER_CHARS = frozenset(string.ascii_letters + "_")
DIGITS = frozenset(string.digits)


class Lexer:
    """
    Tokenizes FurryScript source code.

    Usage:
        lexer = Lexer(source_code)
        tokens = lexer.tokenize()
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.col = 1

    def _current(self) -> str | None:
        if self.pos >= len(self.source):
            return None
        return self.source[self.pos]

    def _peek(self, offset: int = 1) -> str | None:
        idx = self.pos + offset
        if idx >= len(self.source):
            return None
        return self.source[idx]

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def _skip_whitespace(self):
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self._advance()

    def _read_string(self) -> Token:
        """Read a double-quoted string literal, decoding escapes.

        A missing closing quote is tolerated: the literal runs to end of input.
        """
        start_line, start_col = self.line, self.col
        self._advance()  # consume opening "
        chars = []
        while self.pos < len(self.source):
            ch = self._advance()
            if ch == '"':
                return Token(TokenType.STRING, "".join(chars), start_line, start_col)
            if ch == "\\":
                if self.pos >= len(self.source):
                    break
                next_ch = self._advance()
                chars.append(ESCAPES.get(next_ch, next_ch))
            else:
                chars.append(ch)
        logger.debug("Unterminated string at line %d, col %d", start_line, start_col)
        return Token(TokenType.STRING, "".join(chars), start_line, start_col)

    def _read_number(self) -> Token:
        """Read an integer literal, or a float when a '.' is followed by a digit."""
        start_line, start_col = self.line, self.col
        chars = []
        while self._current() in DIGITS:
            chars.append(self._advance())
        if self._current() == "." and self._peek() in DIGITS:
            chars.append(self._advance())
            while self._current() in DIGITS:
                chars.append(self._advance())
            return Token(TokenType.FLOAT, "".join(chars), start_line, start_col)
        return Token(TokenType.INTEGER, "".join(chars), start_line, start_col)

    def _read_identifier(self) -> Token:
        """Read an identifier or keyword."""
        start_line, start_col = self.line, self.col
        chars = []
        while self._current() in IDENTIFIER_CHARS:
            chars.append(self._advance())
        word = "".join(chars)
        token_type = KEYWORDS.get(word, TokenType.IDENTIFIER)
        return Token(token_type, word, start_line, start_col)

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source into a list of tokens ending with EOF."""
        tokens = list(self._iter_tokens())
        tokens.append(Token(TokenType.EOF, "", self.line, self.col))
        logger.debug("Lexed %d tokens", len(tokens))
        return tokens

    def _iter_tokens(self) -> Iterator[Token]:
        """Generate tokens one at a time."""
        while self.pos < len(self.source):
            self._skip_whitespace()

            if self.pos >= len(self.source):
                break

            ch = self._current()

            if ch == '"':
                yield self._read_string()
                continue

            if ch in SINGLE_CHAR_TOKENS:
                yield Token(SINGLE_CHAR_TOKENS[ch], ch, self.line, self.col)
                self._advance()
                continue

            if ch in DIGITS:
                yield self._read_number()
                continue

            if ch in IDENTIFIER_CHARS:
                yield self._read_identifier()
                continue

            raise LexError(ch, self.line, self.col)


def tokenize(source: str) -> list[Token]:
    """Tokenize ``source`` with a fresh Lexer."""
    return Lexer(source).tokenize()
