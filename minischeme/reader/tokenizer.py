"""
  Scheme tokenizer

- Streaming: tokens are produced lazily, one `next()` at a time
- Token kinds:

    - integers     -> INTEGER(value)     e.g. 42, -7
    - ( and )      -> OPEN_PAREN, CLOSE_PAREN
    - '            -> QUOTE
    - lone .       -> DOT
    - #t, #f       -> TRUE, FALSE
    - identifiers  -> IDENTIFIER(name)   e.g. car, set-car!, <=
    - end of input -> END
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional, TextIO, Union

from minischeme.errors import SchemeLexError, SchemeSyntaxError


class TokenKind(Enum):
    INTEGER = auto()
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()
    QUOTE = auto()
    DOT = auto()
    IDENTIFIER = auto()
    TRUE = auto()
    FALSE = auto()
    END = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Union[int, str, None] = None


END_TOKEN = Token(TokenKind.END)

# Only space and newline separate tokens; a tab is an unrecognized token
_WHITESPACE = " \n"

# Characters that may start an identifier; digits and '.' may only follow
_IDENT_START = r"A-Za-z+\-*/<=>!?:$%_&~^"
_IDENT_REST = _IDENT_START + r"0-9."

TOKEN_RE = re.compile(
    r"(?P<integer>-?[0-9]+)"  # a leading '-' binds only when a digit follows
    r"|(?P<open_paren>\()"
    r"|(?P<close_paren>\))"
    r"|(?P<quote>')"
    r"|(?P<dot>\.)"
    rf"|(?P<true>#t(?![{_IDENT_REST}]))"
    rf"|(?P<false>#f(?![{_IDENT_REST}]))"
    rf"|(?P<identifier>[{_IDENT_START}][{_IDENT_REST}]*)"
)

_SIMPLE_KINDS = {
    "open_paren": TokenKind.OPEN_PAREN,
    "close_paren": TokenKind.CLOSE_PAREN,
    "quote": TokenKind.QUOTE,
    "dot": TokenKind.DOT,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
}


def lex(source: Union[str, TextIO]) -> Iterator[Token]:
    """Token generator over a string or readable text stream; ends with END."""
    if not isinstance(source, str):
        source = source.read()
    pos = 0
    n = len(source)

    while True:
        while pos < n and source[pos] in _WHITESPACE:
            pos += 1
        if pos >= n:
            yield END_TOKEN
            return

        m = TOKEN_RE.match(source, pos)
        if m is None:
            raise SchemeLexError(f"unrecognized token {source[pos]!r} at {pos}")
        group = m.lastgroup
        text = m.group()
        pos = m.end()

        if group == "integer":
            yield Token(TokenKind.INTEGER, int(text))
        elif group == "identifier":
            yield Token(TokenKind.IDENTIFIER, text)
        else:
            yield Token(_SIMPLE_KINDS[group])


class Tokenizer:
    """Cursor over a token stream with one token of lookahead.

    Once END has been reached it stays the current token; asking for a
    token's value through `token()` after that is a syntax error.
    """

    def __init__(self, source: Union[str, TextIO]):
        self._tokens: Iterator[Token] = lex(source)
        self._current: Optional[Token] = None

    def peek(self) -> Token:
        """Current token, without consuming it."""
        if self._current is None:
            self._current = next(self._tokens, END_TOKEN)
        return self._current

    def advance(self) -> Token:
        """Consume and return the current token."""
        tok = self.peek()
        if tok.kind is not TokenKind.END:
            self._current = None
        return tok

    def at_end(self) -> bool:
        return self.peek().kind is TokenKind.END

    def token(self) -> Token:
        tok = self.peek()
        if tok.kind is TokenKind.END:
            raise SchemeSyntaxError("No tokens left")
        return tok
