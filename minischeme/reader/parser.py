"""
  Scheme reader

Recursive descent over a `Tokenizer`, one token of lookahead. Emits terms:

    - integers      -> int
    - #t / #f       -> bool
    - ()            -> Nil
    - lists         -> chains of Pair ending in Nil
    - dotted lists  -> chains of Pair ending in the dotted tail
    - identifiers   -> Builtin when the name is a built-in, Symbol otherwise
    - 'x            -> (quote x)
"""

from __future__ import annotations

from typing import Iterator

from minischeme import Term
from minischeme.errors import SchemeSyntaxError
from minischeme.reader.tokenizer import Tokenizer, TokenKind
from minischeme.types.builtin import Builtin
from minischeme.types.nil import Nil
from minischeme.types.pair import Pair, from_list
from minischeme.types.symbol import Symbol


def _next_token(tokenizer: Tokenizer):
    if tokenizer.at_end():
        raise SchemeSyntaxError("Unexpected end of input")
    return tokenizer.token()


def read(tokenizer: Tokenizer) -> Term:
    """Read one term, advancing the tokenizer past it."""
    tok = _next_token(tokenizer)

    match tok.kind:
        case TokenKind.OPEN_PAREN:
            tokenizer.advance()
            return read_list(tokenizer)
        case TokenKind.CLOSE_PAREN:
            raise SchemeSyntaxError("Unexpected )")
        case TokenKind.INTEGER:
            tokenizer.advance()
            return tok.value
        case TokenKind.TRUE:
            tokenizer.advance()
            return True
        case TokenKind.FALSE:
            tokenizer.advance()
            return False
        case TokenKind.IDENTIFIER:
            tokenizer.advance()
            builtin = Builtin.lookup(tok.value)
            return builtin if builtin is not None else Symbol(tok.value)
        case TokenKind.QUOTE:
            tokenizer.advance()
            return Pair(Builtin.QUOTE, Pair(read(tokenizer), Nil))

    raise SchemeSyntaxError(f"Unexpected token: {tok.kind.name.lower()}")


def read_list(tokenizer: Tokenizer) -> Term:
    """Read the rest of a list whose opening paren was already consumed.

    Elements are collected until ')' closes a proper list or '.' introduces
    the final tail; each element becomes one Pair of the resulting chain.
    """
    items: list[Term] = []
    while True:
        tok = _next_token(tokenizer)
        if tok.kind is TokenKind.CLOSE_PAREN:
            tokenizer.advance()
            return from_list(items)
        if tok.kind is TokenKind.DOT and items:
            tokenizer.advance()
            tail = read(tokenizer)
            if _next_token(tokenizer).kind is not TokenKind.CLOSE_PAREN:
                raise SchemeSyntaxError("Expected ')' after dotted pair")
            tokenizer.advance()
            return from_list(items, tail)
        items.append(read(tokenizer))


def read_all(tokenizer: Tokenizer) -> Iterator[Term]:
    """Yield every top-level term until the tokenizer is exhausted."""
    while not tokenizer.at_end():
        yield read(tokenizer)
