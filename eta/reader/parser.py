"""
  Eta Reader: lexer and parser

- Streaming, lazy parsing
- Every node carries the Location of its first character

   - integers  -> Integer       (42, -7; past the 128-bit range -> Float)
   - floats    -> Float         (3.14, -0.5, 1e10)
   - true/false -> Bool
   - "text"    -> String        (a backslash makes the next character literal)
   - lists     -> List
   - anything else between delimiters -> Symbol
   - ; starts a comment that runs to the end of the line
"""

from __future__ import annotations

import re
from bisect import bisect_right
from typing import Iterator, Optional

from eta.errors import EtaSyntaxError
from eta import SExpression
from eta.types.location import Location
from eta.types.values import Bool, Float, Integer, List, Module, String, Symbol

Token = tuple[str, str, Location]

TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>")'  # a quote with no closing quote
    r"|(?P<symbol>[^\s()\"';]+)"  # fallback: symbols and numbers
)

INT_RE = re.compile(r"[+-]?\d+")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

BOOLEANS: dict[str, bool] = {
    "true": True,
    "false": False,
}


def lex(source: str, filename: str | None = None) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, location) tuples."""
    line_starts = [0] + [m.end() for m in re.finditer(r"\n", source)]

    def location(offset: int) -> Location:
        line = bisect_right(line_starts, offset)
        return Location(filename, line, offset - line_starts[line - 1] + 1)

    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise EtaSyntaxError(f"Unexpected character {source[pos]!r}", location(pos))
        kind = m.lastgroup
        if kind == "unterminated":
            raise EtaSyntaxError("Unterminated string", location(pos))
        if kind not in ("whitespace", "comment"):
            yield kind, m.group(kind), location(pos)
        pos = m.end()


def parse_atom(text: str, loc: Location) -> SExpression:
    if INT_RE.fullmatch(text):
        value = int(text)
        # literals past the 128-bit range are read as floats
        return Integer(value, loc) if Integer.in_range(value) else Float(float(text), loc)
    if FLOAT_RE.fullmatch(text):
        return Float(float(text), loc)
    if text in BOOLEANS:
        return Bool(BOOLEANS[text], loc)
    return Symbol(text, loc)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str], Optional[Location]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], Optional[Location]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, None))

    def parse_expr(self) -> Optional[SExpression]:
        """Parse the next form, or return None at end of input."""
        tok_type, tok_val, loc = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            return parse_atom(tok_val, loc)

        if tok_type == "string":
            return String(ESCAPE_RE.sub(r"\1", tok_val[1:-1]), loc)

        if tok_type == "lparen":
            items = []
            while True:
                next_type = self.peek()[0]
                if next_type is None:
                    raise EtaSyntaxError("Unmatched '('", loc)
                if next_type == "rparen":
                    self.advance()
                    break
                items.append(self.parse_expr())
            return List(tuple(items), loc)

        if tok_type == "rparen":
            raise EtaSyntaxError("Unexpected ')'", loc)

        raise EtaSyntaxError(f"Unknown token: {tok_type} {tok_val}", loc)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            expr = self.parse_expr()
            if expr is None:
                break
            yield expr


def read(source: str, filename: str | None = None) -> Module:
    """Read a whole source text into a Module of top-level forms."""
    forms = tuple(TokenStream(lex(source, filename)).parse_all())
    return Module(forms, Location(filename, 1, 1))
