"""
  Tokenizer for mal source text.

- Lazy: tokens are produced one at a time by a generator
- Restartable: iterating a Tokenizer again starts over from the beginning
- Whitespace and commas separate tokens and are never emitted
- Comments are emitted as tokens; the reader skips them

Token kinds:

    - special        ( ) [ ] { } ' ` ~ ^ @
    - splice_unquote ~@   (preferred over ~)
    - string         "..." with backslash escapes left undecoded
    - comment        ; to end of line
    - number         -?[0-9]+ (longest match; a bare - falls back to atom)
    - atom           everything else up to a separator or punctuation
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

from mal.errors import MalEOFError


TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<splice_unquote>~@)"  # ~@ before ~
    r"|(?P<special>[\[\]{}()'`~^@])"  # single-character punctuation
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<open_string>")'  # a quote with no closing partner
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<number>-?[0-9]+)"  # integers
    r'|(?P<atom>[^\s\[\]{}()\'"`,;^]+)'  # fallback: symbols and the like
    r")",
    re.DOTALL,
)


class Token(NamedTuple):
    kind: str
    text: str
    pos: int


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, text, pos) tuples left to right."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.lastgroup is None:
            # only separators remain
            break
        kind = m.lastgroup
        if kind == "open_string":
            raise MalEOFError(f"Unterminated string starting at {m.start(kind)}")
        yield Token(kind, m.group(kind), m.start(kind))
        pos = m.end()


class Tokenizer:
    """Restartable view of the tokens in `source`."""

    def __init__(self, source: str):
        self.source = source

    def __iter__(self) -> Iterator[Token]:
        return lex(self.source)
