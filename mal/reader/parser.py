"""
  Reader: turns the token stream into forms.

- Recursive descent with one token of lookahead
- Emits mal values directly:

    - ( ... )   -> List
    - [ ... ]   -> Vector
    - { k v }   -> HashMap
    - nil/true/false -> Nil / TRUE / FALSE
    - -?[0-9]+  -> int (signed 64-bit, wider literals are rejected)
    - "..."     -> str (escapes decoded)
    - :name     -> Keyword
    - anything else -> Symbol
    - 'x `x ~x ~@x @x -> (quote x) (quasiquote x) (unquote x) (splice-unquote x) (deref x)
    - ^m v      -> (with-meta v m)

Running out of input inside a collection raises MalEOFError whose `partial`
is the top-level form as far as it was read.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from mal import MalForm
from mal.errors import MalEOFError, MalSyntaxError
from mal.reader.tokenizer import Token, Tokenizer
from mal.types.boolean import FALSE, TRUE
from mal.types.hash_map import HashMap
from mal.types.kinds import in_int_range
from mal.types.nil import Nil
from mal.types.sequences import List, Vector
from mal.types.symbol import Keyword, Symbol


QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    "~": Symbol("unquote"),
    "~@": Symbol("splice-unquote"),
    "@": Symbol("deref"),
}

WITH_META = Symbol("with-meta")

LITERALS = {
    "nil": Nil,
    "true": TRUE,
    "false": FALSE,
}

CLOSERS = {
    "(": (")", List),
    "[": ("]", Vector),
}

_NO_KEY = object()

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_ESCAPES = {"n": "\n"}


def unescape(text: str) -> str:
    """Decode the body of a string token: \\n is a newline, \\c is c."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), text)


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        """Next significant token without consuming it; comments are dropped."""
        while not self.buffer:
            tok = next(self.tokens, None)
            if tok is None:
                return None
            if tok.kind != "comment":
                self.buffer.append(tok)
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.buffer.pop(0)
        return tok

    def parse_expr(self) -> Optional[MalForm]:
        """Read one form, or return None when the input holds no more forms."""
        tok = self.peek()
        if tok is None:
            return None
        return self._read_form()

    def _read_form(self) -> MalForm:
        tok = self.advance()
        if tok is None:
            raise MalEOFError("Unexpected end of input, expected a form")
        kind, text = tok.kind, tok.text

        if kind in ("special", "splice_unquote"):
            if text in CLOSERS:
                closer, ctor = CLOSERS[text]
                return self._read_sequence(closer, ctor)
            if text == "{":
                return self._read_hash_map()
            if text in QUOTE_FORMS:
                return self._read_wrapped(QUOTE_FORMS[text])
            if text == "^":
                return self._read_with_meta()
            raise MalSyntaxError(f"Unexpected '{text}' at {tok.pos}")

        if kind == "number":
            try:
                value = int(text)
            except ValueError:
                raise MalSyntaxError(f"Invalid integer literal {text!r} at {tok.pos}")
            if not in_int_range(value):
                raise MalSyntaxError(f"Integer literal {text} out of 64-bit range at {tok.pos}")
            return value

        if kind == "string":
            return unescape(text[1:-1])

        if text in LITERALS:
            return LITERALS[text]
        if text.startswith(":") and len(text) > 1:
            return Keyword(text[1:])
        return Symbol(text)

    def _read_sequence(self, closer: str, ctor: type) -> MalForm:
        items: list[MalForm] = []
        try:
            while True:
                tok = self.peek()
                if tok is None:
                    raise MalEOFError(f"Unexpected end of input, expected '{closer}'")
                if tok.text == closer:
                    self.advance()
                    return ctor(items)
                items.append(self._read_form())
        except MalSyntaxError as e:
            e.partial = ctor(items if e.partial is None else items + [e.partial])
            raise

    def _read_hash_map(self) -> HashMap:
        entries: dict[MalForm, MalForm] = {}
        key = _NO_KEY
        try:
            while True:
                tok = self.peek()
                if tok is None:
                    raise MalEOFError("Unexpected end of input, expected '}'")
                if tok.text == "}":
                    self.advance()
                    if key is not _NO_KEY:
                        raise MalSyntaxError(f"Map key {key!r} has no value")
                    return HashMap(entries)
                if key is _NO_KEY:
                    key = self._read_form()
                else:
                    entries[key] = self._read_form()
                    key = _NO_KEY
        except MalSyntaxError as e:
            if key is not _NO_KEY and e.partial is not None:
                entries[key] = e.partial
            e.partial = HashMap(entries)
            raise

    def _read_wrapped(self, head: Symbol) -> List:
        try:
            return List((head, self._read_form()))
        except MalSyntaxError as e:
            e.partial = List((head,) if e.partial is None else (head, e.partial))
            raise

    def _read_with_meta(self) -> List:
        # ^{"a" 1} [1 2 3] -> (with-meta [1 2 3] {"a" 1})
        meta = _NO_KEY
        try:
            meta = self._read_form()
            value = self._read_form()
        except MalSyntaxError as e:
            # partial keeps output order; a value slot with nothing read is nil
            if meta is _NO_KEY:
                e.partial = List((WITH_META,) if e.partial is None else (WITH_META, Nil, e.partial))
            else:
                e.partial = List((WITH_META, Nil if e.partial is None else e.partial, meta))
            raise
        return List((WITH_META, value, meta))

    def parse_all(self) -> Iterator[MalForm]:
        while self.peek() is not None:
            yield self._read_form()


def read_str(source: str) -> Optional[MalForm]:
    """Read the first form in `source`; None when there is no form at all."""
    return TokenStream(Tokenizer(source)).parse_expr()


def read_all(source: str) -> list[MalForm]:
    return list(TokenStream(Tokenizer(source)).parse_all())
