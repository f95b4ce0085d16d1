"""Lexers that rewrite the tokens produced by another lexer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence

from .tokens import EOF, Token, TokenType


class RemappingLexer:
    """Maps each token of a wrapped lexer to a, possibly empty, list of tokens."""

    def __init__(self, lexer: Any, mapper: Callable[[Token], Sequence[Token]]) -> None:
        self.lexer = lexer
        self.mapper = mapper

    @property
    def config(self) -> Any:
        return self.lexer.config

    def analyse_text(self, text: str) -> float:
        """The wrapped lexer's score for ``text``."""
        return self.lexer.analyse_text(text)

    def set_analyser(self, analyser: Callable[[str], float]) -> RemappingLexer:
        """Set the wrapped lexer's analyser."""
        self.lexer.set_analyser(analyser)
        return self

    def set_registry(self, registry: Any) -> RemappingLexer:
        """Set the wrapped lexer's registry."""
        self.lexer.set_registry(registry)
        return self

    def tokenise(self, text: str, options: Any = None) -> Iterator[Token]:
        """Return an iterator over the remapped tokens of ``text``."""
        return self._remap(self.lexer.tokenise(text, options))

    def _remap(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token == EOF:
                return
            yield from self.mapper(token)


@dataclass(frozen=True)
class TypeMap:
    """Maps tokens of type ``source`` to ``target``; only those in ``words`` if any are given."""

    source: TokenType
    target: TokenType
    words: Sequence[str] = ()


def type_remapping_lexer(lexer: Any, mapping: Iterable[Any]) -> RemappingLexer:
    """A lexer changing the types of tokens from ``lexer`` according to ``mapping``."""
    lut: dict[TokenType, dict[str, TokenType]] = {}
    for entry in mapping:
        if not isinstance(entry, TypeMap):
            entry = TypeMap(*entry)
        table = lut.setdefault(entry.source, {})
        if not entry.words:
            table[""] = entry.target
        for word in entry.words:
            table[word] = entry.target

    def mapper(token: Token) -> list[Token]:
        table = lut.get(token.type)
        if table is not None:
            target: Optional[TokenType] = table.get(token.value)
            if target is None:
                target = table.get("")
            if target is not None:
                token = replace(token, type=target)
        return [token]

    return RemappingLexer(lexer, mapper)