"""Regular-expression driven lexers built from state machines of rules."""

from __future__ import annotations

import re
import sys
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Union

import regex

from .mutators import Mutator, Rule
from .tokens import EOF, Token, TokenType

MATCH_TIMEOUT = 0.25

RuleSet = dict[str, list[Rule]]
RulesSource = Union[Mapping[str, Iterable[Any]], Callable[[], Mapping[str, Iterable[Any]]]]

_VALID_GLOB = re.compile(r"(?:\\.|\[\^?(?:\\.|[^\]\\])+\]|[^\[\\])*", re.DOTALL)


@dataclass
class Config:
    """Descriptive and behavioural settings of a lexer."""

    name: str = ""
    aliases: list[str] = field(default_factory=list)
    filenames: list[str] = field(default_factory=list)
    alias_filenames: list[str] = field(default_factory=list)
    mime_types: list[str] = field(default_factory=list)
    case_insensitive: bool = False
    dot_all: bool = False
    not_multiline: bool = False
    ensure_nl: bool = False
    priority: float = 0.0


@dataclass
class TokeniseOptions:
    """Options for a single tokenisation."""

    state: str = "root"
    nested: bool = False
    ensure_lf: bool = True


@dataclass
class CompiledRule:
    """A rule together with its compiled regular expression."""

    pattern: str = ""
    type: Optional[Any] = None
    mutator: Optional[Mutator] = None
    flags: int = 0
    regexp: Optional[Any] = None

    @property
    def rule(self) -> Rule:
        return Rule(self.pattern, self.type, self.mutator)


def _as_rule(value: Any) -> Rule:
    if isinstance(value, Rule):
        return value
    if isinstance(value, tuple):
        return Rule(*value)
    raise TypeError(f"not a rule: {value!r}")


def _match_rules(
    text: str, pos: int, rules: list[CompiledRule]
) -> Optional[tuple[int, CompiledRule, list[str], dict[str, str]]]:
    for index, rule in enumerate(rules):
        try:
            match = rule.regexp.match(text, pos, timeout=MATCH_TIMEOUT)
        except TimeoutError:
            continue
        if match is None:
            continue
        names = {number: name for name, number in match.re.groupindex.items()}
        groups = [match.group(i) or "" for i in range(match.re.groups + 1)]
        named = {names.get(i, str(i)): group for i, group in enumerate(groups)}
        return index, rule, groups, named
    return None


def _drain(tokens: Iterable[Token]) -> Iterator[Token]:
    for token in tokens:
        if token.type is TokenType.Ignore:
            continue
        if token == EOF:
            return
        yield token


@dataclass(eq=False)
class LexerState:
    """The state of a single run of a lexer over some text."""

    lexer: RegexLexer
    text: str
    rules: dict[str, list[CompiledRule]]
    options: TokeniseOptions
    stack: list[str]
    registry: Any = None
    pos: int = 0
    state: str = ""
    rule: int = 0
    groups: list[str] = field(default_factory=list)
    named_groups: dict[str, str] = field(default_factory=dict)
    mutator_context: dict[Any, Any] = field(default_factory=dict)
    newline_added: bool = False

    def set(self, key: Any, value: Any) -> None:
        """Store a value in the mutator context."""
        self.mutator_context[key] = value

    def get(self, key: Any) -> Any:
        """A value from the mutator context, or None."""
        return self.mutator_context.get(key)

    def iterator(self) -> Iterator[Token]:
        """Yield the tokens of the text."""
        end = len(self.text) - (1 if self.newline_added else 0)
        while self.pos < end and self.stack:
            self.state = self.stack[-1]
            if self.lexer.trace:
                print(
                    f"{self.state}: pos={self.pos}, text={self.text[self.pos:]!r}",
                    file=sys.stderr,
                )
            try:
                selected = self.rules[self.state]
            except KeyError:
                raise KeyError(f"unknown state {self.state}") from None
            found = _match_rules(self.text, self.pos, selected)
            if found is None:
                # Recover from an unterminated construct by resetting at newlines.
                if self.text[self.pos] == "\n" and self.state != self.options.state:
                    self.stack = [self.options.state]
                    continue
                self.pos += 1
                yield Token(TokenType.Error, self.text[self.pos - 1])
                continue
            self.rule, rule, self.groups, self.named_groups = found
            self.pos += len(self.groups[0])
            if rule.mutator is not None:
                rule.mutator.mutate(self)
            if rule.type is not None:
                yield from _drain(rule.type.emit(self.groups, self))
        if self.pos != len(self.text) and not self.stack:
            value = self.text[self.pos:]
            self.pos = len(self.text)
            yield Token(TokenType.Error, value)


class RegexLexer:
    """A lexer driven by a state machine of regular-expression rules.

    ``rules`` is a mapping from state name to rules, or a callable returning
    one; it is fetched and compiled on first use.
    """

    def __init__(
        self, config: Optional[Config], rules: RulesSource, *, trace: bool = False
    ) -> None:
        config = config if config is not None else Config()
        for glob in [*config.filenames, *config.alias_filenames]:
            if not _VALID_GLOB.fullmatch(glob):
                raise ValueError(
                    f"{config.name}: {glob!r} is not a valid glob: syntax error in pattern"
                )
        self.config = config
        self.registry: Any = None
        self.trace = trace
        self._analyser: Optional[Callable[[str], float]] = None
        self._rules_source = rules
        self._raw_rules: Optional[RuleSet] = None
        self._compiled: dict[str, list[CompiledRule]] = {}
        self._ready = False
        self._lock = threading.Lock()

    def __str__(self) -> str:
        return self.config.name

    def rules(self) -> RuleSet:
        """The lexer's uncompiled rules."""
        self._need_rules()
        assert self._raw_rules is not None
        return self._raw_rules

    def set_registry(self, registry: Any) -> RegexLexer:
        """Set the registry used to look up other lexers."""
        self.registry = registry
        return self

    def set_analyser(self, analyser: Callable[[str], float]) -> RegexLexer:
        """Set the function scoring how likely text is to suit this lexer."""
        self._analyser = analyser
        return self

    def analyse_text(self, text: str) -> float:
        """A score between 0 and 1 of how well ``text`` suits this lexer."""
        if self._analyser is not None:
            return self._analyser(text)
        return 0.0

    def tokenise(self, text: str, options: Optional[TokeniseOptions] = None) -> Iterator[Token]:
        """Return an iterator over the tokens of ``text``."""
        self._need_rules()
        if options is None:
            options = TokeniseOptions()
        if options.ensure_lf:
            text = ensure_lf(text)
        newline_added = False
        if not options.nested and self.config.ensure_nl and not text.endswith("\n"):
            text += "\n"
            newline_added = True
        state = LexerState(
            lexer=self,
            text=text,
            rules=self._compiled,
            options=options,
            stack=[options.state],
            registry=self.registry,
            newline_added=newline_added,
        )
        return state.iterator()

    def _need_rules(self) -> None:
        with self._lock:
            if self._ready:
                return
            if self._raw_rules is None:
                self._fetch_rules()
            self._compile()
            self._ready = True

    def _flags(self) -> int:
        flags = 0
        if not self.config.not_multiline:
            flags |= regex.MULTILINE
        if self.config.case_insensitive:
            flags |= regex.IGNORECASE
        if self.config.dot_all:
            flags |= regex.DOTALL
        return flags

    def _fetch_rules(self) -> None:
        source = self._rules_source
        fetched = source() if callable(source) else source
        raw = {state: [_as_rule(rule) for rule in rules] for state, rules in fetched.items()}
        if "root" not in raw:
            raise ValueError('no "root" state')
        flags = self._flags()
        self._compiled = {
            state: [CompiledRule(r.pattern, r.type, r.mutator, flags) for r in rules]
            for state, rules in raw.items()
        }
        self._raw_rules = raw

    def _compile(self) -> None:
        for state, rules in self._compiled.items():
            for index, rule in enumerate(rules):
                if rule.regexp is not None:
                    continue
                try:
                    rule.regexp = regex.compile("(?:" + rule.pattern + ")", rule.flags)
                except regex.error as exc:
                    raise ValueError(f"failed to compile rule {state}.{index}: {exc}") from exc
        while (found := self._next_lexer_mutator()) is not None:
            state, index, mutator = found
            mutator.mutate_lexer(self._compiled, state, index)

    def _next_lexer_mutator(self) -> Optional[tuple[str, int, Any]]:
        for state, rules in self._compiled.items():
            for index, rule in enumerate(rules):
                if hasattr(rule.mutator, "mutate_lexer"):
                    return state, index, rule.mutator
        return None


def words(prefix: str, suffix: str, *args: str) -> str:
    """A pattern matching any of the given literal words, longest first."""
    ordered = sorted(args, key=len, reverse=True)
    return prefix + "(" + "|".join(re.escape(word) for word in ordered) + ")" + suffix


def tokenise(lexer: Any, text: str, options: Optional[TokeniseOptions] = None) -> list[Token]:
    """Tokenise ``text`` with ``lexer`` into a list."""
    return list(lexer.tokenise(text, options))


def clone_rules(rules: Mapping[str, Iterable[Rule]]) -> RuleSet:
    """A copy of the rules with each state's list copied."""
    return {state: list(state_rules) for state, state_rules in rules.items()}


def rename_rules(rules: Mapping[str, Iterable[Rule]], old: str, new: str) -> RuleSet:
    """A copy of the rules with state ``old`` renamed to ``new``."""
    out = clone_rules(rules)
    out[new] = out.get(old, [])
    out.pop(old, None)
    return out


def merge_rules(rules: Mapping[str, Iterable[Rule]], other: Mapping[str, Iterable[Rule]]) -> RuleSet:
    """A copy of ``rules`` with the states of ``other`` added or replacing."""
    out = clone_rules(rules)
    out.update(clone_rules(other))
    return out


def ensure_lf(text: str) -> str:
    """Replace carriage returns and CRLF pairs with line feeds."""
    return text.replace("\r\n", "\n").replace("\r", "\n")