"""Mutators that change the lexer's state machine while it runs or when it is compiled."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, MutableMapping, MutableSequence, Optional

from .tokens import Token

POP_STATE = "#pop"


@dataclass
class Rule:
    """The basic matching unit of a regex lexer state.

    ``type`` is an emitter such as a TokenType (anything with an ``emit``
    method) and ``mutator`` optionally changes the lexer state on a match.
    """

    pattern: str = ""
    type: Optional[Any] = None
    mutator: Optional[Mutator] = None


class Mutator(ABC):
    """Changes the lexer state machine while it processes text."""

    kind: str = ""

    @abstractmethod
    def mutate(self, state: Any) -> None:
        """Apply this mutator to a running lexer state."""


@dataclass
class MultiMutator(Mutator):
    """Applies several mutators in order."""

    mutators: tuple[Mutator, ...] = field(default_factory=tuple)
    kind = "mutators"

    def mutate(self, state: Any) -> None:
        for mutator in self.mutators:
            mutator.mutate(state)


@dataclass
class IncludeMutator(Mutator):
    """Replaces its rule with the rules of another state at compile time."""

    state: str
    kind = "include"

    def mutate(self, state: Any) -> None:
        raise RuntimeError(f"should never reach here include({self.state!r})")

    def mutate_lexer(
        self, rules: MutableMapping[str, MutableSequence[Any]], state: str, rule: int
    ) -> None:
        """Splice the included state's rules in place of rule ``rule`` of ``state``."""
        try:
            included = rules[self.state]
        except KeyError:
            raise ValueError(f"invalid include state {self.state!r}") from None
        current = list(rules[state])
        rules[state] = current[:rule] + list(included) + current[rule + 1 :]


@dataclass
class CombinedMutator(Mutator):
    """Builds an anonymous state from several states and pushes it."""

    states: tuple[str, ...] = field(default_factory=tuple)
    kind = "combined"

    def mutate(self, state: Any) -> None:
        raise RuntimeError(f"should never reach here combined({list(self.states)})")

    def mutate_lexer(
        self, rules: MutableMapping[str, MutableSequence[Any]], state: str, rule: int
    ) -> None:
        """Create the combined state if needed and make the rule push it."""
        name = "__combined_" + "__".join(self.states)
        if name not in rules:
            merged: list[Any] = []
            for source in self.states:
                try:
                    merged.extend(rules[source])
                except KeyError:
                    raise ValueError(f"invalid combine state {source!r}") from None
            rules[name] = merged
        rules[state][rule].mutator = push(name)


@dataclass
class PushMutator(Mutator):
    """Pushes states onto the stack; with none given, pushes the current state."""

    states: tuple[str, ...] = field(default_factory=tuple)
    kind = "push"

    def mutate(self, state: Any) -> None:
        if not self.states:
            state.stack.append(state.state)
            return
        for name in self.states:
            if name == POP_STATE:
                if not state.stack:
                    raise IndexError("nothing to pop")
                state.stack.pop()
            else:
                state.stack.append(name)


@dataclass
class PopMutator(Mutator):
    """Pops ``depth`` states from the stack."""

    depth: int = 1
    kind = "pop"

    def mutate(self, state: Any) -> None:
        stack = state.stack
        if not stack:
            raise IndexError("nothing to pop")
        if self.depth > len(stack):
            raise IndexError(f"cannot pop {self.depth} states from a stack of {len(stack)}")
        del stack[len(stack) - self.depth :]


def mutators(*args: Mutator) -> Mutator:
    """A mutator applying the given mutators in order."""
    return MultiMutator(tuple(args))


def include(state: str) -> Rule:
    """A rule that includes the rules of ``state``."""
    return Rule(mutator=IncludeMutator(state))


def combined(*args: str) -> Mutator:
    """A mutator pushing an anonymous state made from the given states."""
    return CombinedMutator(tuple(args))


def push(*args: str) -> Mutator:
    """A mutator pushing the given states onto the stack."""
    return PushMutator(tuple(args))


def pop(depth: int) -> Mutator:
    """A mutator popping ``depth`` states when its rule matches."""
    return PopMutator(depth)


def default(*args: Mutator) -> Rule:
    """A rule that matches nothing and applies the given mutators."""
    return Rule(mutator=mutators(*args))


def stringify(*args: Token) -> str:
    """The raw text covered by the given tokens."""
    return "".join(token.value for token in args)