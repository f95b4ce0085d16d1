"""Lookup between token types and their textual names."""

from __future__ import annotations

from .tokens import TokenType

_VALUES: tuple[TokenType, ...] = tuple(sorted(TokenType, key=int))
_NAMES: tuple[str, ...] = tuple(str(member) for member in _VALUES)
_BY_NAME: dict[str, TokenType] = {}
for _member, _name in zip(_VALUES, _NAMES):
    _BY_NAME[_name] = _member
    _BY_NAME[_name.lower()] = _member
_KNOWN_VALUES = frozenset(int(member) for member in _VALUES)


def parse_token_type(name: str) -> TokenType:
    """Return the token type with the given name, matched exactly or case-insensitively.

    Raises ValueError if the name is not a token type.
    """
    found = _BY_NAME.get(name)
    if found is None:
        found = _BY_NAME.get(name.lower())
    if found is None:
        raise ValueError(f"{name} does not belong to TokenType values")
    return found


def token_type_names() -> list[str]:
    """Names of all token types, in ascending order of value."""
    return list(_NAMES)


def token_type_values() -> list[TokenType]:
    """All token types, in ascending order of value."""
    return list(_VALUES)


def is_token_type(value: int) -> bool:
    """Whether ``value`` is one of the defined token types."""
    return int(value) in _KNOWN_VALUES