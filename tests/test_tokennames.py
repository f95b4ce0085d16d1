import pytest

from hilite.tokennames import (
    is_token_type,
    parse_token_type,
    token_type_names,
    token_type_values,
)
from hilite.tokens import TokenType


def test_every_name_round_trips():
    for name, value in zip(token_type_names(), token_type_values()):
        assert parse_token_type(name) is value


def test_lower_case_names_parse():
    for name, value in zip(token_type_names(), token_type_values()):
        assert parse_token_type(name.lower()) is value


def test_mixed_case_falls_back_to_lower_case():
    assert parse_token_type("KEYWORD") is TokenType.Keyword
    assert parse_token_type("nAmEvArIaBlE") is TokenType.NameVariable


def test_none_name_parses():
    assert parse_token_type("None") is TokenType.None_


def test_unknown_name_raises():
    with pytest.raises(ValueError, match="does not belong to TokenType values"):
        parse_token_type("NotAType")


def test_alias_names_are_not_parsed():
    with pytest.raises(ValueError):
        parse_token_type("Whitespace")


def test_values_are_sorted_and_match_names():
    values = token_type_values()
    assert [int(v) for v in values] == sorted(int(v) for v in values)
    assert len(values) == len(token_type_names())
    assert len(set(values)) == len(values)


def test_first_and_last():
    names = token_type_names()
    assert names[0] == "Ignore"
    assert names[-1] == "TextPunctuation"


def test_returned_lists_are_copies():
    names = token_type_names()
    names.clear()
    assert token_type_names()[0] == "Ignore"


def test_is_token_type():
    assert is_token_type(8001)
    assert is_token_type(TokenType.Keyword)
    assert not is_token_type(8004)
    assert not is_token_type(-15)