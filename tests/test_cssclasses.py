import pytest

from hilite.cssclasses import css_class, standard_types
from hilite.tokennames import is_token_type
from hilite.tokens import TokenType


@pytest.mark.parametrize(
    ("token_type", "expected"),
    [
        (TokenType.Background, "bg"),
        (TokenType.PreWrapper, "chroma"),
        (TokenType.Keyword, "k"),
        (TokenType.NameBuiltinPseudo, "bp"),
        (TokenType.CommentPreprocFile, "cpf"),
        (TokenType.Text, ""),
    ],
)
def test_known_classes(token_type, expected):
    assert css_class(token_type) == expected


def test_alias_resolves_to_same_class():
    assert css_class(TokenType.Whitespace) == "w"
    assert css_class(TokenType.TextWhitespace) == "w"
    assert css_class(TokenType.StringDouble) == css_class(TokenType.LiteralStringDouble)


def test_plain_int_accepted():
    assert css_class(1000) == "k"


def test_type_without_class():
    assert css_class(TokenType.LiteralStringAtom) is None
    assert css_class(TokenType.Ignore) is None


def test_invalid_value_raises():
    with pytest.raises(ValueError):
        css_class(12345)


def test_classes_are_unique_and_keys_valid():
    mapping = standard_types()
    classes = list(mapping.values())
    assert len(set(classes)) == len(classes)
    assert all(is_token_type(key) for key in mapping)


def test_standard_types_returns_copy():
    mapping = standard_types()
    mapping[TokenType.Keyword] = "changed"
    assert css_class(TokenType.Keyword) == "k"
    assert standard_types()[TokenType.Keyword] == "k"