import pytest

from hilite.tokens import EOF, Token, TokenType


def test_aliases_share_members():
    assert TokenType.Whitespace is TokenType.TextWhitespace
    assert TokenType.String is TokenType.LiteralString
    assert TokenType.NumberOct is TokenType.LiteralNumberOct
    assert TokenType.Date is TokenType.LiteralDate
    assert TokenType.Whitespace.parent() is TokenType.Text
    assert TokenType.String.parent() is TokenType.Literal
    assert TokenType.NumberOct.sub_category() is TokenType.LiteralNumber
    assert TokenType.Date.category() is TokenType.Literal


def test_str_uses_canonical_names():
    assert str(TokenType.TextWhitespace) == "TextWhitespace"
    assert str(TokenType.Whitespace) == "TextWhitespace"
    assert str(TokenType.NameVariable) == "NameVariable"
    assert str(TokenType.None_) == "None"
    assert str(TokenType.Whitespace.sub_category()) == "Text"
    assert str(TokenType.NameVariableMagic.category()) == "Name"


@pytest.mark.parametrize(
    "ttype, expected",
    [
        (TokenType.LiteralStringDouble, TokenType.LiteralString),
        (TokenType.LiteralString, TokenType.Literal),
        (TokenType.Literal, TokenType.EOFType),
        (TokenType.KeywordType, TokenType.Keyword),
        (TokenType.CommentPreprocFile, TokenType.CommentPreproc),
        (TokenType.CommentPreproc, TokenType.Comment),
        (TokenType.Background, TokenType.EOFType),
        (TokenType.Ignore, TokenType.EOFType),
    ],
)
def test_parent(ttype, expected):
    assert ttype.parent() is expected


def test_category_and_sub_category():
    assert TokenType.LiteralNumberHex.category() is TokenType.Literal
    assert TokenType.LiteralNumberHex.sub_category() is TokenType.LiteralNumber
    assert TokenType.NameVariableMagic.sub_category() is TokenType.Name
    assert TokenType.LineNumbers.category() is TokenType.EOFType


def test_in_category():
    assert TokenType.LiteralStringDouble.in_category(TokenType.LiteralNumber)
    assert not TokenType.LiteralStringDouble.in_sub_category(TokenType.LiteralNumber)
    assert TokenType.LiteralStringDouble.in_sub_category(TokenType.LiteralString)
    assert not TokenType.Keyword.in_category(TokenType.Name)


@pytest.mark.parametrize("ttype", list(TokenType))
def test_category_invariants(ttype):
    category = TokenType.category(ttype)
    sub_category = TokenType.sub_category(ttype)
    assert TokenType.in_category(category, ttype)
    assert TokenType.in_sub_category(sub_category, ttype)
    assert TokenType.category(sub_category) is category


def test_emit_single_token():
    tokens = list(TokenType.Keyword.emit(["if", "i"], None))
    assert tokens == [Token(TokenType.Keyword, "if")]


def test_emit_requires_a_group():
    with pytest.raises(IndexError):
        list(TokenType.Keyword.emit([], None))


def test_token_equality_and_str():
    token = Token(TokenType.Name, "foo")
    assert token == Token(TokenType.Name, "foo")
    assert token != Token(TokenType.Keyword, "foo")
    assert str(token) == "foo"


def test_eof_token():
    assert EOF == Token(TokenType.EOFType, "")
    assert EOF.type == 0


def test_unknown_value_rejected():
    with pytest.raises(ValueError):
        TokenType(12345)