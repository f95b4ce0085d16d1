"""Token types and tokens produced by lexers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterator, Sequence


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


class TokenType(IntEnum):
    """The type of a token to highlight.

    Categories are grouped in ranges of 1000 and sub-categories in ranges
    of 100; literal strings, for example, lie in 3100-3199 inside the
    literal category 3000-3999. Negative values are meta types used for
    styling and lexer control.
    """

    # Meta token types.
    Ignore = -14
    None_ = -13
    Other = -12
    Error = -11
    CodeLine = -10
    LineLink = -9
    LineTableTD = -8
    LineTable = -7
    LineHighlight = -6
    LineNumbersTable = -5
    LineNumbers = -4
    Line = -3
    PreWrapper = -2
    Background = -1
    EOFType = 0

    # Keywords.
    Keyword = 1000
    KeywordConstant = 1001
    KeywordDeclaration = 1002
    KeywordNamespace = 1003
    KeywordPseudo = 1004
    KeywordReserved = 1005
    KeywordType = 1006

    # Names.
    Name = 2000
    NameAttribute = 2001
    NameBuiltin = 2002
    NameBuiltinPseudo = 2003
    NameClass = 2004
    NameConstant = 2005
    NameDecorator = 2006
    NameEntity = 2007
    NameException = 2008
    NameFunction = 2009
    NameFunctionMagic = 2010
    NameKeyword = 2011
    NameLabel = 2012
    NameNamespace = 2013
    NameOperator = 2014
    NameOther = 2015
    NamePseudo = 2016
    NameProperty = 2017
    NameTag = 2018
    NameVariable = 2019
    NameVariableAnonymous = 2020
    NameVariableClass = 2021
    NameVariableGlobal = 2022
    NameVariableInstance = 2023
    NameVariableMagic = 2024

    # Literals.
    Literal = 3000
    LiteralDate = 3001
    LiteralOther = 3002

    # Strings.
    LiteralString = 3100
    LiteralStringAffix = 3101
    LiteralStringAtom = 3102
    LiteralStringBacktick = 3103
    LiteralStringBoolean = 3104
    LiteralStringChar = 3105
    LiteralStringDelimiter = 3106
    LiteralStringDoc = 3107
    LiteralStringDouble = 3108
    LiteralStringEscape = 3109
    LiteralStringHeredoc = 3110
    LiteralStringInterpol = 3111
    LiteralStringName = 3112
    LiteralStringOther = 3113
    LiteralStringRegex = 3114
    LiteralStringSingle = 3115
    LiteralStringSymbol = 3116

    # Numbers.
    LiteralNumber = 3200
    LiteralNumberBin = 3201
    LiteralNumberFloat = 3202
    LiteralNumberHex = 3203
    LiteralNumberInteger = 3204
    LiteralNumberIntegerLong = 3205
    LiteralNumberOct = 3206
    LiteralNumberByte = 3207

    # Operators.
    Operator = 4000
    OperatorWord = 4001

    # Punctuation.
    Punctuation = 5000

    # Comments.
    Comment = 6000
    CommentHashbang = 6001
    CommentMultiline = 6002
    CommentSingle = 6003
    CommentSpecial = 6004

    # Preprocessor "comments".
    CommentPreproc = 6100
    CommentPreprocFile = 6101

    # Generic tokens.
    Generic = 7000
    GenericDeleted = 7001
    GenericEmph = 7002
    GenericError = 7003
    GenericHeading = 7004
    GenericInserted = 7005
    GenericOutput = 7006
    GenericPrompt = 7007
    GenericStrong = 7008
    GenericSubheading = 7009
    GenericTraceback = 7010
    GenericUnderline = 7011

    # Text.
    Text = 8000
    TextWhitespace = 8001
    TextSymbol = 8002
    TextPunctuation = 8003

    # Aliases.
    Whitespace = 8001

    Date = 3001

    String = 3100
    StringAffix = 3101
    StringBacktick = 3103
    StringChar = 3105
    StringDelimiter = 3106
    StringDoc = 3107
    StringDouble = 3108
    StringEscape = 3109
    StringHeredoc = 3110
    StringInterpol = 3111
    StringOther = 3113
    StringRegex = 3114
    StringSingle = 3115
    StringSymbol = 3116

    Number = 3200
    NumberBin = 3201
    NumberFloat = 3202
    NumberHex = 3203
    NumberInteger = 3204
    NumberIntegerLong = 3205
    NumberOct = 3206

    def __str__(self) -> str:
        if self is TokenType.None_:
            return "None"
        return self.name

    def parent(self) -> TokenType:
        """The enclosing sub-category, else category, else EOFType."""
        value = int(self)
        if value % 100:
            return TokenType(_trunc_div(value, 100) * 100)
        if value % 1000:
            return TokenType(_trunc_div(value, 1000) * 1000)
        return TokenType.EOFType

    def category(self) -> TokenType:
        """The category (range of 1000) this type belongs to."""
        return TokenType(_trunc_div(int(self), 1000) * 1000)

    def sub_category(self) -> TokenType:
        """The sub-category (range of 100) this type belongs to."""
        return TokenType(_trunc_div(int(self), 100) * 100)

    def in_category(self, other: int) -> bool:
        """Whether this type shares a category with ``other``."""
        return _trunc_div(int(self), 1000) == _trunc_div(int(other), 1000)

    def in_sub_category(self, other: int) -> bool:
        """Whether this type shares a sub-category with ``other``."""
        return _trunc_div(int(self), 100) == _trunc_div(int(other), 100)

    def emit(self, groups: Sequence[str], state: Any = None) -> Iterator[Token]:
        """Emit a single token of this type holding the whole match."""
        yield Token(self, groups[0])


@dataclass(frozen=True)
class Token:
    """A single token: a type and the text it covers."""

    type: TokenType
    value: str

    def __str__(self) -> str:
        return self.value


EOF = Token(TokenType.EOFType, "")