# hilite

Building blocks for syntax highlighting: a hierarchy of token types, a
regex-driven state-machine lexer, stack mutators, a lexer registry that
looks lexers up by name, alias, filename, MIME type or content, and lexers
that change the types of tokens coming out of another lexer.

## Installation

```
pip install .
```

The only runtime dependency is `regex`.

## Token types

`hilite.tokens.TokenType` is an `IntEnum` of every kind of token. Related
types share a category (a range of 1000 values) and a sub-category (a range
of 100 values):

```python
from hilite.tokens import TokenType

TokenType.NameVariable.category()                     # TokenType.Name
TokenType.LiteralStringDouble.sub_category()          # TokenType.LiteralString
TokenType.LiteralStringDouble.parent()                # TokenType.LiteralString
TokenType.KeywordType.in_category(TokenType.Keyword)  # True
```

Short aliases such as `TokenType.String`, `TokenType.Number` and
`TokenType.Whitespace` name the same members as their long forms. Negative
values (`Background`, `LineNumbers`, `Error`, `Ignore`, ...) are meta types.
A `Token` is a frozen dataclass with a `type` and a `value`; `EOF` is the
end-of-input token.

Other helpers:

- `hilite.tokennames.parse_token_type("namefunction")` turns a name into a
  type, exactly or ignoring case, and raises `ValueError` for unknown names.
  `token_type_names()`, `token_type_values()` and `is_token_type(value)`
  list and check the types.
- `hilite.cssclasses.css_class(TokenType.Keyword)` gives the short CSS class
  (`"k"`) for a type, or `None`; `standard_types()` returns the whole mapping.

## Writing a lexer

A lexer is a set of states. Each state is a list of `Rule`s (or plain
`(pattern, type, mutator)` tuples): a pattern, the token type to emit for the
text it matches, and an optional mutator that changes the state stack.
Lexing starts in the `"root"` state, which every lexer must have.

```python
from hilite.lexer import Config, RegexLexer, tokenise
from hilite.mutators import Rule, push, pop
from hilite.tokens import TokenType

lexer = RegexLexer(
    Config(name="Demo", aliases=["demo"], filenames=["*.demo"],
           mime_types=["text/x-demo"]),
    lambda: {
        "root": [
            Rule(r"\s+", TokenType.TextWhitespace),
            Rule(r"^-", TokenType.Punctuation, push("directive")),
            Rule(r"->", TokenType.Operator),
        ],
        "directive": [
            Rule("module", TokenType.NameEntity, pop(1)),
        ],
    },
)

for token in tokenise(lexer, "-module ->"):
    print(token.type.name, repr(token.value))
# Punctuation '-'
# NameEntity 'module'
# TextWhitespace ' '
# Operator '->'
```

Rules are fetched and compiled on first use. Patterns are multi-line by
default; `Config` also has `case_insensitive`, `dot_all`, `not_multiline`,
`ensure_nl` (append a final newline before lexing) and `priority`. Each rule
match is given a time limit of 0.25 seconds. `RegexLexer(..., trace=True)`
prints each step to standard error.

`RegexLexer.tokenise(text, options)` returns an iterator of tokens.
`TokeniseOptions` sets the starting `state`, whether the run is `nested`,
and `ensure_lf` (on by default), which turns `\r\n` and `\r` into `\n`.
Text that no rule matches comes out as `TokenType.Error` tokens; a newline
that matches nothing outside the starting state resets the stack.

Mutators in `hilite.mutators`: `push`, `pop`, `include` (splice another
state's rules in), `combined` (push an anonymous state made from several),
`mutators` (apply several in order) and `default` (a rule that applies
mutators). `stringify(*tokens)` joins token values.

`hilite.lexer` also provides `words(prefix, suffix, *words)` to build an
alternation of literal words (longest first), `clone_rules`, `rename_rules`,
`merge_rules` and `ensure_lf`.

## Registries

```python
from hilite.registry import LexerRegistry

registry = LexerRegistry()
registry.register(lexer)
registry.get("DEMO")                      # by name or alias, any case
registry.match("build/file.demo")         # by filename glob
registry.match_mime_type("text/x-demo")
registry.analyse(source_text)             # the lexer whose analyser scores highest
registry.names(with_aliases=True)
```

Filename matching also accepts backup and template suffixes such as `~`,
`.bak`, `.orig` and `.in`. When several lexers match, the one with the
highest `priority` wins (a priority of 0 counts as 1). Give a lexer an
analyser with `lexer.set_analyser(lambda text: 0.5 if "x" in text else 0.0)`.

## Remapping token types

```python
from hilite.remap import TypeMap, type_remapping_lexer

keywords = type_remapping_lexer(
    lexer, [TypeMap(TokenType.Name, TokenType.Keyword, ["if", "else"])]
)
```

A `TypeMap` without words changes every token of its source type.
`RemappingLexer(lexer, mapper)` lets any function map one token to a list of
tokens.

## What is not included

The package ships no lexers for particular languages, no colour styles and
no formatters: it does not produce HTML, terminal or other highlighted
output, and has no command-line tool. It supplies the lexing machinery and
token types such tools build on.

## Running the tests

```
pip install -e ".[test]"
pytest
```