"""Token types, regex state-machine lexers, mutators, lexer registries and token remapping."""

__version__ = "0.1.0"

__all__ = [
    "cssclasses",
    "lexer",
    "mutators",
    "registry",
    "remap",
    "tokennames",
    "tokens",
]