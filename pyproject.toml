[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hilite"
version = "0.1.0"
description = "Regex state-machine lexers, token types and lexer registries for syntax highlighting"
requires-python = ">=3.10"
dependencies = [
    "regex",
]
keywords = ["lexer", "tokenizer", "syntax highlighting", "regex", "state machine"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hilite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
