"""A registry of lexers, looked up by name, alias, filename, MIME type or content."""

from __future__ import annotations

from fnmatch import fnmatchcase
from typing import Any, Optional

_IGNORED_SUFFIXES = (
    # Editor backups
    "~", ".bak", ".old", ".orig",
    # Debian and derivatives apt/dpkg/ucf backups
    ".dpkg-dist", ".dpkg-old", ".ucf-dist", ".ucf-new", ".ucf-old",
    # Red Hat and derivatives rpm backups
    ".rpmnew", ".rpmorig", ".rpmsave",
    # Build system input/template files
    ".in",
)


def _base(path: str) -> str:
    """The last element of a path, ignoring trailing separators."""
    stripped = path.rstrip("/")
    if not stripped:
        return "/" if path else "."
    return stripped.rsplit("/", 1)[-1]


def _priority(lexer: Any) -> float:
    priority = getattr(lexer.config, "priority", 0) or 0
    return priority if priority else 1.0


def _best(candidates: list[Any]) -> Optional[Any]:
    if not candidates:
        return None
    return sorted(candidates, key=_priority, reverse=True)[0]


def _glob_matches(glob: str, filename: str) -> bool:
    if fnmatchcase(filename, glob):
        return True
    return any(fnmatchcase(filename, glob + suffix) for suffix in _IGNORED_SUFFIXES)


class LexerRegistry:
    """A collection of lexers.

    A lexer needs a ``config`` with ``name``, ``aliases``, ``filenames``,
    ``alias_filenames``, ``mime_types`` and ``priority``, and a
    ``set_registry`` method; ``analyse_text`` is used when present.
    """

    def __init__(self) -> None:
        self.lexers: list[Any] = []
        self._by_name: dict[str, Any] = {}
        self._by_alias: dict[str, Any] = {}

    def names(self, with_aliases: bool) -> list[str]:
        """Sorted names of all lexers, optionally with their aliases."""
        out: list[str] = []
        for lexer in self.lexers:
            out.append(lexer.config.name)
            if with_aliases:
                out.extend(lexer.config.aliases)
        return sorted(out)

    def aliases(self, skip_without_aliases: bool) -> list[str]:
        """Sorted aliases of all lexers; lexers without any give their name unless skipped."""
        out: list[str] = []
        for lexer in self.lexers:
            config = lexer.config
            if not config.aliases:
                if skip_without_aliases:
                    continue
                out.append(config.name)
            out.extend(config.aliases)
        return sorted(out)

    def get(self, name: str) -> Optional[Any]:
        """A lexer by name, alias, file extension or filename, or None."""
        for table, key in (
            (self._by_name, name),
            (self._by_alias, name),
            (self._by_name, name.lower()),
            (self._by_alias, name.lower()),
        ):
            found = table.get(key)
            if found is not None:
                return found
        candidates = [
            lexer
            for lexer in (self.match("filename." + name), self.match(name))
            if lexer is not None
        ]
        return _best(candidates)

    def match_mime_type(self, mime_type: str) -> Optional[Any]:
        """The best lexer for a MIME type, or None."""
        matched = [
            lexer
            for lexer in self.lexers
            for candidate in lexer.config.mime_types
            if candidate == mime_type
        ]
        return _best(matched)

    def match(self, filename: str) -> Optional[Any]:
        """The best lexer whose filename patterns match, trying primary patterns first."""
        filename = _base(filename)
        for attribute in ("filenames", "alias_filenames"):
            matched = [
                lexer
                for lexer in self.lexers
                for glob in getattr(lexer.config, attribute)
                if _glob_matches(glob, filename)
            ]
            if matched:
                return _best(matched)
        return None

    def analyse(self, text: str) -> Optional[Any]:
        """The lexer whose content analysis scores ``text`` highest, or None."""
        picked = None
        highest = 0.0
        for lexer in self.lexers:
            analyse_text = getattr(lexer, "analyse_text", None)
            if analyse_text is None:
                continue
            weight = analyse_text(text)
            if weight > highest:
                picked = lexer
                highest = weight
        return picked

    def register(self, lexer: Any) -> Any:
        """Add a lexer, replacing any registered lexer with the same name."""
        lexer.set_registry(self)
        config = lexer.config
        self._by_name[config.name] = lexer
        self._by_name[config.name.lower()] = lexer
        for alias in config.aliases:
            self._by_alias[alias] = lexer
            self._by_alias[alias.lower()] = lexer
        for index, existing in enumerate(self.lexers):
            if existing.config.name == config.name:
                self.lexers[index] = lexer
                break
        else:
            self.lexers.append(lexer)
        return lexer