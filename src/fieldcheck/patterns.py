"""Pattern matching for ``Pattern`` rules.

Rules only depend on the ``Matcher`` protocol: anything with a
``test(text) -> bool`` method can be attached. ``compile_pattern`` provides the
default implementation on top of :mod:`re`.
"""

from __future__ import annotations

import re
from re import Pattern as RegexPattern
from typing import Protocol, runtime_checkable

from .exceptions import PatternCompileError


@runtime_checkable
class Matcher(Protocol):
    """Anything that can test a piece of text against a pattern."""

    def test(self, text: str) -> bool:
        """Return True if the text matches."""
        ...


class RegexMatcher:
    """Matcher backed by a compiled regular expression.

    Matching uses ``search``, so a pattern only constrains the whole text when
    it carries its own ``^``/``$`` anchors.
    """

    def __init__(self, pattern: str | RegexPattern[str]):
        """Initialize from pattern text or a compiled pattern.

        Args:
            pattern: Regex pattern (string or compiled pattern)

        Raises:
            PatternCompileError: If pattern text is not a valid regex
        """
        if isinstance(pattern, str):
            try:
                self.regex = re.compile(pattern)
            except re.error as e:
                raise PatternCompileError(pattern, str(e)) from e
        else:
            self.regex = pattern

    @property
    def pattern(self) -> str:
        return self.regex.pattern

    def test(self, text: str) -> bool:
        return self.regex.search(text) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegexMatcher):
            return NotImplemented
        return self.regex == other.regex

    def __hash__(self) -> int:
        return hash(self.regex)

    def __repr__(self) -> str:
        return f"RegexMatcher({self.pattern!r})"


def compile_pattern(pattern: str) -> RegexMatcher:
    """Compile pattern text into a matcher.

    Raises:
        PatternCompileError: If the pattern is invalid
    """
    return RegexMatcher(pattern)


def as_matcher(matcher: Matcher | RegexPattern[str]) -> Matcher:
    """Wrap a compiled ``re.Pattern`` in a ``RegexMatcher``; pass matchers through."""
    if isinstance(matcher, RegexPattern):
        return RegexMatcher(matcher)
    if not isinstance(matcher, Matcher):
        raise TypeError(f"Expected a Matcher or compiled pattern, got {type(matcher).__name__}")
    return matcher
