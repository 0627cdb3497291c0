"""Boundary characters used to delimit triggers.

Provides the :class:`DelimiterPolicy` helper that decides where a trigger
may start (at the beginning of the text or right after a delimiter) and
where the run of typed characters ends.
"""

from __future__ import annotations

from typing import Iterable, Optional


DEFAULT_DELIMITERS = frozenset(
    {" ", "\t", "\n", ".", ",", "!", "?", ";", ":", "(", ")", "[", "]", "{", "}"}
)


class DelimiterPolicy:
    """Fixed set of boundary characters.

    A trigger is only considered at position ``i`` when ``i == 0`` or the
    character at ``i - 1`` is a delimiter.  A delimiter typed right after a
    complete trigger is what commits it.

    Attributes:
        DEFAULT_DELIMITERS: Whitespace and common punctuation.
    """

    DEFAULT_DELIMITERS = DEFAULT_DELIMITERS

    def __init__(self, delimiters: Optional[Iterable[str]] = None):
        """Initialise with an optional custom delimiter set.

        Args:
            delimiters: Single-character strings.  ``None`` selects
                :attr:`DEFAULT_DELIMITERS`.
        """
        chars = self.DEFAULT_DELIMITERS if delimiters is None else delimiters
        self._delimiters = frozenset(chars)

    @property
    def delimiters(self) -> frozenset:
        return self._delimiters

    def is_delimiter(self, char: Optional[str]) -> bool:
        """Return ``True`` if *char* is one of the boundary characters."""
        return char is not None and char in self._delimiters

    def is_boundary(self, text: str, position: int) -> bool:
        """Return ``True`` if a trigger may start at *position* in *text*.

        Args:
            text: The text being scanned.
            position: Candidate start index.

        Returns:
            ``True`` at the start of the text or right after a delimiter.
        """
        return position == 0 or text[position - 1] in self._delimiters

    def typed_run(self, text: str, start: int) -> str:
        """Return the maximal run of non-delimiter characters from *start*.

        Args:
            text: The text being scanned.
            start: Index where the run begins.

        Returns:
            The run, possibly empty when ``text[start]`` is a delimiter or
            *start* is past the end.
        """
        end = start
        length = len(text)
        while end < length and text[end] not in self._delimiters:
            end += 1
        return text[start:end]

    def __contains__(self, char: object) -> bool:
        return char in self._delimiters

    def __repr__(self) -> str:
        return f"DelimiterPolicy({''.join(sorted(self._delimiters))!r})"
