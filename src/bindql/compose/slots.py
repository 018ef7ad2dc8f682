"""The two templating passes behind every Query.

Pass 1 (:func:`expand_verbs`) runs at compose time. It replaces the
printf-style verbs of a user format with pattern text, either the neutral slot
marker ``%s`` or a nested query's already-flattened pattern. Pass 2
(:func:`substitute_slots`) runs at render time and replaces each slot marker
with its final text.

Both passes share one escape: ``%%`` is a literal percent sign. Pass 1 copies
it through unchanged so that pass 2 is the only place it collapses to ``%``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

SLOT = "%s"

# %% | %[flags][width][.precision]verb
_VERB_RE = re.compile(r"%(?:%|[-+# 0]*\d*(?:\.\d*)?[A-Za-z])")
_SLOT_RE = re.compile(r"%[%s]")


class MalformedTemplateError(ValueError):
    """Raised when a format does not line up with its arguments."""

    def __init__(
        self, message: str, format: str, expected: int | None = None, actual: int | None = None
    ) -> None:
        self.format = format
        self.expected = expected
        self.actual = actual
        super().__init__(message)


def _scan(regex: re.Pattern[str], text: str) -> list[re.Match[str]]:
    """Return every directive in ``text``; stray ``%`` is an error."""
    matches = list(regex.finditer(text))
    covered = 0
    for m in matches:
        if "%" in text[covered : m.start()]:
            break
        covered = m.end()
    else:
        if "%" not in text[covered:]:
            return matches
    pos = text.index("%", covered)
    raise MalformedTemplateError(
        f"Incomplete or unknown directive at offset {pos} in {text!r}", format=text
    )


def _fill(text: str, matches: list[re.Match[str]], fills: Sequence[str], literal: str) -> str:
    verbs = [m for m in matches if m.group() != "%%"]
    if len(verbs) != len(fills):
        raise MalformedTemplateError(
            f"Template {text!r} has {len(verbs)} directive(s) but {len(fills)} argument(s)",
            format=text,
            expected=len(verbs),
            actual=len(fills),
        )
    parts: list[str] = []
    last = 0
    it = iter(fills)
    for m in matches:
        parts.append(text[last : m.start()])
        parts.append(literal if m.group() == "%%" else next(it))
        last = m.end()
    parts.append(text[last:])
    return "".join(parts)


def expand_verbs(format: str, fills: Sequence[str]) -> str:
    """Pass 1: replace each verb of ``format`` with the matching pattern text.

    Verb kind (``%s``, ``%d``, ``%v``, ...) and any flags are ignored; only
    position matters. ``%%`` is kept as ``%%``.
    """
    return _fill(format, _scan(_VERB_RE, format), fills, "%%")


def substitute_slots(pattern: str, fills: Sequence[str]) -> str:
    """Pass 2: replace each ``%s`` slot of a flattened pattern, collapse ``%%``."""
    return _fill(pattern, _scan(_SLOT_RE, pattern), fills, "%")


def count_slots(pattern: str) -> int:
    """Number of slot markers in a flattened pattern."""
    return sum(1 for m in _scan(_SLOT_RE, pattern) if m.group() == SLOT)


def escape_literal(text: str) -> str:
    """Make arbitrary text safe to place inside a pattern."""
    return text.replace("%", "%%")
