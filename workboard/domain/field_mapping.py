"""
Bidirectional field renames between the API shape and the on-disk shape.

Several collections were written by older admin scripts using camelCase
names (``logo``, ``isActive``, ``fullInfo``) while the dashboard speaks
snake_case (``logo_url``, ``is_active``, ``full_info``). Each entity carries
an ordered tuple of FieldRule entries and the two functions below apply them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

Record = dict[str, Any]


@dataclass(frozen=True)
class FieldRule:
    """One rename (external <-> internal) with an optional read-side default.

    ``default`` is a ``str.format`` template rendered with the stored record,
    e.g. ``"Job {id}"``.
    """

    external: str
    internal: str
    default: str | None = None

    @property
    def is_rename(self) -> bool:
        return self.external != self.internal


def _missing(record: Mapping[str, Any], key: str) -> bool:
    return record.get(key) in (None, "")


def _render_default(template: str, record: Mapping[str, Any]) -> str:
    try:
        return template.format(**record)
    except (KeyError, IndexError, ValueError):
        return template


def to_external(record: Mapping[str, Any], rules: Iterable[FieldRule]) -> Record:
    """Return a copy of a stored record with the API aliases filled in."""
    shaped = dict(record)
    for rule in rules:
        if rule.is_rename and rule.external not in shaped and rule.internal in shaped:
            shaped[rule.external] = shaped[rule.internal]
        if rule.default is not None and _missing(shaped, rule.external):
            shaped[rule.external] = _render_default(rule.default, shaped)
    return shaped


def to_internal(record: Mapping[str, Any], rules: Iterable[FieldRule]) -> Record:
    """Return a copy of an API payload renamed to the storage field names.

    The alias key is dropped once translated so a stored record never holds
    both names.
    """
    shaped = dict(record)
    for rule in rules:
        if rule.is_rename and rule.external in shaped:
            shaped[rule.internal] = shaped.pop(rule.external)
    return shaped
