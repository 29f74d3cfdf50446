"""Field diff records attached to an issue.

``FieldDiffs`` is the change set of one transaction: an ordered mapping from
field key to ``Diff``, stamped with the login and date of the change context
that opened it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Final


class _Unused:
    """Marker for "no comparable prior value", distinct from ``None``."""

    _instance: _Unused | None = None

    def __new__(cls) -> _Unused:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNUSED"

    def __reduce__(self) -> str:
        return "UNUSED"


UNUSED: Final = _Unused()

_ESCAPES = {"%": "%25", "|": "%7C", ",": "%2C", "=": "%3D"}
# never produced by _ESCAPES: a literal "%00" is written "%2500"
_UNUSED_TOKEN: Final = "%00"
_EMPTY_TOKEN: Final = "%01"


@dataclass(frozen=True)
class Diff:
    """Old/new value pair recorded against one field."""

    old_value: Any = None
    new_value: Any = None


@dataclass
class FieldDiffs:
    """Diffs recorded during one transaction, keyed by field."""

    user_login: str | None = None
    creation_date: datetime | None = None
    _diffs: dict[str, Diff] = field(default_factory=dict, repr=False)

    def set_diff(self, field_key: str, old_value: Any, new_value: Any) -> FieldDiffs:
        """Record a diff, keeping the first old value if the field already changed."""
        existing = self._diffs.get(field_key)
        if existing is None:
            self._diffs[field_key] = Diff(old_value, new_value)
        else:
            self._diffs[field_key] = Diff(existing.old_value, new_value)
        return self

    def get(self, field_key: str) -> Diff | None:
        return self._diffs.get(field_key)

    def diffs(self) -> Mapping[str, Diff]:
        return MappingProxyType(self._diffs)

    def __len__(self) -> int:
        return len(self._diffs)

    def __contains__(self, field_key: object) -> bool:
        return field_key in self._diffs

    def __iter__(self) -> Iterator[str]:
        return iter(self._diffs)

    def to_string(self) -> str:
        """Serialise as ``field=old|new,field2=new``.

        A ``None`` old value is omitted and a ``None`` new value leaves its
        segment empty. ``UNUSED`` and the empty string get their own tokens
        so neither reads back as ``None``.
        """
        parts = []
        for key, diff in self._diffs.items():
            value = ""
            if diff.old_value is not None:
                value += _encode(diff.old_value) + "|"
            if diff.new_value is not None:
                value += _encode(diff.new_value)
            parts.append(f"{_encode(key)}={value}")
        return ",".join(parts)

    @classmethod
    def parse(cls, text: str | None) -> FieldDiffs:
        """Rebuild a change set from :meth:`to_string` output.

        Values come back as strings. An empty new segment parses to
        ``None``; an empty old segment before ``|`` parses to ``UNUSED``,
        the form older histories used for it.
        """
        diffs = cls()
        if not text:
            return diffs
        for chunk in text.split(","):
            key, _, raw = chunk.partition("=")
            if "|" in raw:
                raw_old, _, raw_new = raw.partition("|")
                old_value: Any = _decode(raw_old) if raw_old else UNUSED
            else:
                raw_new = raw
                old_value = None
            new_value = _decode(raw_new) if raw_new else None
            diffs.set_diff(_decode(key), old_value, new_value)
        return diffs


def _encode(value: Any) -> str:
    if value is UNUSED:
        return _UNUSED_TOKEN
    text = str(value)
    if not text:
        return _EMPTY_TOKEN
    for char, escaped in _ESCAPES.items():
        text = text.replace(char, escaped)
    return text


def _decode(text: str) -> Any:
    if text == _UNUSED_TOKEN:
        return UNUSED
    if text == _EMPTY_TOKEN:
        return ""
    # "%25" last so an escaped percent is never re-expanded
    for char, escaped in reversed(_ESCAPES.items()):
        text = text.replace(escaped, char)
    return text
