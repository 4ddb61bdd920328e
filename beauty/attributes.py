"""Query-string style key/value attributes with unescaped values."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TypeVar

from beauty.utils import split, unescape

_T = TypeVar("_T")


class Attributes(Mapping[str, str]):
    """Read-only mapping of attribute names to unescaped values.

    Looking up a missing key with ``[]`` gives an empty string. When a key is
    inserted twice, the first value is kept.
    """

    def __init__(self, text: str = "", sep: str = "&") -> None:
        self._values: dict[str, str] = {}
        if text:
            for pair in split(text, sep):
                kv = split(pair, "=")
                if len(kv) == 2:
                    self.insert(kv[0], kv[1])

    def insert(self, key: str, value: str) -> None:
        """Add ``key`` with the unescaped ``value`` unless already present."""
        self._values.setdefault(key, unescape(value))

    def get(self, key: str, default: _T | None = None) -> str | _T | None:
        return self._values.get(key, default)

    def __getitem__(self, key: str) -> str:
        return self._values.get(key, "")

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Attributes({self._values!r})"