"""The request's query string as a read-only mapping.

Parsed once into ordered ``(name, value)`` pairs, so a key given several
times keeps every value and the order they came in.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qsl


class QueryParams(Mapping[str, str]):
    """Query string parameters (``?x=1&tag=a&tag=b``).

    Indexing gives the first value for a name, ``get_list`` all of them,
    ``multi_items`` every pair. ``str()`` returns the undecoded string.
    Blank values (``?flag=``) are kept as ``""``.
    """

    _items: tuple[tuple[str, str], ...]
    _raw: str

    __slots__ = ("_items", "_raw")

    def __init__(self, query_string: str | bytes = "") -> None:
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        object.__setattr__(self, "_raw", query_string)
        pairs = parse_qsl(query_string, keep_blank_values=True)
        object.__setattr__(self, "_items", tuple(pairs))

    def __getitem__(self, key: str) -> str:
        for name, value in self._items:
            if name == key:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(name for name, _ in self._items))

    def __len__(self) -> int:
        return len(dict.fromkeys(name for name, _ in self._items))

    def __repr__(self) -> str:
        return f"QueryParams({self._raw!r})"

    def __str__(self) -> str:
        return self._raw

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """First value for *key*, else *default*."""
        try:
            return self[key]
        except KeyError:
            return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*, in the order they appeared."""
        return [value for name, value in self._items if name == key]

    def multi_items(self) -> list[tuple[str, str]]:
        """Return every ``(name, value)`` pair in query-string order."""
        return list(self._items)

    def get_int(self, key: str, default: int | None = None) -> int | None:
        """Value as an int; *default* when absent or not a number."""
        value = self.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def get_bool(self, key: str, default: bool | None = None) -> bool | None:
        """Return value as bool (``true``/``1``/``yes``/``on`` -> True)."""
        value = self.get(key)
        if value is None:
            return default
        return value.lower() in ("true", "1", "yes", "on")
