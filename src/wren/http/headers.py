"""Request headers as a read-only, case-insensitive mapping.

The ASGI scope delivers headers as ``(name, value)`` byte pairs. They are
decoded and indexed by lower-cased name once, when the request is built;
lookups after that are plain dict hits.
"""

from collections.abc import Iterator, Mapping

type RawHeaders = tuple[tuple[bytes, bytes], ...]


class Headers(Mapping[str, str]):
    """Case-insensitive view over the request's header pairs.

    Indexing returns the first value sent for a name; ``get_list`` returns
    every value, in arrival order, for names sent more than once.
    """

    __slots__ = ("_index", "_raw")

    _index: dict[str, list[str]]
    _raw: RawHeaders

    def __init__(self, raw: RawHeaders = ()) -> None:
        index: dict[str, list[str]] = {}
        for name, value in raw:
            index.setdefault(name.decode("latin-1").lower(), []).append(value.decode("latin-1"))
        object.__setattr__(self, "_raw", raw)
        object.__setattr__(self, "_index", index)

    def __getitem__(self, key: str) -> str:
        values = self._index.get(key.lower())
        if not values:
            raise KeyError(key)
        return values[0]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"Headers({self.to_dict()!r})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        values = self._index.get(key.lower())
        return values[0] if values else default

    def get_list(self, key: str) -> list[str]:
        """Every value sent for *key* (``X-Forwarded-For`` and friends)."""
        return list(self._index.get(key.lower(), ()))

    def to_dict(self) -> dict[str, str | list[str]]:
        """Plain dict: one value as ``str``, repeats as a list."""
        return {
            name: values[0] if len(values) == 1 else list(values)
            for name, values in self._index.items()
        }

    @property
    def raw(self) -> RawHeaders:
        """The undecoded pairs, as the ASGI scope gave them."""
        return self._raw
