"""Request headers as an immutable, case-insensitive mapping.

Names are folded to lower case once, when the headers are built; lookups
never re-decode the raw ASGI bytes.
"""

from collections.abc import Iterator, Mapping


class Headers(Mapping[str, str]):
    """Case-insensitive view over ASGI header pairs.

    Indexing gives the first value of a repeated header; ``get_list``
    gives all of them, in the order received.
    """

    __slots__ = ("_pairs",)

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        self._pairs = tuple(
            (name.decode("latin-1").lower(), value.decode("latin-1")) for name, value in raw
        )

    @classmethod
    def from_pairs(cls, pairs: Mapping[str, str] | tuple[tuple[str, str], ...]) -> Headers:
        """Build headers from ``str`` pairs (a mapping or a tuple of tuples)."""
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        return cls(tuple((name.encode("latin-1"), value.encode("latin-1")) for name, value in items))

    def __getitem__(self, key: str) -> str:
        values = self.get_list(key)
        if not values:
            raise KeyError(key)
        return values[0]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and bool(self.get_list(key))

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(name for name, _ in self._pairs))

    def __len__(self) -> int:
        return len(dict.fromkeys(name for name, _ in self._pairs))

    def __repr__(self) -> str:
        return f"Headers({dict(self)!r})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        values = self.get_list(key)
        return values[0] if values else default

    def get_list(self, key: str) -> list[str]:
        """Every value sent for *key*."""
        wanted = key.lower()
        return [value for name, value in self._pairs if name == wanted]
