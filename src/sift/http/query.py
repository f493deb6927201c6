"""Query string parameters."""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs


class QueryParams(Mapping[str, str]):
    """Parsed query string, first value per key.

    Repeated keys keep every value (``get_list``). The undecoded string
    stays available as ``raw`` so the proxy can forward it untouched.
    """

    __slots__ = ("_raw", "_values")

    def __init__(self, query_string: bytes = b"") -> None:
        self._raw = query_string.decode("latin-1")
        self._values: dict[str, list[str]] = parse_qs(self._raw, keep_blank_values=True)

    def __getitem__(self, key: str) -> str:
        return self._values[key][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"QueryParams({self._raw!r})"

    def get_list(self, key: str) -> list[str]:
        """Every value given for *key*, in order."""
        return list(self._values.get(key, ()))

    @property
    def raw(self) -> str:
        """The query string as received, without the leading ``?``."""
        return self._raw
