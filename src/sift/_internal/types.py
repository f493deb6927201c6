"""Shared type aliases used across sift modules."""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeAlias

# Route handler: called as handler(request, params), sync or async
Handler: TypeAlias = Callable[..., Any]

# Path parameters extracted from a matched pattern
PathParams: TypeAlias = dict[str, str]

# Route table as supplied by callers: ordered mapping or (pattern, handler) pairs
RouteTable: TypeAlias = Mapping[str, Handler] | Sequence[tuple[str, Handler]]
