"""Route, RouteMatch, and PathSegment frozen dataclasses."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sift.routing.pattern import RoutePattern


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A token of a parsed route pattern.

    Literal:   ``/users``        (is_param=False, value="/users")
    Param:     ``/:id``          (is_param=True, name="id", prefix="/")
    Optional:  ``/:page?``       (modifier="?")
    Greedy:    ``/:filename+``   (modifier="+"), ``/:rest*`` (modifier="*")
    Custom:    ``/:id(\\d+)``    (regex=r"\\d+")
    Wildcard:  ``/*``            (name="0", regex=".*")
    """

    value: str
    is_param: bool = False
    name: str | None = None
    regex: str = r"[^/]+"
    modifier: str = ""
    prefix: str = ""


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition: a pattern bound to a handler.

    Created during app setup, compiled into the router at freeze time.
    """

    path: str
    handler: Callable[..., Any]
    pattern: RoutePattern


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: dict[str, str]
