"""Ordered route table with first-match-wins dispatch.

Routes are registered during setup and frozen when the app starts.
Matching is a linear scan in definition order: the first pattern that
matches wins, and later routes that would also match are never tried.
"""

from sift._internal.types import Handler
from sift.routing.pattern import RoutePattern
from sift.routing.route import Route, RouteMatch


def normalize_path(path: str) -> str:
    """Strip a single trailing slash so ``/foo/`` and ``/foo`` are equivalent.

    The root path ``/`` is left alone.
    """
    if len(path) > 1 and path.endswith("/"):
        return path[:-1]
    return path


class Router:
    """Ordered route table.

    Usage::

        router = Router()
        router.add("/users/:id", handler)
        router.compile()
        match = router.match("/users/42")   # RouteMatch(..., {"id": "42"})
    """

    __slots__ = ("_compiled", "_routes", "_strip_trailing_slash")

    def __init__(self, *, strip_trailing_slash: bool = True) -> None:
        self._routes: list[Route] = []
        self._compiled = False
        self._strip_trailing_slash = strip_trailing_slash

    def add(self, path: str, handler: Handler) -> Route:
        """Append a route. Must be called before compile().

        Raises ``PatternError`` if *path* is not a valid pattern.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        source = normalize_path(path) if self._strip_trailing_slash else path
        route = Route(path=path, handler=handler, pattern=RoutePattern.compile(source))
        self._routes.append(route)
        return route

    @property
    def routes(self) -> list[Route]:
        """All registered routes, in definition order."""
        return list(self._routes)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def __len__(self) -> int:
        return len(self._routes)

    def match(self, path: str) -> RouteMatch | None:
        """Return the first route whose pattern matches *path*, or ``None``."""
        if self._strip_trailing_slash:
            path = normalize_path(path)
        for route in self._routes:
            params = route.pattern.match(path)
            if params is not None:
                return RouteMatch(route=route, path_params=params)
        return None
