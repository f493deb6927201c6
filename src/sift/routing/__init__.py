"""Routing: ordered route table with path-template patterns.

Routes are registered during setup and frozen when the app starts.
"""

from sift.routing.pattern import RoutePattern, tokenize
from sift.routing.route import PathSegment, Route, RouteMatch
from sift.routing.router import Router, normalize_path

__all__ = [
    "PathSegment",
    "Route",
    "RouteMatch",
    "RoutePattern",
    "Router",
    "normalize_path",
    "tokenize",
]
