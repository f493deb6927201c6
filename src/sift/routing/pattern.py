"""Route pattern tokenizer and matcher.

Patterns are path templates made of literal text and named parameters::

    /users/:id             one required segment
    /posts/:page?          optional segment (the leading "/" is optional too)
    /public/:filename+     one or more segments, greedy
    /docs/:rest*           zero or more segments, greedy
    /items/:id(\\d+)       segment constrained by a custom regex
    /assets/*              anonymous wildcard, captured as "0", "1", ...

A pattern is tokenized into ``PathSegment`` values, then compiled into a
single anchored regular expression. Matching is case-sensitive and runs
on the already-decoded request path.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from sift.errors import PatternError
from sift.routing.route import PathSegment

DEFAULT_SEGMENT = r"[^/]+"
WILDCARD = r".*"
MODIFIERS = frozenset("?+*")


def _is_name_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _read_regex(pattern: str, start: int) -> tuple[str, int]:
    """Read a balanced ``(...)`` group starting at *start*.

    Returns the regex body and the index just past the closing paren.
    """
    depth = 0
    i = start
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                body = pattern[start + 1 : i]
                if not body:
                    msg = f"Empty regex group at offset {start} in {pattern!r}"
                    raise PatternError(msg)
                return body, i + 1
        i += 1
    msg = f"Unbalanced parenthesis at offset {start} in {pattern!r}"
    raise PatternError(msg)


def tokenize(pattern: str) -> list[PathSegment]:
    """Split a route pattern into literal and parameter segments.

    Examples::

        "/users"        -> [PathSegment("/users")]
        "/users/:id"    -> [PathSegment("/users"), PathSegment(":id", is_param=True, name="id", prefix="/")]
        "/a/:rest+"     -> [PathSegment("/a"), PathSegment(":rest+", ..., modifier="+", prefix="/")]

    Raises ``PatternError`` for malformed patterns.
    """
    if not pattern.startswith("/"):
        msg = f"Route pattern must start with '/': {pattern!r}"
        raise PatternError(msg)

    segments: list[PathSegment] = []
    literal: list[str] = []
    wildcards = 0
    i = 0

    def take_prefix() -> str:
        if literal and literal[-1] == "/":
            literal.pop()
            return "/"
        return ""

    def flush() -> None:
        if literal:
            segments.append(PathSegment("".join(literal)))
            literal.clear()

    while i < len(pattern):
        ch = pattern[i]

        if ch == "\\" and i + 1 < len(pattern):
            literal.append(pattern[i + 1])
            i += 2
            continue

        if ch == ":":
            j = i + 1
            while j < len(pattern) and _is_name_char(pattern[j]):
                j += 1
            name = pattern[i + 1 : j]
            if not name or name[0].isdigit():
                msg = f"Missing or invalid parameter name at offset {i} in {pattern!r}"
                raise PatternError(msg)
            regex = DEFAULT_SEGMENT
            if j < len(pattern) and pattern[j] == "(":
                regex, j = _read_regex(pattern, j)
            modifier = ""
            if j < len(pattern) and pattern[j] in MODIFIERS:
                modifier = pattern[j]
                j += 1
            prefix = take_prefix()
            flush()
            segments.append(
                PathSegment(
                    value=pattern[i:j],
                    is_param=True,
                    name=name,
                    regex=regex,
                    modifier=modifier,
                    prefix=prefix,
                )
            )
            i = j
            continue

        if ch == "*":
            flush()
            segments.append(
                PathSegment(value="*", is_param=True, name=str(wildcards), regex=WILDCARD)
            )
            wildcards += 1
            i += 1
            continue

        if ch in "()":
            msg = f"Unexpected {ch!r} at offset {i} in {pattern!r}"
            raise PatternError(msg)

        literal.append(ch)
        i += 1

    flush()
    return segments


def _segment_regex(segment: PathSegment, group: str) -> str:
    if not segment.is_param:
        return re.escape(segment.value)

    prefix = re.escape(segment.prefix)
    inner = f"(?:{segment.regex})"
    if segment.modifier in ("+", "*"):
        # Repeat the segment, separated by the prefix ("/a/b/c")
        inner = f"{inner}(?:{prefix or '/'}{inner})*"
    body = f"{prefix}(?P<{group}>{inner})"
    if segment.modifier in ("?", "*"):
        return f"(?:{body})?"
    return body


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A compiled route pattern.

    Usage::

        pattern = RoutePattern.compile("/users/:id")
        pattern.test("/users/42")    # True
        pattern.match("/users/42")   # {"id": "42"}
        pattern.match("/posts")      # None
    """

    source: str
    segments: tuple[PathSegment, ...]
    regex: re.Pattern[str]
    # Regex group name -> parameter name, in declaration order
    groups: tuple[tuple[str, str], ...] = field(default=())

    @classmethod
    def compile(cls, source: str) -> RoutePattern:
        """Tokenize and compile *source*. Raises ``PatternError``."""
        segments = tokenize(source)
        parts: list[str] = []
        groups: list[tuple[str, str]] = []
        seen: set[str] = set()
        for segment in segments:
            group = ""
            if segment.is_param:
                assert segment.name is not None
                if segment.name in seen:
                    msg = f"Duplicate parameter {segment.name!r} in {source!r}"
                    raise PatternError(msg)
                seen.add(segment.name)
                group = f"p{len(groups)}"
                groups.append((group, segment.name))
            parts.append(_segment_regex(segment, group))

        try:
            regex = re.compile("".join(parts))
        except re.error as exc:
            msg = f"Invalid regex in route pattern {source!r}: {exc}"
            raise PatternError(msg) from exc
        if regex.fullmatch("") is not None:
            # Only optional parts ("/:rest*"), so the root path matches too
            regex = re.compile(f"/|(?:{regex.pattern})")
        return cls(source=source, segments=tuple(segments), regex=regex, groups=tuple(groups))

    @property
    def names(self) -> tuple[str, ...]:
        """Parameter names in declaration order."""
        return tuple(name for _, name in self.groups)

    @property
    def is_static(self) -> bool:
        """True when the pattern has no parameters."""
        return not self.groups

    def test(self, path: str) -> bool:
        """Whether *path* matches this pattern."""
        return self.regex.fullmatch(path) is not None

    def match(self, path: str) -> dict[str, str] | None:
        """Extract parameters from *path*, or ``None`` if it doesn't match.

        Optional and zero-or-more parameters that matched nothing are
        left out of the result.
        """
        m = self.regex.fullmatch(path)
        if m is None:
            return None
        params: dict[str, str] = {}
        for group, name in self.groups:
            value = m.group(group)
            if value is not None:
                params[name] = value
        return params
