"""Tests for sift.routing.pattern: tokenizer and matcher per segment type."""

import pytest

from sift.errors import PatternError
from sift.routing.pattern import RoutePattern, tokenize
from sift.routing.route import PathSegment


class TestTokenize:
    def test_literal_only(self) -> None:
        assert tokenize("/users") == [PathSegment("/users")]

    def test_named_param_takes_slash_prefix(self) -> None:
        assert tokenize("/users/:id") == [
            PathSegment("/users"),
            PathSegment(":id", is_param=True, name="id", prefix="/"),
        ]

    def test_modifier_is_recorded(self) -> None:
        segments = tokenize("/public/:filename+")
        assert segments[1].modifier == "+"
        assert segments[1].name == "filename"

    def test_custom_regex(self) -> None:
        segments = tokenize(r"/items/:id(\d+)")
        assert segments[1].regex == r"\d+"
        assert segments[1].value == r":id(\d+)"

    def test_wildcards_are_numbered(self) -> None:
        segments = tokenize("/a/*/b/*")
        names = [s.name for s in segments if s.is_param]
        assert names == ["0", "1"]

    def test_escaped_colon_is_literal(self) -> None:
        assert tokenize(r"/a\:b") == [PathSegment("/a:b")]


class TestTokenizeErrors:
    @pytest.mark.parametrize(
        "pattern",
        [
            "users",
            "/:",
            "/:1abc",
            "/a/:id(",
            "/a/:id()",
            "/a)",
        ],
    )
    def test_malformed(self, pattern: str) -> None:
        with pytest.raises(PatternError):
            RoutePattern.compile(pattern)

    def test_duplicate_name(self) -> None:
        with pytest.raises(PatternError, match="Duplicate"):
            RoutePattern.compile("/a/:id/b/:id")

    def test_invalid_regex(self) -> None:
        with pytest.raises(PatternError, match="Invalid regex"):
            RoutePattern.compile("/a/:id([)")


class TestLiteral:
    def test_exact_match(self) -> None:
        pattern = RoutePattern.compile("/about")
        assert pattern.match("/about") == {}
        assert pattern.is_static

    def test_no_partial_match(self) -> None:
        pattern = RoutePattern.compile("/about")
        assert pattern.match("/about/team") is None
        assert pattern.match("/abo") is None

    def test_regex_characters_are_literal(self) -> None:
        pattern = RoutePattern.compile("/file.txt")
        assert pattern.test("/file.txt")
        assert not pattern.test("/fileXtxt")

    def test_case_sensitive(self) -> None:
        assert not RoutePattern.compile("/About").test("/about")

    def test_root(self) -> None:
        pattern = RoutePattern.compile("/")
        assert pattern.test("/")
        assert not pattern.test("/x")


class TestNamed:
    def test_extracts_segment(self) -> None:
        pattern = RoutePattern.compile("/users/:id")
        assert pattern.match("/users/42") == {"id": "42"}

    def test_requires_segment(self) -> None:
        pattern = RoutePattern.compile("/users/:id")
        assert pattern.match("/users") is None
        assert pattern.match("/users/") is None

    def test_does_not_cross_slash(self) -> None:
        pattern = RoutePattern.compile("/users/:id")
        assert pattern.match("/users/42/posts") is None

    def test_multiple_params(self) -> None:
        pattern = RoutePattern.compile("/users/:user/posts/:post")
        assert pattern.match("/users/ann/posts/7") == {"user": "ann", "post": "7"}
        assert pattern.names == ("user", "post")


class TestOptional:
    def test_present(self) -> None:
        pattern = RoutePattern.compile("/posts/:page?")
        assert pattern.match("/posts/2") == {"page": "2"}

    def test_absent_is_omitted(self) -> None:
        pattern = RoutePattern.compile("/posts/:page?")
        assert pattern.match("/posts") == {}

    def test_single_segment_only(self) -> None:
        pattern = RoutePattern.compile("/posts/:page?")
        assert pattern.match("/posts/2/3") is None


class TestOneOrMore:
    def test_greedy_rest(self) -> None:
        pattern = RoutePattern.compile("/public/:filename+")
        assert pattern.match("/public/css/site/main.css") == {"filename": "css/site/main.css"}

    def test_single_segment(self) -> None:
        pattern = RoutePattern.compile("/public/:filename+")
        assert pattern.match("/public/app.js") == {"filename": "app.js"}

    def test_requires_one(self) -> None:
        pattern = RoutePattern.compile("/public/:filename+")
        assert pattern.match("/public") is None


class TestZeroOrMore:
    def test_empty(self) -> None:
        pattern = RoutePattern.compile("/docs/:rest*")
        assert pattern.match("/docs") == {}

    def test_many(self) -> None:
        pattern = RoutePattern.compile("/docs/:rest*")
        assert pattern.match("/docs/a/b") == {"rest": "a/b"}

    def test_root_only_pattern(self) -> None:
        pattern = RoutePattern.compile("/:rest*")
        assert pattern.match("/") == {}
        assert pattern.match("/a/b") == {"rest": "a/b"}


class TestCustomRegex:
    def test_constrains_segment(self) -> None:
        pattern = RoutePattern.compile(r"/items/:id(\d+)")
        assert pattern.match("/items/12") == {"id": "12"}
        assert pattern.match("/items/abc") is None

    def test_alternation_is_grouped(self) -> None:
        pattern = RoutePattern.compile("/feed.:format(rss|atom)")
        assert pattern.match("/feed.rss") == {"format": "rss"}
        assert pattern.match("/feed.json") is None


class TestWildcard:
    def test_matches_anything(self) -> None:
        pattern = RoutePattern.compile("/assets/*")
        assert pattern.match("/assets/img/logo.png") == {"0": "img/logo.png"}

    def test_matches_empty(self) -> None:
        pattern = RoutePattern.compile("/assets/*")
        assert pattern.match("/assets/") == {"0": ""}
