"""Unit tests for the mode engine."""

import pytest

from move_on_up.engine import (
    clear_query_and_fragment,
    drop_subdomain,
    pop_path_segment,
    step,
)
from move_on_up.exceptions import MalformedUrlError, UnknownModeError
from move_on_up.models.mode import Mode
from move_on_up.models.url import Url

SAMPLE_URLS = [
    "https://a.b.example.com/x/y?q=1#frag",
    "https://shop.example.com/cart/items?x=1#y",
    "https://x.com/p?a=1&b=2#h",
    "https://x.com/p/q?a=1#h",
    "http://localhost:8080/api/v1/?debug=1",
    "https://deep.er.sub.example.co.uk/a//b/c/#top",
    "https://example.com/",
    "http://192.168.1.10/admin",
]


def walk(url: Url, mode: Mode, limit: int = 100):
    """Apply step until the fix point, returning every visited URL."""
    visited = [url]
    for _ in range(limit):
        following = step(visited[-1], mode)
        if following == visited[-1]:
            return visited
        visited.append(following)
    raise AssertionError(f"{mode.value} did not terminate for {url}")


def size(url: Url) -> int:
    return (
        len(url.segments)
        + len(url.query)
        + len(url.labels)
        + (1 if url.fragment else 0)
    )


def steps_as_text(start: str, mode: Mode, count: int):
    url = Url.parse(start)
    results = []
    for _ in range(count):
        url = step(url, mode)
        results.append(url.to_string())
    return results


# Scenarios


def test_standard_scenario():
    """Query+fragment, then path segments, then sub-domains, then stop."""
    assert steps_as_text("https://a.b.example.com/x/y?q=1#frag", Mode.STANDARD, 6) == [
        "https://a.b.example.com/x/y",
        "https://a.b.example.com/x",
        "https://a.b.example.com/",
        "https://b.example.com/",
        "https://example.com/",
        "https://example.com/",
    ]


def test_root_scenario():
    """Root jumps to '/' and then trims sub-domains."""
    assert steps_as_text("https://shop.example.com/cart/items?x=1#y", Mode.ROOT, 3) == [
        "https://shop.example.com/",
        "https://example.com/",
        "https://example.com/",
    ]


def test_param_scenario():
    """Param removes one pair at a time, then the fragment, then the path."""
    assert steps_as_text("https://x.com/p?a=1&b=2#h", Mode.PARAM, 5) == [
        "https://x.com/p?a=1#h",
        "https://x.com/p#h",
        "https://x.com/p",
        "https://x.com/",
        "https://x.com/",
    ]


def test_slash_keep_scenario():
    """SlashKeep keeps query and fragment forever."""
    assert steps_as_text("https://x.com/p/q?a=1#h", Mode.SLASH_KEEP, 3) == [
        "https://x.com/p?a=1#h",
        "https://x.com/?a=1#h",
        "https://x.com/?a=1#h",
    ]


# Standard


def test_standard_clears_fragment_alone():
    """Without a query, the fragment goes first."""
    assert step("https://x.com/a/b#sec").to_string() == "https://x.com/a/b"


def test_standard_ignores_trailing_slash():
    """A trailing slash is not a segment of its own."""
    assert step("https://x.com/a/b/").to_string() == "https://x.com/a"
    assert step("https://x.com/a/").to_string() == "https://x.com/"


def test_standard_separator_only_query_is_not_a_step():
    """"?&" parses to no query, so the first step already pops the path."""
    assert step("https://x.com/a/b?&").to_string() == "https://x.com/a"


def test_standard_clears_query_at_root_without_subdomain():
    """Clearing the query is a step even at the top-most path and host."""
    assert step("https://x.com/?a=1").to_string() == "https://x.com/"


def test_standard_keeps_port_and_userinfo():
    """Only the parts being trimmed change."""
    result = step("http://me@a.intranet.local:8080/", Mode.STANDARD)
    assert result.to_string() == "http://me@intranet.local:8080/"


def test_single_label_host_is_not_reduced():
    """localhost stops at its root path."""
    url = Url.parse("http://localhost/a")
    assert step(url).to_string() == "http://localhost/"
    assert step(step(url)) == step(url)


# Root


def test_root_from_root_path_drops_subdomain_and_clears_query():
    """At '/', Root trims a sub-domain and the query in one step."""
    result = step("https://www.example.com/?a=1#x", Mode.ROOT)
    assert result.to_string() == "https://example.com/"


def test_root_at_top_keeps_query_and_fragment():
    """Nothing is left to trim: the page stays as it is."""
    url = Url.parse("https://example.com/?a=1#x")
    assert step(url, Mode.ROOT) == url


def test_root_treats_trailing_slashes_as_root():
    """'//' is already the root path."""
    url = Url.parse("https://example.com//")
    assert step(url, Mode.ROOT) == url


# Param


def test_param_removes_only_last_pair_of_repeated_key():
    """Duplicate keys are separate pairs."""
    assert step("https://x.com/?a=1&a=2", Mode.PARAM).to_string() == "https://x.com/?a=1"


def test_param_falls_back_to_subdomain():
    """Once query, fragment and path are gone, sub-domains go."""
    assert step("https://www.x.com/", Mode.PARAM).to_string() == "https://x.com/"


# SlashKeep


def test_slash_keep_drops_subdomain_keeping_query():
    """Sub-domain trimming keeps query and fragment too."""
    result = step("https://www.x.com/?a=1#h", Mode.SLASH_KEEP)
    assert result.to_string() == "https://x.com/?a=1#h"


# Shared sub-operations


def test_pop_path_segment_at_root_returns_none():
    assert pop_path_segment(Url.parse("https://x.com/")) is None


def test_pop_path_segment_normalizes_inner_empty_segment():
    """The parent of '/a//b' is '/a'."""
    result = pop_path_segment(Url.parse("https://x.com/a//b"))
    assert result.path == "/a"


def test_drop_subdomain_keeps_last_two_labels():
    assert drop_subdomain(Url.parse("https://example.com/")) is None
    assert drop_subdomain(Url.parse("https://a.example.com/")).hostname == "example.com"


def test_clear_query_and_fragment():
    result = clear_query_and_fragment(Url.parse("https://x.com/a?b=1#c"))
    assert result.to_string() == "https://x.com/a"


# Modes and errors


def test_mode_accepts_strings():
    """Mode values are matched case-insensitively, '_' for '-'."""
    url = "https://x.com/p/q?a=1"
    assert step(url, "slash-keep") == step(url, Mode.SLASH_KEEP)
    assert step(url, "SLASH_KEEP") == step(url, Mode.SLASH_KEEP)
    assert step(url, "Root") == step(url, Mode.ROOT)


def test_unknown_mode_raises():
    with pytest.raises(UnknownModeError) as exc_info:
        step("https://x.com/p", "sideways")
    assert exc_info.value.code == "unknown_mode"
    assert "slash-keep" in exc_info.value.detail


def test_malformed_url_raises():
    with pytest.raises(MalformedUrlError):
        step("not a url", Mode.STANDARD)


def test_step_does_not_mutate_input():
    url = Url.parse("https://a.x.com/p?a=1#h")
    for mode in Mode:
        step(url, mode)
    assert url.to_string() == "https://a.x.com/p?a=1#h"


# Properties over every mode


@pytest.mark.parametrize("mode", list(Mode))
@pytest.mark.parametrize("text", SAMPLE_URLS)
def test_step_is_deterministic(text, mode):
    url = Url.parse(text)
    assert step(url, mode) == step(url, mode)


@pytest.mark.parametrize("mode", list(Mode))
@pytest.mark.parametrize("text", SAMPLE_URLS)
def test_fix_point_is_absorbing(text, mode):
    """Once a step returns its input, it keeps doing so."""
    top = walk(Url.parse(text), mode)[-1]
    assert step(top, mode) == top
    assert step(step(top, mode), mode) == top


@pytest.mark.parametrize("mode", list(Mode))
@pytest.mark.parametrize("text", SAMPLE_URLS)
def test_every_step_reduces(text, mode):
    """No count ever grows and every non-terminal step removes something."""
    visited = walk(Url.parse(text), mode)
    for before, after in zip(visited, visited[1:]):
        assert len(after.segments) <= len(before.segments)
        assert len(after.query) <= len(before.query)
        assert len(after.labels) <= len(before.labels)
        assert size(after) < size(before)
