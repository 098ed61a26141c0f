import pytest

from clean_http import parse_headers


def test_generic_headers():
    actual = parse_headers(["Accept: text/html", "X-Foo:bar"])

    assert dict(actual.headers) == {"Accept": "text/html", "X-Foo": "bar"}
    assert actual.user_agent is None
    assert actual.content_type is None


@pytest.mark.parametrize(
    "entry",
    ["no-colon", "", "Referer: http://example.com", "a:b:c", ": value", "  :x"],
)
def test_malformed_entries_are_skipped(entry):
    actual = parse_headers([entry, "Accept: */*"])

    assert dict(actual.headers) == {"Accept": "*/*"}
    assert actual.user_agent is None
    assert actual.content_type is None


@pytest.mark.parametrize("name", ["User-Agent", "user-agent", "USER-AGENT"])
def test_user_agent_is_routed(name):
    actual = parse_headers([f"{name}: my-agent/1.0"])

    assert actual.user_agent == "my-agent/1.0"
    assert len(actual.headers) == 0


@pytest.mark.parametrize("name", ["Content-Type", "content-type"])
def test_content_type_is_routed(name):
    actual = parse_headers([f"{name}: application/json"])

    assert actual.content_type == "application/json"
    assert len(actual.headers) == 0


def test_headers_case_insensitive():
    actual = parse_headers(["X-Token: abc"])

    assert actual.headers["x-token"] == "abc"


def test_repeated_header_combined():
    actual = parse_headers(["Accept: text/html", "accept: application/json"])

    assert actual.headers["Accept"] == "text/html, application/json"


def test_last_user_agent_wins():
    actual = parse_headers(["User-Agent: a", "User-Agent: b"])

    assert actual.user_agent == "b"


def test_as_request_headers():
    parsed = parse_headers(["User-Agent: a", "Content-Type: text/plain", "X: 1"])

    assert dict(parsed.as_request_headers()) == {
        "X": "1",
        "User-Agent": "a",
        "Content-Type": "text/plain",
    }


def test_as_request_headers_default_user_agent():
    parsed = parse_headers(["X: 1"])

    actual = parsed.as_request_headers(default_user_agent="my-app")

    assert actual["User-Agent"] == "my-app"


def test_as_request_headers_explicit_user_agent_wins():
    parsed = parse_headers(["User-Agent: explicit"])

    actual = parsed.as_request_headers(default_user_agent="my-app")

    assert actual["User-Agent"] == "explicit"


def test_as_request_headers_does_not_mutate():
    parsed = parse_headers(["X: 1"])
    parsed.as_request_headers(default_user_agent="my-app")

    assert dict(parsed.headers) == {"X": "1"}
