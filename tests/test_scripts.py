# -*- coding: utf-8 -*-
"""Tests for scripts.py"""
from pathlib import Path
from unittest import mock

import pytest

from clean_http import Body
from clean_http import Failure
from clean_http import Response
from clean_http import SavedPath
from clean_http import StatusCode
from clean_http import scripts

MODULE = "clean_http.scripts"


def test_get_parser():
    parser = scripts.get_parser()
    options = parser.parse_args(["get", "http://x", "-H", "A: b", "-H", "C: d"])
    assert options.verbose is False
    assert options.method == "get"
    assert options.headers == ["A: b", "C: d"]
    assert options.timeout is None


def test_format_response_body():
    response = Response(status=200, headers={"X": "1"}, content=Body(text="hi"))

    assert scripts.format_response(response) == "200 OK\nhi"
    assert scripts.format_response(response, include_headers=True) == (
        "200 OK\nX: 1\n\nhi"
    )


def test_format_response_saved_path():
    response = Response(status=200, content=SavedPath(path="/tmp/a.pdf"))

    assert scripts.format_response(response) == f"200 OK\n{Path('/tmp/a.pdf')}"


def test_format_response_timeout():
    response = Response(status=StatusCode.NONE)

    assert scripts.format_response(response).startswith("0 NONE\n")


def test_format_response_unknown_status():
    response = Response(status=218, content=Failure(message="x"))

    assert scripts.format_response(response) == "218 UNKNOWN\nx"


@pytest.fixture
def client():
    with mock.patch(MODULE + ".HttpClient") as HttpClient:
        yield HttpClient.return_value


def test_main_get(client, capsys):
    client.request.return_value = Response(status=200, content=Body(text="hi"))

    assert scripts.main(["get", "http://x", "-H", "A: b", "-t", "2"]) == 0

    client.request.assert_called_once_with(
        "GET", "http://x", ["A: b"], None, timeout=2.0
    )
    assert capsys.readouterr().out == "200 OK\nhi\n"


def test_main_post_failure(client):
    client.request.return_value = Response(status=500, content=Body(text="err"))

    assert scripts.main(["post", "http://x", "-d", "payload"]) == 1

    client.request.assert_called_once_with(
        "POST", "http://x", [], "payload", timeout=None
    )


def test_main_download(client):
    client.download.return_value = Response(
        status=200, content=SavedPath(path="/tmp/a")
    )

    assert scripts.main(["download", "http://x/a", "-o", "/tmp"]) == 0

    client.download.assert_called_once_with(
        "http://x/a", [], None, directory="/tmp", timeout=None
    )


def test_main_user_agent():
    with mock.patch(MODULE + ".HttpClient") as HttpClient:
        HttpClient.return_value.request.return_value = Response(status=200)
        scripts.main(["-A", "my-app", "get", "http://x"])

    (config,), _ = HttpClient.call_args
    assert config.user_agent == "my-app"
