# (c) Nelen & Schuurmans

import multiprocessing
import os
import time
from urllib.error import URLError
from urllib.request import urlopen

import pytest
import uvicorn


def wait_until_url_available(url: str, max_tries=50, interval=0.1):
    # wait for the server to be ready
    for _ in range(max_tries):
        try:
            urlopen(url)
        except URLError:
            time.sleep(interval)
            continue
        else:
            break


@pytest.fixture(scope="session")
def echo_app():
    port = int(os.environ.get("API_PORT", "8005"))
    config = uvicorn.Config(
        "integration_tests.echo_app:app", host="127.0.0.1", port=port
    )
    p = multiprocessing.Process(target=uvicorn.Server(config).run)
    p.start()
    try:
        wait_until_url_available(f"http://localhost:{port}/docs")
        yield f"http://localhost:{port}"
    finally:
        p.terminate()
