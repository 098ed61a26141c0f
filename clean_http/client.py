# (c) Nelen & Schuurmans

import codecs
import logging
import os
import time
from collections.abc import Callable
from collections.abc import Iterable
from pathlib import Path

import urllib3
from urllib3 import PoolManager
from urllib3 import Retry
from urllib3.exceptions import HTTPError
from urllib3.exceptions import MaxRetryError
from urllib3.exceptions import NewConnectionError

from .config import HttpConfig
from .exceptions import BadRequest
from .headers import parse_headers
from .paths import resolve_destination
from .response import Body
from .response import Failure
from .response import Response
from .response import SavedPath
from .status_code import StatusCode
from .timeouts import make_timeout

__all__ = ["HttpClient", "get", "post", "download"]


logger = logging.getLogger(__name__)

CHUNK_SIZE = 65536
# socket.timeout is an alias of the builtin TimeoutError
TIMEOUT_ERRORS = (urllib3.exceptions.TimeoutError, TimeoutError)


def decode_body(response: urllib3.BaseHTTPResponse) -> str:
    """Decode the body using the charset of the response, defaulting to UTF-8"""
    charset = "utf-8"
    content_type = response.headers.get("Content-Type") or ""
    for param in content_type.split(";")[1:]:
        key, _, value = param.strip().partition("=")
        if key.strip().lower() == "charset" and value:
            charset = value.strip().strip('"')
    try:
        codecs.lookup(charset)
    except LookupError:
        charset = "utf-8"
    return response.data.decode(charset, errors="replace")


def failure_response(error: Exception) -> Response:
    return Response(
        status=StatusCode.UNDEFINED_ERROR, content=Failure(message=str(error))
    )


class HttpClient:
    """Blocking HTTP helper that always returns a Response.

    Every call uses its own connection pool, unless a pool is supplied. Retries
    are disabled; redirects are followed up to config.max_redirects, after which
    the last redirect response is returned.

    Timeouts (on reading or writing) give a Response with status NONE. Errors
    without a response from the server (e.g. name resolution, refused
    connections, TLS failures) and other unexpected errors give a Response with
    status UNDEFINED_ERROR and the error message as Failure content.

    Args:
        config: Default timeouts, user agent and download directory.
        pool: Optional urllib3 pool to use for all calls.
    """

    def __init__(
        self, config: HttpConfig | None = None, pool: PoolManager | None = None
    ):
        self.config = config or HttpConfig()
        self._pool = pool

    def _retries(self) -> Retry:
        return Retry(
            total=None,
            connect=0,
            read=0,
            status=0,
            other=0,
            redirect=self.config.max_redirects,
            raise_on_redirect=False,
        )

    def _send(
        self,
        pool: PoolManager,
        method: str,
        url: str,
        headers: Iterable[str],
        data: str | None,
        timeout: float,
        preload_content: bool,
    ) -> urllib3.BaseHTTPResponse:
        parsed = parse_headers(headers)
        request_kwargs = {
            "headers": parsed.as_request_headers(self.config.user_agent),
            "timeout": make_timeout(timeout, self.config.connect_timeout),
            "retries": self._retries(),
            "preload_content": preload_content,
        }
        # a body is also sent with GET
        if data:
            request_kwargs["body"] = data.encode("utf-8")
        return pool.request(method, url, **request_kwargs)

    def _execute(
        self, method: str, url: str, func: Callable[[PoolManager], Response]
    ) -> Response:
        if not url:
            raise BadRequest("url cannot be empty")
        pool = self._pool if self._pool is not None else PoolManager()
        try:
            try:
                return func(pool)
            except MaxRetryError as e:
                # with retries disabled, the reason is the first failure
                if e.reason is None:
                    raise
                raise e.reason from e
        except NewConnectionError as e:
            # NewConnectionError subclasses ConnectTimeoutError; it is a failure
            logger.warning("%s %s failed: %s", method, url, e)
            return failure_response(e)
        except TIMEOUT_ERRORS:
            logger.info("%s %s timed out", method, url)
            return Response(status=StatusCode.NONE)
        except HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            return failure_response(e)
        except Exception as e:
            logger.exception("Unexpected error during %s %s", method, url)
            return failure_response(e)
        finally:
            if pool is not self._pool:
                pool.clear()

    def request(
        self,
        method: str,
        url: str,
        headers: Iterable[str] = (),
        data: str | None = None,
        timeout: float | None = None,
    ) -> Response:
        """Perform a request and return the status, headers and body text.

        Args:
            method: The HTTP method.
            url: The url to request.
            headers: "Name: Value" strings. Malformed entries are skipped.
            data: Optional request body, sent UTF-8 encoded.
            timeout: Read/write timeout in seconds. Default: config.timeout.
        """
        if timeout is None:
            timeout = self.config.timeout

        def func(pool: PoolManager) -> Response:
            response = self._send(
                pool, method, url, headers, data, timeout, preload_content=True
            )
            return Response(
                status=response.status,
                headers=response.headers,
                content=Body(text=decode_body(response)),
            )

        return self._execute(method, url, func)

    def get(
        self,
        url: str,
        headers: Iterable[str] = (),
        data: str | None = None,
        timeout: float | None = None,
    ) -> Response:
        return self.request("GET", url, headers, data, timeout)

    def post(
        self,
        url: str,
        headers: Iterable[str] = (),
        data: str | None = None,
        timeout: float | None = None,
    ) -> Response:
        return self.request("POST", url, headers, data, timeout)

    def download(
        self,
        url: str,
        headers: Iterable[str] = (),
        data: str | None = None,
        directory: str | Path | None = None,
        timeout: float | None = None,
        on_fallback: Callable[[Path], None] | None = None,
    ) -> Response:
        """Download a url into a directory.

        The file name is taken from the url (or the current unix timestamp if
        the url has none). Existing files are never overwritten: a '[1] ',
        '[2] ', ... prefix is added instead. See resolve_destination.

        Server responses with status 400 or higher are not written to disk;
        their body is returned as Body content instead.

        Args:
            url: The url to download.
            headers: "Name: Value" strings. Malformed entries are skipped.
            data: Optional request body, sent UTF-8 encoded.
            directory: Target directory. Default: config.downloads_dir.
            timeout: Read/write timeout in seconds.
                Default: config.download_timeout.
            on_fallback: Called with the target path if all numbered
                alternatives exist and a timestamp prefix is used.

        Returns:
            Response with SavedPath content.
        """
        if timeout is None:
            timeout = self.config.download_timeout
        if directory:
            target_dir = Path(directory)
        else:
            target_dir = self.config.get_downloads_dir()

        def func(pool: PoolManager) -> Response:
            response = self._send(
                pool, "GET", url, headers, data, timeout, preload_content=False
            )
            try:
                if response.status >= 400:
                    return Response(
                        status=response.status,
                        headers=response.headers,
                        content=Body(text=decode_body(response)),
                    )
                target_dir.mkdir(parents=True, exist_ok=True)
                target = resolve_destination(
                    url,
                    target_dir,
                    timestamp=int(time.time()),
                    max_disambiguator=self.config.max_disambiguator,
                    on_fallback=on_fallback,
                )
                try:
                    with target.open("wb") as fileobj:
                        for chunk in response.stream(CHUNK_SIZE):
                            fileobj.write(chunk)
                except Exception:
                    # Clean up a partially downloaded file
                    try:
                        os.remove(target)
                    except FileNotFoundError:
                        pass
                    raise
            finally:
                response.release_conn()
            return Response(
                status=response.status,
                headers=response.headers,
                content=SavedPath(path=target),
            )

        return self._execute("GET", url, func)


def get(
    url: str,
    headers: Iterable[str] = (),
    data: str | None = None,
    timeout: float | None = None,
    config: HttpConfig | None = None,
    pool: PoolManager | None = None,
) -> Response:
    """GET a url. See HttpClient.request."""
    return HttpClient(config, pool).get(url, headers, data, timeout)


def post(
    url: str,
    headers: Iterable[str] = (),
    data: str | None = None,
    timeout: float | None = None,
    config: HttpConfig | None = None,
    pool: PoolManager | None = None,
) -> Response:
    """POST to a url. See HttpClient.request."""
    return HttpClient(config, pool).post(url, headers, data, timeout)


def download(
    url: str,
    headers: Iterable[str] = (),
    data: str | None = None,
    directory: str | Path | None = None,
    timeout: float | None = None,
    config: HttpConfig | None = None,
    pool: PoolManager | None = None,
    on_fallback: Callable[[Path], None] | None = None,
) -> Response:
    """Download a url to a file. See HttpClient.download."""
    return HttpClient(config, pool).download(
        url, headers, data, directory, timeout, on_fallback
    )
