"""Perform a GET, POST or download from the command line."""
import argparse
import logging
import sys

from .client import HttpClient
from .config import HttpConfig
from .response import Response
from .status_code import describe
from .status_code import is_success
from .status_code import StatusCode

logger = logging.getLogger(__name__)


def get_parser():
    """Return argument parser."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        default=False,
        help="Verbose output",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=float,
        default=None,
        help="Read/write timeout in seconds",
    )
    parser.add_argument(
        "-A",
        "--user-agent",
        dest="user_agent",
        default=None,
        help="User-Agent to send if no User-Agent header is given",
    )
    parser.add_argument(
        "-i",
        "--include",
        action="store_true",
        default=False,
        help="Print the response headers",
    )
    parser.add_argument("method", choices=["get", "post", "download"])
    parser.add_argument("url", metavar="URL")
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        dest="headers",
        default=[],
        help='Request header as "Name: Value" (repeatable)',
    )
    parser.add_argument("-d", "--data", default=None, help="Request body")
    parser.add_argument(
        "-o",
        "--output-dir",
        dest="directory",
        default=None,
        help="Target directory for download",
    )
    return parser


def format_response(response: Response, include_headers: bool = False) -> str:
    status = response.status
    name = status.name if isinstance(status, StatusCode) else "UNKNOWN"
    lines = [f"{int(status)} {name}"]
    if not isinstance(status, StatusCode) or not is_success(status):
        description = describe(status)
        if description:
            lines.append(description)
    if include_headers:
        lines.extend(f"{key}: {value}" for key, value in response.headers.items())
        lines.append("")
    if response.path is not None:
        lines.append(str(response.path))
    elif response.text is not None:
        lines.append(response.text)
    return "\n".join(lines)


def main(argv=None):
    """Call get, post or download with args from parser.

    This method is called when you run 'clean-http', this is configured in
    'pyproject.toml'.
    """
    options = get_parser().parse_args(argv)
    if options.verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    client = HttpClient(HttpConfig.create(user_agent=options.user_agent))
    if options.method == "download":
        response = client.download(
            options.url,
            options.headers,
            options.data,
            directory=options.directory,
            timeout=options.timeout,
        )
    else:
        response = client.request(
            options.method.upper(),
            options.url,
            options.headers,
            options.data,
            timeout=options.timeout,
        )
    print(format_response(response, include_headers=options.include))
    return 0 if response.ok else 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
