# (c) Nelen & Schuurmans

import logging
from collections.abc import Callable
from pathlib import Path
from urllib.parse import unquote
from urllib.parse import urlparse

__all__ = ["filename_from_url", "resolve_destination"]


logger = logging.getLogger(__name__)


def filename_from_url(url: str) -> str:
    """The last segment of the url path, or an empty string if there is none"""
    name = unquote(urlparse(url)[2]).rsplit("/", 1)[-1]
    if name in {".", ".."}:
        return ""
    return name


def resolve_destination(
    url: str,
    directory: Path,
    timestamp: int,
    max_disambiguator: int = 999,
    on_fallback: Callable[[Path], None] | None = None,
) -> Path:
    """Choose the file path to download url into.

    The file name is taken from the url; if there is none, the timestamp is
    used. If the file exists, '[1] name', '[2] name', ... are tried up to
    max_disambiguator. When all of those exist, the result is '[timestamp] name'
    without checking whether that exists as well.

    Args:
        url: The url that is downloaded.
        directory: The directory to place the file in.
        timestamp: Unix timestamp (seconds) used as fallback name or prefix.
        max_disambiguator: The highest number to try.
        on_fallback: Called with the resulting path if the timestamp
            prefix had to be used.
    """
    name = filename_from_url(url) or str(timestamp)
    candidate = directory / name
    if not candidate.exists():
        return candidate
    for index in range(1, max_disambiguator + 1):
        candidate = directory / f"[{index}] {name}"
        if not candidate.exists():
            return candidate
    candidate = directory / f"[{timestamp}] {name}"
    logger.warning(
        "All %d alternatives for '%s' exist, falling back to '%s'",
        max_disambiguator,
        directory / name,
        candidate,
    )
    if on_fallback is not None:
        on_fallback(candidate)
    return candidate
