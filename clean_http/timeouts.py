# (c) Nelen & Schuurmans

import math

import urllib3

__all__ = ["to_milliseconds", "make_timeout"]


MAX_MILLISECONDS = 2**31 - 1
MIN_MILLISECONDS = 10


def to_milliseconds(seconds: float) -> int:
    """Convert a timeout in seconds to whole milliseconds.

    Values that would round to zero (or are negative) become 10 ms, so that a
    tiny timeout never disables the timeout altogether. Values that do not fit
    in a 32-bit integer are clamped.
    """
    milliseconds = seconds * 1000.0
    if math.isnan(milliseconds) or milliseconds < 1.0:
        return MIN_MILLISECONDS
    if milliseconds > MAX_MILLISECONDS:
        return MAX_MILLISECONDS
    return int(milliseconds)


def make_timeout(seconds: float, connect: float | None = None) -> urllib3.Timeout:
    """The read/write timeout for urllib3; 'connect' is passed unchanged."""
    return urllib3.Timeout(connect=connect, read=to_milliseconds(seconds) / 1000.0)
