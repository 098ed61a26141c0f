# (c) Nelen & Schuurmans

import json
from enum import IntEnum
from importlib.resources import files

__all__ = ["StatusCode", "describe", "to_status", "is_success"]


def _load_status_codes() -> list[dict]:
    source = files("clean_http").joinpath("data", "status_codes.json")
    return json.loads(source.read_text(encoding="utf-8"))


_STATUS_CODES = _load_status_codes()

# 1xx informational, 2xx success, 3xx redirection, 4xx client error, 5xx
# server error; below 100 are the sentinels NONE (timeout) and UNDEFINED_ERROR.
StatusCode = IntEnum(  # type: ignore
    "StatusCode",
    [(x["name"], x["code"]) for x in _STATUS_CODES],
    module=__name__,
)

_DESCRIPTIONS: dict[int, str] = {x["code"]: x["description"] for x in _STATUS_CODES}


def to_status(code: int) -> "StatusCode | int":
    """Return the StatusCode member for code, or code itself if it is unknown"""
    try:
        return StatusCode(code)
    except ValueError:
        return int(code)


def describe(status: int) -> str:
    return _DESCRIPTIONS.get(int(status), "")


def is_success(status: int) -> bool:
    """Returns True on 2xx status"""
    return (int(status) // 100) == 2
