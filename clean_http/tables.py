# (c) Nelen & Schuurmans

import json
from enum import Enum
from importlib.resources import files

__all__ = ["ContentType", "UserAgent"]


def _load_table(name: str) -> dict[str, str]:
    source = files("clean_http").joinpath("data", name)
    return json.loads(source.read_text(encoding="utf-8"))


class StringTable(str, Enum):
    """Read-only string constants; members render as their plain value."""

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)


ContentType = StringTable(  # type: ignore
    "ContentType", _load_table("content_types.json"), module=__name__
)
UserAgent = StringTable(  # type: ignore
    "UserAgent", _load_table("user_agents.json"), module=__name__
)
