# (c) Nelen & Schuurmans

import logging
from collections.abc import Iterable

from pydantic import ConfigDict
from pydantic import Field
from urllib3 import HTTPHeaderDict

from .value_object import ValueObject

__all__ = ["ParsedHeaders", "parse_headers"]


logger = logging.getLogger(__name__)


class ParsedHeaders(ValueObject):
    """Outgoing headers, with User-Agent and Content-Type kept apart."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    user_agent: str | None = None
    content_type: str | None = None
    headers: HTTPHeaderDict = Field(default_factory=HTTPHeaderDict)

    def as_request_headers(
        self, default_user_agent: str | None = None
    ) -> HTTPHeaderDict:
        result = HTTPHeaderDict(self.headers)
        user_agent = self.user_agent or default_user_agent
        if user_agent:
            result["User-Agent"] = user_agent
        if self.content_type:
            result["Content-Type"] = self.content_type
        return result


def parse_headers(entries: Iterable[str]) -> ParsedHeaders:
    """Parse a list of "Name: Value" strings.

    Entries that do not consist of exactly one name and one value separated by
    a colon are skipped. Note that this also skips values that contain a colon
    themselves, such as urls.

    User-Agent and Content-Type are matched case-insensitively and returned
    in their own fields. Other headers are kept in the order given; repeated
    names are combined.
    """
    user_agent = None
    content_type = None
    headers = HTTPHeaderDict()
    for entry in entries:
        parts = entry.split(":")
        if len(parts) != 2 or not parts[0].strip():
            logger.debug("Skipping malformed header %r", entry)
            continue
        name, value = parts[0].strip(), parts[1].strip()
        lowered = name.lower()
        if lowered == "user-agent":
            user_agent = value
        elif lowered == "content-type":
            content_type = value
        else:
            headers.add(name, value)
    return ParsedHeaders(
        user_agent=user_agent, content_type=content_type, headers=headers
    )
