# (c) Nelen & Schuurmans

from collections.abc import Mapping
from pathlib import Path
from typing import Annotated
from typing import Literal

from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from urllib3 import HTTPHeaderDict

from .status_code import is_success
from .status_code import StatusCode
from .status_code import to_status
from .value_object import ValueObject

__all__ = ["Response", "Body", "SavedPath", "Failure"]


class Body(ValueObject):
    """The decoded response body"""

    kind: Literal["body"] = "body"
    text: str


class SavedPath(ValueObject):
    """The file a download was written to"""

    kind: Literal["saved_path"] = "saved_path"
    path: Path


class Failure(ValueObject):
    """Description of a failure that prevented a response"""

    kind: Literal["failure"] = "failure"
    message: str


Content = Annotated[Body | SavedPath | Failure, Field(discriminator="kind")]


class Response(ValueObject):
    """The uniform result of get, post and download.

    A timeout gives status NONE and no content. Transport failures give status
    UNDEFINED_ERROR with a Failure content. Any response from the server,
    including 4xx and 5xx, gives its status and headers with a Body content,
    except for a successful download, which gives a SavedPath.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: StatusCode | int
    headers: HTTPHeaderDict = Field(default_factory=HTTPHeaderDict)
    content: Content | None = None

    @field_validator("status", mode="before")
    @classmethod
    def known_status(cls, value):
        if isinstance(value, int) and not isinstance(value, StatusCode):
            return to_status(value)
        return value

    @field_validator("headers", mode="before")
    @classmethod
    def case_insensitive_headers(cls, value):
        if value is None:
            return HTTPHeaderDict()
        if isinstance(value, Mapping) and not isinstance(value, HTTPHeaderDict):
            return HTTPHeaderDict(value)
        return value

    @property
    def ok(self) -> bool:
        return is_success(self.status)

    @property
    def timed_out(self) -> bool:
        return self.status == StatusCode.NONE

    @property
    def text(self) -> str | None:
        if isinstance(self.content, Body):
            return self.content.text
        elif isinstance(self.content, Failure):
            return self.content.message
        return None

    @property
    def path(self) -> Path | None:
        if isinstance(self.content, SavedPath):
            return self.content.path
        return None
