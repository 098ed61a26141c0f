# (c) Nelen & Schuurmans

from pathlib import Path

from pydantic import Field

from .value_object import ValueObject

__all__ = ["HttpConfig", "DEFAULT_TIMEOUT", "DEFAULT_DOWNLOAD_TIMEOUT"]


DEFAULT_TIMEOUT = 10.0
DEFAULT_DOWNLOAD_TIMEOUT = 600.0


class HttpConfig(ValueObject):
    """Settings shared by all calls of one HttpClient.

    Args:
        timeout: Default read/write timeout (seconds) for get and post.
        download_timeout: Default read/write timeout (seconds) for download.
        connect_timeout: Timeout (seconds) for establishing the connection.
            None waits for the operating system to give up.
        user_agent: User-Agent sent when the header list does not contain one.
        downloads_dir: Default target directory for downloads. Defaults
            to the 'Downloads' directory in the home directory of the user.
        max_redirects: Number of redirects that are followed.
        max_disambiguator: Highest '[n]' prefix tried before falling back to a
            timestamp prefix for a download that collides with existing files.
    """

    timeout: float = DEFAULT_TIMEOUT
    download_timeout: float = DEFAULT_DOWNLOAD_TIMEOUT
    connect_timeout: float | None = 100.0
    user_agent: str | None = None
    downloads_dir: Path | None = None
    max_redirects: int = Field(default=50, ge=0)
    max_disambiguator: int = Field(default=999, ge=1)

    def get_downloads_dir(self) -> Path:
        if self.downloads_dir is not None:
            return self.downloads_dir
        return Path.home() / "Downloads"
