"""URL parsing into scheme, credentials, host, port, path and query."""

from __future__ import annotations

import re

from beauty.utils import split

_LEADING_DIGITS = re.compile(r"\d+")


def _split_pair(text: str, sep: str, mandatory_left: bool = True) -> tuple[str, str]:
    parts = split(text, sep)
    if len(parts) == 1:
        return (parts[0], "") if mandatory_left else ("", parts[0])
    if len(parts) == 2:
        return parts[0], parts[1]
    raise ValueError(f"Invalid URL format for [{text}]")


class Url:
    """A parsed URL of the form
    ``scheme://[[login][:password]@]host[:port][/path][?query]``.

    The query keeps its leading ``?``. ``port`` is 0 when not given.
    """

    def __init__(self, url: str) -> None:
        self.url = url
        self.scheme = ""
        self._credentials: tuple[str, str] = ("", "")
        self.host = ""
        self.port_view = ""
        self.port = 0
        self.path = ""
        self.query = ""

        parts = split(url, "/")
        if len(parts) < 3 or parts[1] or not parts[2]:
            raise ValueError(f"Invalid URL format for [{url}]")

        self.scheme = parts[0].removesuffix(":") if parts[0].endswith(":") else parts[0]

        user_info, host = _split_pair(parts[2], "@", mandatory_left=False)
        if user_info:
            self._credentials = _split_pair(user_info, ":")

        if host:
            if host.startswith("["):
                close = host.find("]")
                if close == -1:
                    raise ValueError(f"Invalid URL format for IPv6 [{host}]")
                self.host = host[1:close]
                colon = host.find(":", close + 1)
                if colon != -1:
                    self.port_view = host[colon + 1:]
                    if not self.port_view:
                        raise ValueError(f"Invalid port for IPv6 [{host}]")
            else:
                self.host, self.port_view = _split_pair(host, ":")

        if self.port_view:
            digits = _LEADING_DIGITS.match(self.port_view)
            if digits is None:
                raise ValueError(f"Invalid port number {self.port_view}")
            self.port = int(digits.group(0))

        start = len(parts[0]) + 1 + len(parts[1]) + 1 + len(parts[2])
        query_start = url.find("?", start)
        if query_start != -1:
            self.path = url[start:query_start]
            self.query = url[query_start:]
        else:
            self.path = url[start:]

    @property
    def login(self) -> str:
        return self._credentials[0]

    @property
    def password(self) -> str:
        return self._credentials[1]

    @property
    def is_https(self) -> bool:
        return self.scheme == "https"

    def strip_login_password(self) -> str:
        """Return the URL without credentials and without the query."""
        port = f":{self.port}" if self.port else ""
        return f"{self.scheme}://{self.host}{port}{self.path}"

    def __str__(self) -> str:
        return self.url

    def __repr__(self) -> str:
        return f"Url({self.url!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Url):
            return NotImplemented
        return self.url == other.url

    def __hash__(self) -> int:
        return hash(self.url)