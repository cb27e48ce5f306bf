"""Immutable URL value used by the navigation engine."""

import re
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import MalformedUrlError
from ..utils.url_utils import split_labels, split_segments

# Ports a browser leaves out of the serialized URL
DEFAULT_PORTS: Dict[str, int] = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

QueryPairs = Tuple[Tuple[str, str], ...]

# One hostname label: letters (any script), digits, "-" and "_"
HOST_LABEL = re.compile(r"[\w-]+")


def is_valid_hostname(hostname: str) -> bool:
    """
    Check a hostname label by label.

    IPv6 literals are accepted as-is; urlsplit already checked their brackets.
    """
    if ":" in hostname:
        return True
    return all(HOST_LABEL.fullmatch(label) for label in split_labels(hostname))


def parse_query(query: str) -> QueryPairs:
    """
    Split a raw query string into ordered (key, value) pairs.

    Percent-encoding is left untouched so pairs serialize back exactly as
    received. Empty chunks ("a=1&&b=2") are dropped and a bare key ("flag")
    becomes ("flag", "").
    """
    pairs: List[Tuple[str, str]] = []
    for chunk in query.split("&"):
        if not chunk:
            continue
        key, _, value = chunk.partition("=")
        pairs.append((key, value))
    return tuple(pairs)


def format_query(pairs: QueryPairs) -> str:
    """Join (key, value) pairs back into a raw query string."""
    return "&".join(f"{key}={value}" for key, value in pairs)


class Url(BaseModel):
    """
    Absolute URL split into the parts the navigation modes work on.

    Instances are frozen: every transformation returns a new Url via
    `replace()`, so the current and next location never alias.
    """

    model_config = ConfigDict(frozen=True)

    scheme: str = Field(..., description="Lower-cased scheme (e.g. 'https')")
    hostname: str = Field(..., description="Dot-separated host labels")
    path: str = Field("/", description="Absolute path, at minimum '/'")
    query: QueryPairs = Field(default=(), description="Ordered raw query pairs")
    fragment: Optional[str] = Field(None, description="Fragment without '#'")
    port: Optional[int] = Field(None, description="Explicit non-default port")
    username: Optional[str] = Field(None, description="Userinfo user name")
    password: Optional[str] = Field(None, description="Userinfo password")

    @field_validator("path")
    @classmethod
    def _path_is_absolute(cls, value: str) -> str:
        if not value:
            return "/"
        if not value.startswith("/"):
            raise ValueError("path must start with '/'")
        return value

    @field_validator("hostname")
    @classmethod
    def _hostname_is_valid(cls, value: str) -> str:
        if not value or not is_valid_hostname(value):
            raise ValueError(f"invalid hostname: {value!r}")
        return value

    @field_validator("fragment")
    @classmethod
    def _empty_fragment_is_absent(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @classmethod
    def parse(cls, text: Any) -> "Url":
        """
        Parse an absolute URL.

        Raises:
            MalformedUrlError: if the text is empty, has no scheme or host,
                has an empty or ill-formed host label, or carries an invalid
                port or IPv6 literal
        """
        if not isinstance(text, str) or not text.strip():
            raise MalformedUrlError(text, "empty or not a string")

        try:
            parts = urlsplit(text.strip())
            port = parts.port
        except ValueError as e:
            raise MalformedUrlError(text, str(e)) from e

        if not parts.scheme:
            raise MalformedUrlError(text, "missing scheme")
        if not parts.hostname:
            raise MalformedUrlError(text, "missing host")
        if not is_valid_hostname(parts.hostname):
            raise MalformedUrlError(text, "invalid host")

        if port is not None and DEFAULT_PORTS.get(parts.scheme) == port:
            port = None

        return cls(
            scheme=parts.scheme,
            hostname=parts.hostname,
            path=parts.path or "/",
            query=parse_query(parts.query),
            fragment=parts.fragment or None,
            port=port,
            username=parts.username,
            password=parts.password,
        )

    @property
    def labels(self) -> List[str]:
        return split_labels(self.hostname)

    @property
    def segments(self) -> List[str]:
        return split_segments(self.path)

    @property
    def netloc(self) -> str:
        host = f"[{self.hostname}]" if ":" in self.hostname else self.hostname
        if self.port is not None:
            host = f"{host}:{self.port}"
        if self.username is None:
            return host
        userinfo = self.username
        if self.password is not None:
            userinfo = f"{userinfo}:{self.password}"
        return f"{userinfo}@{host}"

    def replace(self, **changes: Any) -> "Url":
        """
        Return a copy with the given fields changed.

        The merged fields are validated again, so a copy can not break the
        invariants a parsed Url holds.
        """
        return type(self).model_validate({**self.model_dump(), **changes})

    def to_string(self) -> str:
        url = f"{self.scheme}://{self.netloc}{self.path}"
        if self.query:
            url = f"{url}?{format_query(self.query)}"
        if self.fragment:
            url = f"{url}#{self.fragment}"
        return url

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Url({self.to_string()!r})"
