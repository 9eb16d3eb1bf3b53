"""HTTP methods accepted in CORS rules."""

from __future__ import annotations

from enum import Enum

from storagekit.core.exceptions import UnknownHttpMethodError


class HttpMethod(Enum):
    """HTTP method names as they appear in a bucket's CORS configuration."""

    GET = "GET"
    HEAD = "HEAD"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> HttpMethod:
        """Look up a method by name, ignoring case.

        Raises:
            UnknownHttpMethodError: If name is not a known method.
        """
        try:
            return cls[name.upper()]
        except (KeyError, AttributeError) as e:
            raise UnknownHttpMethodError(name) from e
