"""Cross-Origin Resource Sharing (CORS) configuration for a bucket."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Self
from urllib.parse import urlsplit, urlunsplit

from storagekit.core.exceptions import InvalidOriginError, MissingFieldError
from storagekit.core.http_method import HttpMethod


if TYPE_CHECKING:
    from storagekit.core.resources import CorsResource


logger = logging.getLogger(__name__)

_ANY_URI: Final = "*"
_SCHEME_RE: Final = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_HOST_RE: Final = re.compile(r"\[[0-9A-Fa-f:.]+\]|[A-Za-z0-9\-._~%!$&'()*+,;=]+")


@dataclass(frozen=True, slots=True)
class Origin:
    """An origin allowed by a CORS rule: a URI, or ``*`` for any origin.

    Use Origin.of() or Origin.any() rather than the constructor, so that
    ``*`` always resolves to the shared wildcard instance.

    Attributes:
        value: The origin string.
    """

    value: str

    def __post_init__(self) -> None:
        if self.value is None:
            raise MissingFieldError("value")

    @staticmethod
    def any() -> Origin:
        """Return the origin matching any origin (``*``)."""
        return _ANY

    @staticmethod
    def of(value: str) -> Origin:
        """Return an Origin for value; ``*`` gives the shared wildcard.

        Raises:
            MissingFieldError: If value is None.
        """
        if value is None:
            raise MissingFieldError("value")
        if value == _ANY_URI:
            return _ANY
        return Origin(value)

    @staticmethod
    def from_parts(scheme: str, host: str, port: int = -1) -> Origin:
        """Build an origin URI from its parts.

        Args:
            scheme: URI scheme, e.g. "https".
            host: Host name or IP address. IPv6 addresses may be given bare.
            port: Port number, or -1 for none.

        Raises:
            InvalidOriginError: If the parts cannot form a valid URI.
        """
        try:
            uri = _compose_uri(scheme, host, port)
        except (TypeError, ValueError) as e:
            raise InvalidOriginError(scheme, host, port, cause=e) from e
        return Origin.of(uri)

    def __str__(self) -> str:
        return self.value


_ANY: Final = Origin(_ANY_URI)


def _compose_uri(scheme: str, host: str, port: int) -> str:
    if not _SCHEME_RE.fullmatch(scheme):
        raise ValueError(f"Illegal character in scheme name: {scheme!r}")
    if ":" in host and not host.startswith("["):
        host = f"[{host}]"
    if not _HOST_RE.fullmatch(host):
        raise ValueError(f"Illegal character in host name: {host!r}")
    if port != -1 and not 0 <= port <= 65535:
        raise ValueError(f"Port out of range 0-65535: {port}")
    netloc = host if port == -1 else f"{host}:{port}"
    uri = urlunsplit((scheme, netloc, "", "", ""))
    if urlsplit(uri).hostname is None:
        raise ValueError(f"Expected an authority component in {uri!r}")
    return uri


@dataclass(frozen=True, slots=True)
class Cors:
    """A CORS rule of a bucket.

    Every field is optional. A field that was never set is None, which is
    different from an empty tuple.

    Attributes:
        max_age_seconds: How long browsers may cache the preflight response.
        methods: HTTP methods the rule applies to.
        origins: Origins allowed to make cross-origin requests.
        response_headers: Response headers browsers may expose.

    Example:
        >>> cors = (
        ...     Cors.builder()
        ...     .methods([HttpMethod.GET])
        ...     .origins([Origin.any()])
        ...     .build()
        ... )
        >>> cors.to_wire()
        {'method': ['GET'], 'origin': ['*']}
    """

    max_age_seconds: int | None = None
    methods: tuple[HttpMethod, ...] | None = None
    origins: tuple[Origin, ...] | None = None
    response_headers: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        """Snapshot any sequence fields as tuples."""
        for name in ("methods", "origins", "response_headers"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    @staticmethod
    def builder() -> CorsBuilder:
        return CorsBuilder()

    def to_builder(self) -> CorsBuilder:
        """Return a builder holding this rule's fields."""
        return (
            CorsBuilder()
            .max_age_seconds(self.max_age_seconds)
            .methods(self.methods)
            .origins(self.origins)
            .response_headers(self.response_headers)
        )

    def to_wire(self) -> CorsResource:
        """Encode as an entry of a bucket resource's ``cors`` list."""
        resource: CorsResource = {}
        if self.max_age_seconds is not None:
            resource["maxAgeSeconds"] = self.max_age_seconds
        if self.methods is not None:
            resource["method"] = [method.value for method in self.methods]
        if self.origins is not None:
            resource["origin"] = [str(origin) for origin in self.origins]
        if self.response_headers is not None:
            resource["responseHeader"] = list(self.response_headers)
        return resource

    @staticmethod
    def from_wire(resource: CorsResource) -> Cors:
        """Decode an entry of a bucket resource's ``cors`` list.

        Method names are matched case-insensitively.

        Raises:
            UnknownHttpMethodError: If a method name is not a known method.
        """
        builder = CorsBuilder().max_age_seconds(resource.get("maxAgeSeconds"))
        methods = resource.get("method")
        if methods is not None:
            builder.methods(HttpMethod.from_name(name) for name in methods)
        origins = resource.get("origin")
        if origins is not None:
            builder.origins(Origin.of(value) for value in origins)
        builder.response_headers(resource.get("responseHeader"))
        cors = builder.build()
        logger.debug("Decoded CORS rule %s", cors)
        return cors


class CorsBuilder:
    """Accumulates the fields of a Cors rule.

    Builders are not thread-safe; use one per thread.
    """

    def __init__(self) -> None:
        self._max_age_seconds: int | None = None
        self._methods: tuple[HttpMethod, ...] | None = None
        self._origins: tuple[Origin, ...] | None = None
        self._response_headers: tuple[str, ...] | None = None

    def max_age_seconds(self, max_age_seconds: int | None) -> Self:
        self._max_age_seconds = max_age_seconds
        return self

    def methods(self, methods: Iterable[HttpMethod] | None) -> Self:
        self._methods = tuple(methods) if methods is not None else None
        return self

    def origins(self, origins: Iterable[Origin] | None) -> Self:
        self._origins = tuple(origins) if origins is not None else None
        return self

    def response_headers(self, headers: Iterable[str] | None) -> Self:
        self._response_headers = tuple(headers) if headers is not None else None
        return self

    def build(self) -> Cors:
        return Cors(
            max_age_seconds=self._max_age_seconds,
            methods=self._methods,
            origins=self._origins,
            response_headers=self._response_headers,
        )
