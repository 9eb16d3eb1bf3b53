"""Domain exceptions for storagekit.

All library errors inherit from StoragekitError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.

Errors that correspond to a built-in category also inherit from it
(ValueError for bad arguments, LookupError for unknown enum names), so
callers that only know the built-ins still catch them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


class StoragekitError(Exception):
    """Base class for all storagekit exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class MissingFieldError(StoragekitError, ValueError):
    """Raised when a mandatory field or argument is None.

    Attributes:
        field: Name of the missing field.
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"'{field}' must not be None")

    @property
    def recovery_hint(self) -> str:
        """Suggest providing the field."""
        return f"Provide a value for '{self.field}'"


class InvalidOriginError(StoragekitError, ValueError):
    """Raised when scheme, host and port cannot form a valid origin URI.

    Attributes:
        scheme: The URI scheme that was given.
        host: The host that was given.
        port: The port that was given (-1 means no port).
        cause: The underlying URI syntax error.
    """

    def __init__(
        self,
        scheme: str,
        host: str,
        port: int,
        cause: Exception | None = None,
    ) -> None:
        self.scheme = scheme
        self.host = host
        self.port = port
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(
            f"Cannot build origin from scheme={scheme!r}, host={host!r}, "
            f"port={port}{detail}"
        )

    @property
    def recovery_hint(self) -> str:
        """Suggest the expected origin shape."""
        return "Origins look like scheme://host[:port], e.g. https://example.com:8080"


class WireFormatError(StoragekitError, ValueError):
    """Raised when a wire resource holds a value that cannot be decoded.

    Attributes:
        field: Wire field name holding the bad value.
        value: The offending value.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        field: str,
        value: object,
        cause: Exception | None = None,
    ) -> None:
        self.field = field
        self.value = value
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Point at the offending field."""
        return f"Check the '{self.field}' field of the resource"


class UnknownHttpMethodError(WireFormatError, LookupError):
    """Raised when a CORS rule names an HTTP method that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown HTTP method: {name!r}", field="method", value=name)

    @property
    def recovery_hint(self) -> str:
        """List the accepted method names."""
        from storagekit.core.http_method import HttpMethod

        return f"Valid methods: {', '.join(m.name for m in HttpMethod)}"


class UnknownAclRoleError(WireFormatError, LookupError):
    """Raised when an access control entry names a role that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown ACL role: {name!r}", field="role", value=name)

    @property
    def recovery_hint(self) -> str:
        """List the accepted role names."""
        from storagekit.core.acl import Role

        return f"Valid roles: {', '.join(r.name for r in Role)}"


class ResourceLoadError(StoragekitError):
    """Raised when a JSON resource file cannot be loaded.

    Attributes:
        path: Path to the file that failed to load.
        line: Line number where the error occurred (if available).
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        path: Path,
        line: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.path = path
        self.line = line
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the file at the specific line."""
        if self.line:
            return f"Check {self.path.name} at line {self.line}"
        return f"Check that {self.path.name} exists and holds a JSON object"
