"""Configuration for storagekit.

Settings come from the environment, using the variable names the storage
client libraries and emulators already understand.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final, Self
from urllib.parse import quote


DEFAULT_HOST: Final = "https://storage.googleapis.com"


@dataclass(frozen=True, slots=True)
class StorageOptions:
    """Where the storage JSON API lives and which project to use.

    Attributes:
        host: Base URL of the service (or of a local emulator).
        project_id: Default project, if known.
    """

    host: str = DEFAULT_HOST
    project_id: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Read options from environment variables.

        Uses STORAGE_EMULATOR_HOST for the host (bare host:port values get an
        http:// scheme) and GOOGLE_CLOUD_PROJECT for the project.

        Args:
            environ: Mapping to read instead of os.environ.

        Example:
            >>> StorageOptions.from_env({"STORAGE_EMULATOR_HOST": "localhost:4443"}).host
            'http://localhost:4443'
        """
        env = os.environ if environ is None else environ
        host = env.get("STORAGE_EMULATOR_HOST") or DEFAULT_HOST
        if "://" not in host:
            host = f"http://{host}"
        return cls(
            host=host.rstrip("/"),
            project_id=env.get("GOOGLE_CLOUD_PROJECT") or None,
        )

    def bucket_url(self, bucket: str) -> str:
        """JSON API URL of a bucket resource."""
        return f"{self.host}/storage/v1/b/{quote(bucket, safe='')}"

    def object_url(self, bucket: str, name: str) -> str:
        """JSON API URL of an object resource; the name is percent-encoded."""
        return f"{self.bucket_url(bucket)}/o/{quote(name, safe='')}"
