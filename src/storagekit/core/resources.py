"""Typed shapes of the JSON API resources the models convert to and from.

These are plain JSON-compatible dicts. Every key is optional on the wire;
int64 fields arrive as decimal strings and timestamps as RFC 3339 strings.
"""

from __future__ import annotations

from typing import TypedDict


class CorsResource(TypedDict, total=False):
    """One entry of a bucket's ``cors`` list."""

    maxAgeSeconds: int | None
    method: list[str] | None
    origin: list[str] | None
    responseHeader: list[str] | None


class ProjectTeamResource(TypedDict, total=False):
    projectNumber: str
    team: str


class ObjectAccessControlResource(TypedDict, total=False):
    """An ``objectAccessControls`` resource."""

    bucket: str
    object: str
    generation: str
    entity: str
    role: str
    email: str
    domain: str
    entityId: str
    projectTeam: ProjectTeamResource
    etag: str
    id: str
    kind: str
    selfLink: str


class BucketAccessControlResource(TypedDict, total=False):
    """A ``bucketAccessControls`` resource."""

    bucket: str
    entity: str
    role: str
    email: str
    domain: str
    entityId: str
    projectTeam: ProjectTeamResource
    etag: str
    id: str
    kind: str
    selfLink: str


class OwnerResource(TypedDict, total=False):
    entity: str
    entityId: str


class ObjectResource(TypedDict, total=False):
    """An ``objects`` resource (object metadata)."""

    kind: str
    id: str
    selfLink: str
    mediaLink: str
    name: str
    bucket: str
    generation: str
    metageneration: str
    contentType: str | None
    contentEncoding: str | None
    contentDisposition: str | None
    contentLanguage: str | None
    cacheControl: str | None
    md5Hash: str | None
    crc32c: str | None
    etag: str
    size: str
    componentCount: int
    metadata: dict[str, str]
    acl: list[ObjectAccessControlResource]
    owner: OwnerResource
    timeDeleted: str
    updated: str


class VersioningResource(TypedDict, total=False):
    enabled: bool


class WebsiteResource(TypedDict, total=False):
    mainPageSuffix: str
    notFoundPage: str


class BucketResource(TypedDict, total=False):
    """A ``buckets`` resource (bucket metadata)."""

    kind: str
    id: str
    selfLink: str
    name: str
    owner: OwnerResource
    etag: str
    location: str
    storageClass: str
    timeCreated: str
    metageneration: str
    versioning: VersioningResource
    website: WebsiteResource
    cors: list[CorsResource]
    acl: list[BucketAccessControlResource]
    defaultObjectAcl: list[ObjectAccessControlResource]
