"""Object (blob) metadata."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, Self

from storagekit.core.acl import Acl, Entity
from storagekit.core.bucket_info import BucketInfo
from storagekit.core.exceptions import MissingFieldError
from storagekit.core.wire import (
    Cleared,
    clearable,
    collapse,
    int64_from_wire,
    int64_to_wire,
    millis_to_rfc3339,
    put_clearable,
    rfc3339_to_millis,
)


if TYPE_CHECKING:
    from storagekit.core.resources import ObjectResource


logger = logging.getLogger(__name__)

# (wire key, dataclass field) for fields that can be explicitly cleared
_CLEARABLE_FIELDS: Final = (
    ("cacheControl", "_cache_control"),
    ("contentType", "_content_type"),
    ("contentEncoding", "_content_encoding"),
    ("contentDisposition", "_content_disposition"),
    ("contentLanguage", "_content_language"),
    ("md5Hash", "_md5"),
    ("crc32c", "_crc32c"),
)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class BlobInfo:
    """Metadata of an object stored in a bucket.

    ``bucket`` and ``name`` are required. Content metadata (cache control,
    content type, encoding, disposition, language) and the md5/crc32c
    checksums can be set, left unset, or explicitly cleared by passing None
    to the builder. A cleared field is sent as ``null`` so the service
    removes it; its accessor returns None like an unset field does.

    Service-assigned fields (id, links, etag, generations, size, component
    count, owner, times) are filled in when decoding a resource.

    Times are milliseconds since the epoch. Two BlobInfo values are equal
    when their wire resources are equal.

    Example:
        >>> blob = BlobInfo.builder("my-bucket", "reports/q1.csv").content_type(
        ...     "text/csv"
        ... ).build()
        >>> blob.to_wire()
        {'bucket': 'my-bucket', 'name': 'reports/q1.csv', 'contentType': 'text/csv'}
    """

    bucket: str
    name: str
    id: str | None = None
    self_link: str | None = None
    media_link: str | None = None
    etag: str | None = None
    generation: int | None = None
    metageneration: int | None = None
    size: int | None = None
    component_count: int | None = None
    delete_time: int | None = None
    update_time: int | None = None
    owner: Entity | None = None
    acl: tuple[Acl, ...] | None = None
    metadata: Mapping[str, str] | None = None
    _cache_control: str | Cleared | None = None
    _content_type: str | Cleared | None = None
    _content_encoding: str | Cleared | None = None
    _content_disposition: str | Cleared | None = None
    _content_language: str | Cleared | None = None
    _md5: str | Cleared | None = None
    _crc32c: str | Cleared | None = None

    def __post_init__(self) -> None:
        """Validate required fields and freeze collection fields."""
        if self.bucket is None:
            raise MissingFieldError("bucket")
        if self.name is None:
            raise MissingFieldError("name")
        if self.acl is not None and not isinstance(self.acl, tuple):
            object.__setattr__(self, "acl", tuple(self.acl))
        if self.metadata is not None and not isinstance(
            self.metadata, MappingProxyType
        ):
            object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def cache_control(self) -> str | None:
        return collapse(self._cache_control)

    @property
    def content_type(self) -> str | None:
        return collapse(self._content_type)

    @property
    def content_encoding(self) -> str | None:
        return collapse(self._content_encoding)

    @property
    def content_disposition(self) -> str | None:
        return collapse(self._content_disposition)

    @property
    def content_language(self) -> str | None:
        return collapse(self._content_language)

    @property
    def md5(self) -> str | None:
        """Base64-encoded MD5 hash of the object's data."""
        return collapse(self._md5)

    @property
    def crc32c(self) -> str | None:
        """Base64-encoded big-endian CRC32C checksum of the object's data."""
        return collapse(self._crc32c)

    @staticmethod
    def of(bucket: str, name: str) -> BlobInfo:
        """Return a BlobInfo with only bucket and name set."""
        return BlobInfo.builder(bucket, name).build()

    @staticmethod
    def builder(bucket: str | BucketInfo, name: str) -> BlobInfoBuilder:
        """Return a builder for an object in bucket.

        Args:
            bucket: Bucket name, or a BucketInfo whose name is used.
            name: Object name.

        Raises:
            MissingFieldError: If bucket or name is None.
        """
        if isinstance(bucket, BucketInfo):
            bucket = bucket.name
        return BlobInfoBuilder().bucket(bucket).name(name)

    def to_builder(self) -> BlobInfoBuilder:
        """Return a builder holding this blob's fields, cleared state included."""
        builder = BlobInfoBuilder()
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                builder._set_field(f.name, value)
        return builder

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlobInfo):
            return NotImplemented
        return self.to_wire() == other.to_wire()

    def __hash__(self) -> int:
        return hash((self.bucket, self.name))

    def __repr__(self) -> str:
        metadata = dict(self.metadata) if self.metadata is not None else None
        return (
            f"BlobInfo(bucket={self.bucket!r}, name={self.name!r}, "
            f"size={self.size!r}, content_type={self.content_type!r}, "
            f"metadata={metadata!r})"
        )

    def to_wire(self) -> ObjectResource:
        """Encode as an ``objects`` resource.

        Unset fields are left out; cleared fields are written as None.
        """
        resource: dict[str, Any] = {"bucket": self.bucket, "name": self.name}
        if self.id is not None:
            resource["id"] = self.id
        if self.self_link is not None:
            resource["selfLink"] = self.self_link
        if self.media_link is not None:
            resource["mediaLink"] = self.media_link
        if self.etag is not None:
            resource["etag"] = self.etag
        if self.generation is not None:
            resource["generation"] = int64_to_wire(self.generation)
        if self.metageneration is not None:
            resource["metageneration"] = int64_to_wire(self.metageneration)
        if self.size is not None:
            resource["size"] = int64_to_wire(self.size)
        if self.component_count is not None:
            resource["componentCount"] = self.component_count
        if self.delete_time is not None:
            resource["timeDeleted"] = millis_to_rfc3339(
                self.delete_time, "timeDeleted"
            )
        if self.update_time is not None:
            resource["updated"] = millis_to_rfc3339(self.update_time, "updated")
        if self.owner is not None:
            resource["owner"] = {"entity": self.owner.to_wire()}
        if self.acl is not None:
            resource["acl"] = [acl.to_object_wire() for acl in self.acl]
        if self.metadata is not None:
            resource["metadata"] = dict(self.metadata)
        for key, attr in _CLEARABLE_FIELDS:
            put_clearable(resource, key, getattr(self, attr))
        return resource  # type: ignore[return-value]

    @staticmethod
    def from_wire(resource: ObjectResource) -> BlobInfo:
        """Decode an ``objects`` resource.

        Optional sections (metadata, times, size, owner, acl) are applied only
        when present and not null. Clearable fields are applied only when
        their key is present, so a ``null`` there decodes as cleared while a
        missing key stays unset.

        Raises:
            MissingFieldError: If the resource has no bucket or name.
            WireFormatError: If a timestamp or integer field is malformed.
        """
        builder = (
            BlobInfoBuilder()
            .bucket(resource.get("bucket"))  # type: ignore[arg-type]
            .name(resource.get("name"))  # type: ignore[arg-type]
            .id(resource.get("id"))
            .self_link(resource.get("selfLink"))
            .media_link(resource.get("mediaLink"))
            .etag(resource.get("etag"))
            .component_count(resource.get("componentCount"))
        )
        if resource.get("generation") is not None:
            builder.generation(int64_from_wire(resource["generation"], "generation"))
        if resource.get("metageneration") is not None:
            builder.metageneration(
                int64_from_wire(resource["metageneration"], "metageneration")
            )
        if resource.get("metadata") is not None:
            builder.metadata(resource["metadata"])
        if resource.get("timeDeleted") is not None:
            builder.delete_time(
                rfc3339_to_millis(resource["timeDeleted"], "timeDeleted")
            )
        if resource.get("updated") is not None:
            builder.update_time(rfc3339_to_millis(resource["updated"], "updated"))
        if resource.get("size") is not None:
            builder.size(int64_from_wire(resource["size"], "size"))
        owner = resource.get("owner")
        if owner is not None and owner.get("entity") is not None:
            builder.owner(Entity.from_wire(owner["entity"]))
        if resource.get("acl") is not None:
            builder.acl(map(Acl.from_wire, resource["acl"]))
        for key, attr in _CLEARABLE_FIELDS:
            if key in resource:
                builder._set_field(attr, clearable(resource[key]))  # type: ignore[literal-required]
        blob = builder.build()
        logger.debug("Decoded object resource gs://%s/%s", blob.bucket, blob.name)
        return blob


class BlobInfoBuilder:
    """Accumulates the fields of a BlobInfo.

    Passing None to a clearable setter (cache_control, content_type,
    content_encoding, content_disposition, content_language, md5, crc32c)
    marks the field as cleared rather than leaving it unset.

    Builders are not thread-safe; use one per thread.
    """

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    def _set_field(self, name: str, value: Any) -> Self:
        """Store a raw BlobInfo field value, CLEARED included, without checks."""
        self._fields[name] = value
        return self

    def bucket(self, bucket: str) -> Self:
        """Set the bucket name.

        Raises:
            MissingFieldError: If bucket is None.
        """
        if bucket is None:
            raise MissingFieldError("bucket")
        self._fields["bucket"] = bucket
        return self

    def name(self, name: str) -> Self:
        """Set the object name.

        Raises:
            MissingFieldError: If name is None.
        """
        if name is None:
            raise MissingFieldError("name")
        self._fields["name"] = name
        return self

    def id(self, id: str | None) -> Self:  # noqa: A002
        self._fields["id"] = id
        return self

    def self_link(self, self_link: str | None) -> Self:
        self._fields["self_link"] = self_link
        return self

    def media_link(self, media_link: str | None) -> Self:
        self._fields["media_link"] = media_link
        return self

    def etag(self, etag: str | None) -> Self:
        self._fields["etag"] = etag
        return self

    def generation(self, generation: int | None) -> Self:
        self._fields["generation"] = generation
        return self

    def metageneration(self, metageneration: int | None) -> Self:
        self._fields["metageneration"] = metageneration
        return self

    def size(self, size: int | None) -> Self:
        self._fields["size"] = size
        return self

    def component_count(self, component_count: int | None) -> Self:
        self._fields["component_count"] = component_count
        return self

    def delete_time(self, millis: int | None) -> Self:
        self._fields["delete_time"] = millis
        return self

    def update_time(self, millis: int | None) -> Self:
        self._fields["update_time"] = millis
        return self

    def owner(self, owner: Entity | None) -> Self:
        self._fields["owner"] = owner
        return self

    def acl(self, acl: Iterable[Acl] | None) -> Self:
        self._fields["acl"] = tuple(acl) if acl is not None else None
        return self

    def metadata(self, metadata: Mapping[str, str] | None) -> Self:
        self._fields["metadata"] = dict(metadata) if metadata is not None else None
        return self

    def cache_control(self, cache_control: str | None) -> Self:
        self._fields["_cache_control"] = clearable(cache_control)
        return self

    def content_type(self, content_type: str | None) -> Self:
        self._fields["_content_type"] = clearable(content_type)
        return self

    def content_encoding(self, content_encoding: str | None) -> Self:
        self._fields["_content_encoding"] = clearable(content_encoding)
        return self

    def content_disposition(self, content_disposition: str | None) -> Self:
        self._fields["_content_disposition"] = clearable(content_disposition)
        return self

    def content_language(self, content_language: str | None) -> Self:
        self._fields["_content_language"] = clearable(content_language)
        return self

    def md5(self, md5: str | None) -> Self:
        self._fields["_md5"] = clearable(md5)
        return self

    def crc32c(self, crc32c: str | None) -> Self:
        self._fields["_crc32c"] = clearable(crc32c)
        return self

    def build(self) -> BlobInfo:
        """Create the BlobInfo.

        Raises:
            MissingFieldError: If bucket or name was never set.
        """
        if self._fields.get("bucket") is None:
            raise MissingFieldError("bucket")
        if self._fields.get("name") is None:
            raise MissingFieldError("name")
        return BlobInfo(**self._fields)
