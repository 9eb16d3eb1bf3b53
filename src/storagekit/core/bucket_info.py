"""Bucket metadata."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Self

from storagekit.core.acl import Acl, Entity
from storagekit.core.cors import Cors
from storagekit.core.exceptions import MissingFieldError
from storagekit.core.wire import (
    int64_from_wire,
    int64_to_wire,
    millis_to_rfc3339,
    rfc3339_to_millis,
)


if TYPE_CHECKING:
    from storagekit.core.resources import BucketResource


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class BucketInfo:
    """Metadata of a bucket.

    Only ``name`` is required. The remaining fields are either settable by
    users (location, storage class, CORS, ACLs, website pages, versioning)
    or assigned by the service (id, self link, owner, etag, creation time,
    metageneration).

    Two BucketInfo values are equal when their wire resources are equal.
    """

    name: str
    id: str | None = None
    self_link: str | None = None
    owner: Entity | None = None
    etag: str | None = None
    location: str | None = None
    storage_class: str | None = None
    versioning_enabled: bool | None = None
    index_page: str | None = None
    not_found_page: str | None = None
    create_time: int | None = None
    metageneration: int | None = None
    cors: tuple[Cors, ...] | None = None
    acl: tuple[Acl, ...] | None = None
    default_acl: tuple[Acl, ...] | None = None

    def __post_init__(self) -> None:
        if self.name is None:
            raise MissingFieldError("name")
        for name in ("cors", "acl", "default_acl"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    @staticmethod
    def of(name: str) -> BucketInfo:
        return BucketInfo.builder(name).build()

    @staticmethod
    def builder(name: str) -> BucketInfoBuilder:
        return BucketInfoBuilder().name(name)

    def to_builder(self) -> BucketInfoBuilder:
        """Return a builder holding this bucket's fields."""
        builder = BucketInfoBuilder()
        for f in fields(self):
            builder._set_field(f.name, getattr(self, f.name))
        return builder

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BucketInfo):
            return NotImplemented
        return self.to_wire() == other.to_wire()

    def __hash__(self) -> int:
        return hash(self.name)

    def to_wire(self) -> BucketResource:
        """Encode as a ``buckets`` resource."""
        resource: BucketResource = {"name": self.name}
        if self.id is not None:
            resource["id"] = self.id
        if self.self_link is not None:
            resource["selfLink"] = self.self_link
        if self.owner is not None:
            resource["owner"] = {"entity": self.owner.to_wire()}
        if self.etag is not None:
            resource["etag"] = self.etag
        if self.location is not None:
            resource["location"] = self.location
        if self.storage_class is not None:
            resource["storageClass"] = self.storage_class
        if self.versioning_enabled is not None:
            resource["versioning"] = {"enabled": self.versioning_enabled}
        if self.index_page is not None or self.not_found_page is not None:
            website: dict[str, str] = {}
            resource["website"] = website  # type: ignore[typeddict-item]
            if self.index_page is not None:
                website["mainPageSuffix"] = self.index_page
            if self.not_found_page is not None:
                website["notFoundPage"] = self.not_found_page
        if self.create_time is not None:
            resource["timeCreated"] = millis_to_rfc3339(
                self.create_time, "timeCreated"
            )
        if self.metageneration is not None:
            resource["metageneration"] = int64_to_wire(self.metageneration)
        if self.cors is not None:
            resource["cors"] = [cors.to_wire() for cors in self.cors]
        if self.acl is not None:
            resource["acl"] = [acl.to_bucket_wire() for acl in self.acl]
        if self.default_acl is not None:
            resource["defaultObjectAcl"] = [
                acl.to_object_wire() for acl in self.default_acl
            ]
        return resource

    @staticmethod
    def from_wire(resource: BucketResource) -> BucketInfo:
        """Decode a ``buckets`` resource.

        Raises:
            MissingFieldError: If the resource has no name.
            WireFormatError: If a timestamp or integer field is malformed.
        """
        builder = (
            BucketInfoBuilder()
            .name(resource.get("name"))  # type: ignore[arg-type]
            .id(resource.get("id"))
            .self_link(resource.get("selfLink"))
            .etag(resource.get("etag"))
            .location(resource.get("location"))
            .storage_class(resource.get("storageClass"))
        )
        owner = resource.get("owner")
        if owner is not None and owner.get("entity") is not None:
            builder.owner(Entity.from_wire(owner["entity"]))
        versioning = resource.get("versioning")
        if versioning is not None:
            builder.versioning_enabled(versioning.get("enabled"))
        website = resource.get("website")
        if website is not None:
            builder.index_page(website.get("mainPageSuffix"))
            builder.not_found_page(website.get("notFoundPage"))
        if resource.get("timeCreated") is not None:
            builder.create_time(
                rfc3339_to_millis(resource["timeCreated"], "timeCreated")
            )
        if resource.get("metageneration") is not None:
            builder.metageneration(
                int64_from_wire(resource["metageneration"], "metageneration")
            )
        if resource.get("cors") is not None:
            builder.cors(map(Cors.from_wire, resource["cors"]))
        if resource.get("acl") is not None:
            builder.acl(map(Acl.from_wire, resource["acl"]))
        if resource.get("defaultObjectAcl") is not None:
            builder.default_acl(map(Acl.from_wire, resource["defaultObjectAcl"]))
        bucket = builder.build()
        logger.debug("Decoded bucket resource %s", bucket.name)
        return bucket


class BucketInfoBuilder:
    """Accumulates the fields of a BucketInfo."""

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    def _set_field(self, name: str, value: Any) -> Self:
        """Store a raw BucketInfo field value without checks."""
        self._fields[name] = value
        return self

    def name(self, name: str) -> Self:
        """Set the bucket name.

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

    def owner(self, owner: Entity | None) -> Self:
        self._fields["owner"] = owner
        return self

    def etag(self, etag: str | None) -> Self:
        self._fields["etag"] = etag
        return self

    def location(self, location: str | None) -> Self:
        self._fields["location"] = location
        return self

    def storage_class(self, storage_class: str | None) -> Self:
        self._fields["storage_class"] = storage_class
        return self

    def versioning_enabled(self, enabled: bool | None) -> Self:
        self._fields["versioning_enabled"] = enabled
        return self

    def index_page(self, index_page: str | None) -> Self:
        self._fields["index_page"] = index_page
        return self

    def not_found_page(self, not_found_page: str | None) -> Self:
        self._fields["not_found_page"] = not_found_page
        return self

    def create_time(self, millis: int | None) -> Self:
        self._fields["create_time"] = millis
        return self

    def metageneration(self, metageneration: int | None) -> Self:
        self._fields["metageneration"] = metageneration
        return self

    def cors(self, cors: Iterable[Cors] | None) -> Self:
        self._fields["cors"] = tuple(cors) if cors is not None else None
        return self

    def acl(self, acl: Iterable[Acl] | None) -> Self:
        self._fields["acl"] = tuple(acl) if acl is not None else None
        return self

    def default_acl(self, acl: Iterable[Acl] | None) -> Self:
        self._fields["default_acl"] = tuple(acl) if acl is not None else None
        return self

    def build(self) -> BucketInfo:
        """Create the BucketInfo.

        Raises:
            MissingFieldError: If no name was set.
        """
        if self._fields.get("name") is None:
            raise MissingFieldError("name")
        return BucketInfo(**self._fields)
