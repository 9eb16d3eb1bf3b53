"""storagekit - Immutable models for cloud object-storage resources.

This library provides value objects for bucket and object metadata, CORS
rules and access control entries, each built through a builder and
converted to and from the storage JSON API's resource format.

Example:
    >>> from storagekit import BlobInfo
    >>> blob = BlobInfo.builder("my-bucket", "data.csv").content_type(None).build()
    >>> blob.content_type is None
    True
    >>> blob.to_wire()
    {'bucket': 'my-bucket', 'name': 'data.csv', 'contentType': None}
"""

from storagekit.config import StorageOptions
from storagekit.core.acl import (
    Acl,
    Domain,
    Entity,
    Group,
    Project,
    ProjectRole,
    RawEntity,
    Role,
    User,
)
from storagekit.core.blob_info import BlobInfo, BlobInfoBuilder
from storagekit.core.bucket_info import BucketInfo, BucketInfoBuilder
from storagekit.core.cors import Cors, CorsBuilder, Origin
from storagekit.core.exceptions import (
    InvalidOriginError,
    MissingFieldError,
    ResourceLoadError,
    StoragekitError,
    UnknownAclRoleError,
    UnknownHttpMethodError,
    WireFormatError,
)
from storagekit.core.http_method import HttpMethod
from storagekit.core.wire import CLEARED
from storagekit.loading import load_resource


__version__ = "0.1.0"

__all__ = [
    "CLEARED",
    "Acl",
    "BlobInfo",
    "BlobInfoBuilder",
    "BucketInfo",
    "BucketInfoBuilder",
    "Cors",
    "CorsBuilder",
    "Domain",
    "Entity",
    "Group",
    "HttpMethod",
    "InvalidOriginError",
    "MissingFieldError",
    "Origin",
    "Project",
    "ProjectRole",
    "RawEntity",
    "ResourceLoadError",
    "Role",
    "StorageOptions",
    "StoragekitError",
    "UnknownAclRoleError",
    "UnknownHttpMethodError",
    "User",
    "WireFormatError",
    "__version__",
    "load_resource",
]
