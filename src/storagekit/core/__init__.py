"""Core domain module for storagekit.

This module contains the resource models and their wire conversions.
It has no I/O dependencies and can be tested in isolation.
"""

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
from storagekit.core.http_method import HttpMethod
from storagekit.core.wire import CLEARED


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
    "Origin",
    "Project",
    "ProjectRole",
    "RawEntity",
    "Role",
    "User",
]
