"""Access control entries for buckets and objects.

An Acl pairs an Entity (who) with a Role (what they may do). Entities are
encoded on the wire as a single string such as ``user-jane@example.com``,
``group-admins@example.com``, ``domain-example.com``,
``project-owners-123456`` or ``allUsers``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Self

from storagekit.core.exceptions import MissingFieldError, UnknownAclRoleError


if TYPE_CHECKING:
    from storagekit.core.resources import (
        BucketAccessControlResource,
        ObjectAccessControlResource,
    )


logger = logging.getLogger(__name__)

_ALL_USERS = "allUsers"
_ALL_AUTHENTICATED_USERS = "allAuthenticatedUsers"


class Role(Enum):
    """Permission level granted by an access control entry."""

    OWNER = "OWNER"
    READER = "READER"
    WRITER = "WRITER"

    @classmethod
    def from_name(cls, name: str) -> Role:
        """Look up a role by its wire name.

        Raises:
            UnknownAclRoleError: If name is not a known role.
        """
        try:
            return cls[name]
        except KeyError as e:
            raise UnknownAclRoleError(name) from e


class EntityType(Enum):
    DOMAIN = "domain"
    GROUP = "group"
    USER = "user"
    PROJECT = "project"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class Entity:
    """Base class for ACL entities.

    Entity is abstract: construct one of User, Group, Domain, Project or
    RawEntity, or parse a wire string with Entity.from_wire().

    Attributes:
        value: The entity's identifying value (email, domain, ...).
    """

    type: ClassVar[EntityType] = EntityType.UNKNOWN

    value: str

    def __post_init__(self) -> None:
        if type(self) is Entity:
            raise TypeError(
                "Entity is abstract; use User, Group, Domain, Project or RawEntity"
            )
        if self.value is None:
            raise MissingFieldError("value")

    def to_wire(self) -> str:
        """Encode the entity as a JSON API entity string."""
        return f"{self.type.value}-{self.value}"

    @staticmethod
    def from_wire(entity: str) -> Entity:
        """Parse a JSON API entity string.

        Strings with an unrecognized shape are kept as a RawEntity.
        """
        if entity.startswith("user-"):
            return User(entity[5:])
        if entity == _ALL_USERS:
            return User.all_users()
        if entity == _ALL_AUTHENTICATED_USERS:
            return User.all_authenticated_users()
        if entity.startswith("group-"):
            return Group(entity[6:])
        if entity.startswith("domain-"):
            return Domain(entity[7:])
        if entity.startswith("project-"):
            role, sep, project_id = entity[8:].partition("-")
            if sep:
                try:
                    return Project(ProjectRole.from_wire(role), project_id)
                except ValueError:
                    pass
        logger.debug("Unrecognized ACL entity %r, keeping raw value", entity)
        return RawEntity(entity)

    def __str__(self) -> str:
        return self.to_wire()


@dataclass(frozen=True, slots=True)
class User(Entity):
    """A single user, identified by email.

    The special users ``allUsers`` and ``allAuthenticatedUsers`` are
    available as User.all_users() and User.all_authenticated_users().
    """

    type: ClassVar[EntityType] = EntityType.USER

    @property
    def email(self) -> str:
        return self.value

    @classmethod
    def all_users(cls) -> Self:
        return cls(_ALL_USERS)

    @classmethod
    def all_authenticated_users(cls) -> Self:
        return cls(_ALL_AUTHENTICATED_USERS)

    def to_wire(self) -> str:
        if self.value in (_ALL_USERS, _ALL_AUTHENTICATED_USERS):
            return self.value
        return f"user-{self.value}"


@dataclass(frozen=True, slots=True)
class Group(Entity):
    """A Google group, identified by email."""

    type: ClassVar[EntityType] = EntityType.GROUP

    @property
    def email(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Domain(Entity):
    """Everyone in a domain."""

    type: ClassVar[EntityType] = EntityType.DOMAIN

    @property
    def domain(self) -> str:
        return self.value


class ProjectRole(Enum):
    """Team of a project: owners, editors or viewers."""

    OWNERS = "owners"
    EDITORS = "editors"
    VIEWERS = "viewers"

    @classmethod
    def from_wire(cls, value: str) -> ProjectRole:
        return cls(value.lower())


@dataclass(frozen=True, slots=True, init=False)
class Project(Entity):
    """A team of a project.

    Attributes:
        project_role: Which team of the project.
        project_id: Project id or project number.
    """

    type: ClassVar[EntityType] = EntityType.PROJECT

    project_role: ProjectRole
    project_id: str

    def __init__(self, project_role: ProjectRole, project_id: str) -> None:
        object.__setattr__(self, "value", f"{project_role.value}-{project_id}")
        object.__setattr__(self, "project_role", project_role)
        object.__setattr__(self, "project_id", project_id)


@dataclass(frozen=True, slots=True)
class RawEntity(Entity):
    """An entity string this library does not recognize, passed through as-is."""

    def to_wire(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Acl:
    """An access control entry: an entity granted a role.

    Example:
        >>> acl = Acl(User("jane@example.com"), Role.READER)
        >>> acl.to_object_wire()
        {'entity': 'user-jane@example.com', 'role': 'READER'}
    """

    entity: Entity
    role: Role

    def __post_init__(self) -> None:
        if self.entity is None:
            raise MissingFieldError("entity")
        if self.role is None:
            raise MissingFieldError("role")

    def to_object_wire(self) -> ObjectAccessControlResource:
        """Encode as an objectAccessControls resource."""
        return {"entity": self.entity.to_wire(), "role": self.role.value}

    def to_bucket_wire(self) -> BucketAccessControlResource:
        """Encode as a bucketAccessControls resource."""
        return {"entity": self.entity.to_wire(), "role": self.role.value}

    @classmethod
    def from_wire(
        cls, resource: ObjectAccessControlResource | BucketAccessControlResource
    ) -> Self:
        """Decode an object or bucket access control resource.

        Raises:
            MissingFieldError: If the resource has no entity or role.
            UnknownAclRoleError: If the role is not a known role.
        """
        entity = resource.get("entity")
        if entity is None:
            raise MissingFieldError("entity")
        role = resource.get("role")
        if role is None:
            raise MissingFieldError("role")
        return cls(Entity.from_wire(entity), Role.from_name(role))
