"""Domain event describing one committed change to warehouse data.

A :class:`ChangeEvent` is created by a mutation handler after its store write
has been committed. It lives only for the duration of a broadcast and is never
persisted. Connected clients treat it as a cache invalidation hint, not as
state to apply.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .article import Article
from .inventory_count import InventoryCount
from .order_line import OrderLine
from .user import User


class ChangeKind(str, Enum):
    """What happened to the resource."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    BULK_IMPORTED = "imported"
    DATA_CLEARED = "cleared"


class ResourceType(str, Enum):
    """Resource families that can change."""

    USER = "user"
    ARTICLE = "article"
    ORDER_LINE = "order_line"
    INVENTORY_COUNT = "inventory_count"

    @property
    def plural(self) -> str:
        return f"{self.value}s"


# Clearing all data wipes these resources; users are kept.
CLEARED_RESOURCES: tuple[ResourceType, ...] = (
    ResourceType.ARTICLE,
    ResourceType.ORDER_LINE,
    ResourceType.INVENTORY_COUNT,
)

DATA_CLEARED_EVENT_TYPE = "data_cleared"

# Named updates; each replaces the "updated" suffix of the wire name.
INVENTORIED_ACTION = "inventoried"
UPDATE_ACTIONS: frozenset[str] = frozenset({INVENTORIED_ACTION})


@dataclass(frozen=True)
class DeletedResource:
    """Identifier payload sent when a record is removed."""

    id: str
    article_id: str | None = None


Record = Union[User, Article, OrderLine, InventoryCount]
ChangePayload = Union[Record, tuple[Record, ...], DeletedResource, None]

_RECORD_TYPES: dict[ResourceType, type] = {
    ResourceType.USER: User,
    ResourceType.ARTICLE: Article,
    ResourceType.ORDER_LINE: OrderLine,
    ResourceType.INVENTORY_COUNT: InventoryCount,
}


@dataclass(frozen=True)
class ChangeEvent:
    """Immutable description of a committed mutation."""

    kind: ChangeKind
    resource_type: ResourceType | None
    payload: ChangePayload = None
    action: str | None = None

    def __post_init__(self) -> None:
        if self.action is not None and (
            self.kind is not ChangeKind.UPDATED or self.action not in UPDATE_ACTIONS
        ):
            raise ValueError(f"Unknown action {self.action!r} for a {self.kind.value} event")

        if self.kind is ChangeKind.DATA_CLEARED:
            if self.resource_type is not None or self.payload is not None:
                raise ValueError("A data-cleared event carries no resource or payload")
            return

        if self.resource_type is None:
            raise ValueError(f"A {self.kind.value} event requires a resource type")

        record_type = _RECORD_TYPES[self.resource_type]
        if self.kind is ChangeKind.DELETED:
            valid = isinstance(self.payload, DeletedResource)
        elif self.kind is ChangeKind.BULK_IMPORTED:
            valid = isinstance(self.payload, tuple) and all(
                isinstance(item, record_type) for item in self.payload
            )
        else:
            valid = isinstance(self.payload, record_type)
        if not valid:
            raise ValueError(
                f"Invalid payload for {self.kind.value} {self.resource_type.value} event"
            )

    @classmethod
    def created(cls, resource_type: ResourceType, record: Record) -> "ChangeEvent":
        return cls(ChangeKind.CREATED, resource_type, record)

    @classmethod
    def updated(
        cls, resource_type: ResourceType, record: Record, *, action: str | None = None
    ) -> "ChangeEvent":
        return cls(ChangeKind.UPDATED, resource_type, record, action=action)

    @classmethod
    def deleted(
        cls,
        resource_type: ResourceType,
        record_id: str,
        *,
        article_id: str | None = None,
    ) -> "ChangeEvent":
        return cls(
            ChangeKind.DELETED,
            resource_type,
            DeletedResource(id=record_id, article_id=article_id),
        )

    @classmethod
    def imported(cls, resource_type: ResourceType, records) -> "ChangeEvent":
        return cls(ChangeKind.BULK_IMPORTED, resource_type, tuple(records))

    @classmethod
    def data_cleared(cls) -> "ChangeEvent":
        return cls(ChangeKind.DATA_CLEARED, None)

    @property
    def event_type(self) -> str:
        """Return the wire name, e.g. ``inventory_count_created``."""

        if self.kind is ChangeKind.DATA_CLEARED:
            return DATA_CLEARED_EVENT_TYPE
        assert self.resource_type is not None
        if self.kind is ChangeKind.BULK_IMPORTED:
            return f"{self.resource_type.plural}_{self.kind.value}"
        suffix = self.action or self.kind.value
        return f"{self.resource_type.value}_{suffix}"


def parse_event_type(event_type: str) -> tuple[ChangeKind, ResourceType | None] | None:
    """Map a wire name back to its kind and resource type.

    Returns ``None`` for names this service never emits. Action names such as
    ``order_line_inventoried`` resolve to :attr:`ChangeKind.UPDATED`.
    """

    if event_type == DATA_CLEARED_EVENT_TYPE:
        return ChangeKind.DATA_CLEARED, None

    # Longest names first so that "inventory_count" wins over shorter prefixes.
    for resource_type in sorted(ResourceType, key=lambda item: -len(item.value)):
        imported_name = f"{resource_type.plural}_{ChangeKind.BULK_IMPORTED.value}"
        if event_type == imported_name:
            return ChangeKind.BULK_IMPORTED, resource_type

        prefix = f"{resource_type.value}_"
        if not event_type.startswith(prefix):
            continue
        suffix = event_type[len(prefix):]
        if not suffix:
            return None
        for kind in (ChangeKind.CREATED, ChangeKind.UPDATED, ChangeKind.DELETED):
            if suffix == kind.value:
                return kind, resource_type
        if suffix in UPDATE_ACTIONS:
            return ChangeKind.UPDATED, resource_type
        return None
    return None


__all__ = [
    "CLEARED_RESOURCES",
    "ChangeEvent",
    "ChangeKind",
    "ChangePayload",
    "DATA_CLEARED_EVENT_TYPE",
    "DeletedResource",
    "INVENTORIED_ACTION",
    "Record",
    "ResourceType",
    "UPDATE_ACTIONS",
    "parse_event_type",
]
