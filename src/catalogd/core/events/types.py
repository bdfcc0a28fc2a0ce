"""Change event type definitions."""

from enum import Enum

from catalogd.core.models.entity import EntityKind


class ChangeType(str, Enum):
    """All catalog mutation events."""

    MODULE_ADDED = "module_added"
    MODULE_DELETED = "module_deleted"
    TEMPLATE_ADDED = "template_added"
    TEMPLATE_DELETED = "template_deleted"

    @classmethod
    def added(cls, kind: EntityKind) -> "ChangeType":
        """Event type for an addition to the given collection."""
        return cls(f"{kind.value}_added")

    @classmethod
    def deleted(cls, kind: EntityKind) -> "ChangeType":
        """Event type for a removal from the given collection."""
        return cls(f"{kind.value}_deleted")

    @property
    def kind(self) -> EntityKind:
        """Collection this event refers to."""
        return EntityKind(self.value.split("_", 1)[0])
