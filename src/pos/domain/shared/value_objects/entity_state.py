from enum import IntEnum


class EntityState(IntEnum):
    """Lifecycle state stored in the ``state`` column of every entity."""

    INACTIVE = 0
    ACTIVE = 1
