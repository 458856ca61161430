"""Account group entity."""

from dataclasses import dataclass

from hbledger.domain.constants import GROUP_FLAG_ARCHIVED
from hbledger.domain.errors import MissingFieldError
from hbledger.domain.models.enums import GroupStatus
from hbledger.domain.services.records import (
    Attributes,
    read_int,
    read_text,
    to_mapping,
)


@dataclass(frozen=True)
class Group:
    """A named group of accounts, either active or archived."""

    key: int
    name: str
    status: GroupStatus = GroupStatus.ACTIVE

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> "Group":
        raw = to_mapping(attributes)
        key = read_int(raw.get("key"))
        if key is None:
            raise MissingFieldError("group", "key", raw.get("key"))
        name = read_text(raw.get("name"))
        if name is None or not name.strip():
            raise MissingFieldError("group", "name", raw.get("name"))
        flags = read_int(raw.get("flags")) or 0
        status = (
            GroupStatus.ARCHIVED
            if flags & GROUP_FLAG_ARCHIVED
            else GroupStatus.ACTIVE
        )
        return cls(key=key, name=name, status=status)


__all__ = ["Group"]
