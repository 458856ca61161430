"""File-level records: database properties and version."""

from dataclasses import dataclass

from hbledger.domain.services.records import (
    Attributes,
    read_id,
    read_int,
    read_text,
    to_mapping,
)


@dataclass(frozen=True)
class DbProperties:
    """Settings stored in the ``<properties>`` element."""

    title: str | None = None
    base_currency: int | None = None
    vehicle_category: int | None = None
    auto_schedule_mode: int | None = None
    auto_weekday: int | None = None

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> "DbProperties":
        raw = to_mapping(attributes)
        return cls(
            title=read_text(raw.get("title")),
            base_currency=read_id(raw.get("curr")),
            vehicle_category=read_id(raw.get("car_category")),
            auto_schedule_mode=read_int(raw.get("auto_smode")),
            auto_weekday=read_int(raw.get("auto_weekday")),
        )


@dataclass(frozen=True)
class DbVersion:
    """File and data versions from the root ``<homebank>`` element."""

    version: str | None = None
    data_version: str | None = None

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> "DbVersion":
        raw = to_mapping(attributes)
        return cls(
            version=read_text(raw.get("v")),
            data_version=read_text(raw.get("d")),
        )


__all__ = ["DbProperties", "DbVersion"]
