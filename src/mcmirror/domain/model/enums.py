"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Role(StrEnum):
    """Role tag carried by an exchange secret.

    Values are the label values stored on the cluster and must stay verbatim.
    ``IGNORE`` is never stored on a secret; it asks validation to skip the
    role check.
    """

    SOURCE = "BLUE"
    DESTINATION = "GREEN"
    INTERNAL = "INTERNAL"
    IGNORE = "IGNORE"

    @classmethod
    def parse(cls, value: str | None) -> Role | None:
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class MirroringMode(StrEnum):
    SNAPSHOT = "snapshot"
    JOURNAL = "journal"
