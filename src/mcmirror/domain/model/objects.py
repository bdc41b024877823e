"""Minimal cluster object shapes the engine reads and builds."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

SECRET_TYPE_OPAQUE: Final[str] = "Opaque"


@dataclass(frozen=True, slots=True)
class NamespacedName:
    name: str
    namespace: str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass(slots=True, kw_only=True)
class ObjectMeta:
    name: str
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict[str, str])

    @property
    def namespaced_name(self) -> NamespacedName:
        return NamespacedName(name=self.name, namespace=self.namespace)


@dataclass(slots=True, kw_only=True)
class Secret:
    """Exchange record: labelled, namespaced key/value payload of raw bytes.

    ``data`` is ``None`` when the object carries no payload map at all, which
    validation treats differently from an empty map.
    """

    metadata: ObjectMeta
    data: dict[str, bytes] | None = None
    type: str = SECRET_TYPE_OPAQUE

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    @property
    def labels(self) -> dict[str, str]:
        return self.metadata.labels


@dataclass(slots=True, kw_only=True)
class ConfigMap:
    metadata: ObjectMeta
    data: dict[str, str] = field(default_factory=dict[str, str])

