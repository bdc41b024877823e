"""Public domain model surface."""

from __future__ import annotations

from mcmirror.domain.model.enums import MirroringMode, Role
from mcmirror.domain.model.mirror_peer import (
    DEFAULT_REPLICATION_SECRET_NAME,
    DEFAULT_SCHEDULING_INTERVAL,
    MirrorPeer,
    MirrorPeerSpec,
    MirrorPeerStatus,
    PeerRef,
    StorageClusterRef,
)
from mcmirror.domain.model.objects import (
    SECRET_TYPE_OPAQUE,
    ConfigMap,
    NamespacedName,
    ObjectMeta,
    Secret,
)

__all__ = [  # noqa: RUF022
    # enums
    "MirroringMode",
    "Role",
    # cluster objects
    "SECRET_TYPE_OPAQUE",
    "ConfigMap",
    "NamespacedName",
    "ObjectMeta",
    "Secret",
    # peering
    "DEFAULT_REPLICATION_SECRET_NAME",
    "DEFAULT_SCHEDULING_INTERVAL",
    "MirrorPeer",
    "MirrorPeerSpec",
    "MirrorPeerStatus",
    "PeerRef",
    "StorageClusterRef",
]
