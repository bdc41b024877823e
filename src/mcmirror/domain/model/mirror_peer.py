"""Peer references and the MirrorPeer declaration they belong to.

``PeerRef`` values are derived, never stored by the engine: two refs are the
same peer when their three leaf strings match.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from mcmirror.domain.model.enums import MirroringMode

DEFAULT_SCHEDULING_INTERVAL: Final[str] = "5m"
DEFAULT_REPLICATION_SECRET_NAME: Final[str] = "rook-csi-rbd-provisioner"
PEER_COUNT: Final[int] = 2


@dataclass(frozen=True, slots=True)
class StorageClusterRef:
    name: str
    namespace: str


@dataclass(frozen=True, slots=True)
class PeerRef:
    cluster_name: str
    storage_cluster_ref: StorageClusterRef


@dataclass(frozen=True, slots=True, kw_only=True)
class MirrorPeerSpec:
    items: tuple[PeerRef, PeerRef]
    mirroring_mode: MirroringMode = MirroringMode.SNAPSHOT
    scheduling_interval: str = DEFAULT_SCHEDULING_INTERVAL
    replication_secret_name: str = DEFAULT_REPLICATION_SECRET_NAME
    manage_s3: bool = False

    def __post_init__(self) -> None:
        if len(self.items) != PEER_COUNT:
            raise ValueError(
                f"MirrorPeer spec requires exactly {PEER_COUNT} peer refs, got {len(self.items)}"
            )


@dataclass(slots=True, kw_only=True)
class MirrorPeerStatus:
    phase: str | None = None
    message: str | None = None


@dataclass(slots=True, kw_only=True)
class MirrorPeer:
    name: str
    spec: MirrorPeerSpec
    status: MirrorPeerStatus = field(default_factory=MirrorPeerStatus)

    def contains(self, peer_ref: PeerRef) -> bool:
        return peer_ref in self.spec.items
