"""Translate Kubernetes API payloads into domain objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcmirror.domain.model import (
    MirrorPeer,
    MirrorPeerSpec,
    MirrorPeerStatus,
    ObjectMeta,
    PeerRef,
    Secret,
    StorageClusterRef,
)

if TYPE_CHECKING:
    from .schema import MirrorPeerPayload, ObjectMetaPayload, PeerRefPayload, SecretPayload


def _object_meta(payload: ObjectMetaPayload) -> ObjectMeta:
    return ObjectMeta(name=payload.name, namespace=payload.namespace, labels=dict(payload.labels))


def _peer_ref(payload: PeerRefPayload) -> PeerRef:
    return PeerRef(
        cluster_name=payload.cluster_name,
        storage_cluster_ref=StorageClusterRef(
            name=payload.storage_cluster_ref.name,
            namespace=payload.storage_cluster_ref.namespace,
        ),
    )


def parse_mirror_peer(payload: MirrorPeerPayload) -> MirrorPeer:
    first, second = payload.spec.items
    status = payload.status
    return MirrorPeer(
        name=payload.metadata.name,
        spec=MirrorPeerSpec(
            items=(_peer_ref(first), _peer_ref(second)),
            mirroring_mode=payload.spec.mirroring_mode,
            scheduling_interval=payload.spec.scheduling_interval,
            replication_secret_name=payload.spec.replication_secret_name,
            manage_s3=payload.spec.manage_s3,
        ),
        status=MirrorPeerStatus(
            phase=status.phase if status else None,
            message=status.message if status else None,
        ),
    )


def parse_secret(payload: SecretPayload) -> Secret:
    return Secret(
        metadata=_object_meta(payload.metadata),
        type=payload.type,
        data=dict(payload.data) if payload.data is not None else None,
    )
