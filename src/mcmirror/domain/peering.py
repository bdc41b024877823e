"""Derive peer references from exchange secrets and correlate them.

Clusters share no database, so a secret produced on one cluster is matched to
its counterpart elsewhere purely by the peer reference its payload encodes.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, cast

from mcmirror.domain.labels import NAMESPACE_KEY, STORAGE_CLUSTER_NAME_KEY
from mcmirror.domain.model import PeerRef, Role, StorageClusterRef
from mcmirror.domain.validation import RecordInvalidError, validate_internal_secret

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mcmirror.domain.model import MirrorPeer, Secret

log = getLogger(__name__)


def peer_ref_from_secret(secret: Secret | None) -> PeerRef:
    """Build the ``PeerRef`` a secret describes, whatever its role.

    Raises ``RecordInvalidError`` unchanged from validation.
    """

    validate_internal_secret(secret, Role.IGNORE)
    validated = cast("Secret", secret)
    data = cast("dict[str, bytes]", validated.data)
    return PeerRef(
        cluster_name=validated.namespace,
        storage_cluster_ref=StorageClusterRef(
            name=data[STORAGE_CLUSTER_NAME_KEY].decode("utf-8", "surrogateescape"),
            namespace=data[NAMESPACE_KEY].decode("utf-8", "surrogateescape"),
        ),
    )


def find_matching_secret(
    peer_ref: PeerRef,
    secrets: Iterable[Secret | None],
) -> Secret | None:
    """Return the first secret, in input order, whose peer ref equals ``peer_ref``.

    Malformed candidates are logged and skipped; they never abort the scan.
    """

    for secret in secrets:
        try:
            candidate = peer_ref_from_secret(secret)
        except RecordInvalidError as exc:
            name = secret.metadata.namespaced_name if secret is not None else None
            log.debug("Skipping secret %s: %s", name, exc)
            continue
        if candidate == peer_ref:
            return secret
    return None


def peer_refs_for(mirror_peer: MirrorPeer, cluster_name: str) -> tuple[PeerRef, ...]:
    return tuple(ref for ref in mirror_peer.spec.items if ref.cluster_name == cluster_name)


def find_mirror_peers_for(
    peer_ref: PeerRef,
    mirror_peers: Iterable[MirrorPeer],
) -> list[MirrorPeer]:
    return [mirror_peer for mirror_peer in mirror_peers if mirror_peer.contains(peer_ref)]
