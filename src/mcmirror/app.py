"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from mcmirror.adapters.kubernetes import KubeApiFetcher
from mcmirror.domain.labels import SECRET_LABEL_TYPE_KEY
from mcmirror.domain.peering import find_matching_secret, find_mirror_peers_for
from mcmirror.domain.ports.fetching import fetch_all_mirror_peers

if TYPE_CHECKING:
    from mcmirror.domain.model import MirrorPeer, PeerRef, Secret
    from mcmirror.domain.ports.fetching import MirrorPeerLister, SecretLister


log = getLogger(__name__)


def list_mirror_peers(*, lister: MirrorPeerLister | None = None) -> list[MirrorPeer]:
    """Return every MirrorPeer declared on the configured cluster."""

    effective_lister = lister or KubeApiFetcher().list_mirror_peers
    mirror_peers = fetch_all_mirror_peers(effective_lister)
    log.info("Fetched %s mirror peers", len(mirror_peers))
    return mirror_peers


def match_peer_secret(
    peer_ref: PeerRef,
    *,
    namespace: str,
    lister: SecretLister | None = None,
    only_labelled: bool = True,
) -> Secret | None:
    """Find the exchange secret in ``namespace`` that describes ``peer_ref``."""

    effective_lister = lister or KubeApiFetcher().list_secrets
    selector = SECRET_LABEL_TYPE_KEY if only_labelled else None
    secrets = effective_lister(namespace=namespace, label_selector=selector)
    match = find_matching_secret(peer_ref, secrets)
    if match is None:
        log.info(
            "No secret in %s matches %s (%s candidates)", namespace, peer_ref, len(secrets)
        )
    else:
        log.info("Secret %s matches %s", match.metadata.namespaced_name, peer_ref)
    return match


def mirror_peers_for(
    peer_ref: PeerRef,
    *,
    lister: MirrorPeerLister | None = None,
) -> list[MirrorPeer]:
    return find_mirror_peers_for(peer_ref, list_mirror_peers(lister=lister))
