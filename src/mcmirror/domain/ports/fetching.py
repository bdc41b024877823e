"""Ports for reading objects from a cluster's object API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mcmirror.domain.model import MirrorPeer, Secret


@runtime_checkable
class MirrorPeerLister(Protocol):
    """Callable port returning every declared MirrorPeer."""

    def __call__(self) -> Sequence[MirrorPeer]: ...


@runtime_checkable
class SecretLister(Protocol):
    """Callable port returning secrets of one namespace."""

    def __call__(
        self,
        *,
        namespace: str,
        label_selector: str | None = None,
    ) -> Sequence[Secret]: ...


def fetch_all_mirror_peers(lister: MirrorPeerLister) -> list[MirrorPeer]:
    """Return all MirrorPeers; lister errors propagate untouched."""

    return list(lister())


__all__ = ["MirrorPeerLister", "SecretLister", "fetch_all_mirror_peers"]
