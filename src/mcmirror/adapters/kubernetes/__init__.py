"""Public interface for the Kubernetes API adapter."""

from __future__ import annotations

from .client import MIRROR_PEERS_PATH, KubeApiError, KubeApiFetcher, secrets_path
from .schema import MirrorPeerListResponse, SecretListResponse
from .translator import parse_mirror_peer, parse_secret

__all__ = [
    "MIRROR_PEERS_PATH",
    "KubeApiError",
    "KubeApiFetcher",
    "MirrorPeerListResponse",
    "SecretListResponse",
    "parse_mirror_peer",
    "parse_secret",
    "secrets_path",
]
