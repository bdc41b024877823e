"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import MirrorPeerLister, SecretLister, fetch_all_mirror_peers

__all__ = ["MirrorPeerLister", "SecretLister", "fetch_all_mirror_peers"]
