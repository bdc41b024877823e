"""Deterministic, fixed-length names derived from ordered components."""

from __future__ import annotations

import hashlib
from typing import Final

NAME_DELIMITER: Final[str] = "-"
# Downstream object names are short; 39 hex chars of the digest are kept.
SECRET_NAME_LENGTH: Final[int] = 39


def unique_name(*components: str) -> str:
    """Return the lowercase hex SHA-512 digest of the ``-``-joined components."""

    joined = NAME_DELIMITER.join(components)
    return hashlib.sha512(joined.encode("utf-8")).hexdigest()


def unique_secret_name(
    managed_cluster: str,
    storage_cluster_namespace: str,
    storage_cluster_name: str,
    *prefix: str,
) -> str:
    """Return a 39-character name for a secret tied to one storage cluster.

    Only the first ``prefix`` value is used. Passing no prefix and passing an
    empty-string prefix hash different inputs.
    """

    if prefix:
        digest = unique_name(
            prefix[0], managed_cluster, storage_cluster_namespace, storage_cluster_name
        )
    else:
        digest = unique_name(managed_cluster, storage_cluster_namespace, storage_cluster_name)
    return digest[:SECRET_NAME_LENGTH]
