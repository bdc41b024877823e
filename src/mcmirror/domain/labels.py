"""Label taxonomy for exchange secrets.

Keys and values here are read and written by deployed clusters and must not
change.
"""

from __future__ import annotations

from typing import Final

from mcmirror.domain.model import Role, Secret

SECRET_LABEL_TYPE_KEY: Final[str] = "multicluster.odf.openshift.io/secret-type"
CREATED_BY_LABEL_KEY: Final[str] = "multicluster.odf.openshift.io/created-by"

NAMESPACE_KEY: Final[str] = "namespace"
STORAGE_CLUSTER_NAME_KEY: Final[str] = "storage-cluster-name"
SECRET_DATA_KEY: Final[str] = "secret-data"
SECRET_ORIGIN_KEY: Final[str] = "secret-origin"

MIRROR_PEER_SECRET: Final[str] = "mirrorpeersecret"
ROOK_ORIGIN: Final[str] = "rook"
RAMEN_HUB_OPERATOR_CONFIG_NAME: Final[str] = "ramen-hub-operator-config"


def role_of(secret: Secret) -> Role | None:
    """Return the parsed role tag, or ``None`` when absent or unrecognised."""

    return Role.parse(secret.labels.get(SECRET_LABEL_TYPE_KEY))


def is_secret_with_role(obj: object, role: Role) -> bool:
    if not isinstance(obj, Secret):
        return False
    return role_of(obj) is role


def is_source_secret(obj: object) -> bool:
    return is_secret_with_role(obj, Role.SOURCE)


def is_destination_secret(obj: object) -> bool:
    return is_secret_with_role(obj, Role.DESTINATION)


def is_internal_secret(obj: object) -> bool:
    return is_secret_with_role(obj, Role.INTERNAL)
