"""Construct exchange secrets in the shape validation expects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcmirror.domain.labels import (
    NAMESPACE_KEY,
    SECRET_DATA_KEY,
    SECRET_LABEL_TYPE_KEY,
    SECRET_ORIGIN_KEY,
    STORAGE_CLUSTER_NAME_KEY,
)
from mcmirror.domain.model import SECRET_TYPE_OPAQUE, ObjectMeta, Role, Secret

if TYPE_CHECKING:
    from mcmirror.domain.model import NamespacedName


def create_internal_secret(
    secret_ref: NamespacedName,
    storage_cluster_ref: NamespacedName,
    role: Role,
    secret_data: bytes,
    secret_origin: str,
) -> Secret:
    if role is Role.IGNORE:
        raise ValueError("Role.IGNORE cannot be stored on a secret")
    return Secret(
        metadata=ObjectMeta(
            name=secret_ref.name,
            namespace=secret_ref.namespace,
            labels={SECRET_LABEL_TYPE_KEY: str(role)},
        ),
        type=SECRET_TYPE_OPAQUE,
        data={
            SECRET_DATA_KEY: secret_data,
            NAMESPACE_KEY: storage_cluster_ref.namespace.encode("utf-8"),
            STORAGE_CLUSTER_NAME_KEY: storage_cluster_ref.name.encode("utf-8"),
            SECRET_ORIGIN_KEY: secret_origin.encode("utf-8"),
        },
    )


def create_source_secret(
    secret_ref: NamespacedName,
    storage_cluster_ref: NamespacedName,
    secret_data: bytes,
    secret_origin: str,
) -> Secret:
    return create_internal_secret(
        secret_ref, storage_cluster_ref, Role.SOURCE, secret_data, secret_origin
    )


def create_destination_secret(
    secret_ref: NamespacedName,
    storage_cluster_ref: NamespacedName,
    secret_data: bytes,
    secret_origin: str,
) -> Secret:
    return create_internal_secret(
        secret_ref, storage_cluster_ref, Role.DESTINATION, secret_data, secret_origin
    )
