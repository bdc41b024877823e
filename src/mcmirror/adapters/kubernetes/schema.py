"""Pydantic models describing the Kubernetes API list payloads we consume."""

from __future__ import annotations

import base64
from collections.abc import Mapping
from logging import getLogger
from typing import Literal, cast

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from mcmirror.domain.model import (
    DEFAULT_REPLICATION_SECRET_NAME,
    DEFAULT_SCHEDULING_INTERVAL,
    MirroringMode,
)

log = getLogger(__name__)


class KubeBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ObjectMetaPayload(KubeBaseModel):
    name: str
    namespace: str = ""
    labels: dict[str, str] = Field(default_factory=dict)

    @field_validator("labels", mode="before")
    @classmethod
    def _null_labels(cls, value: object) -> object:
        return {} if value is None else value


class ListMetaPayload(KubeBaseModel):
    continue_token: str | None = Field(default=None, alias="continue")
    resource_version: str | None = Field(default=None, alias="resourceVersion")


class StorageClusterRefPayload(KubeBaseModel):
    name: str
    namespace: str


class PeerRefPayload(KubeBaseModel):
    cluster_name: str = Field(alias="clusterName")
    storage_cluster_ref: StorageClusterRefPayload = Field(alias="storageClusterRef")


class MirrorPeerSpecPayload(KubeBaseModel):
    items: list[PeerRefPayload] = Field(min_length=2, max_length=2)
    mirroring_mode: MirroringMode = Field(default=MirroringMode.SNAPSHOT, alias="mirroringMode")
    scheduling_interval: str = Field(
        default=DEFAULT_SCHEDULING_INTERVAL, alias="schedulingInterval"
    )
    replication_secret_name: str = Field(
        default=DEFAULT_REPLICATION_SECRET_NAME, alias="replicationSecretName"
    )
    manage_s3: bool = Field(default=False, alias="manageS3")


class MirrorPeerStatusPayload(KubeBaseModel):
    phase: str | None = None
    message: str | None = None


class MirrorPeerPayload(KubeBaseModel):
    metadata: ObjectMetaPayload
    spec: MirrorPeerSpecPayload
    status: MirrorPeerStatusPayload | None = None


class KubeListResponse(KubeBaseModel):
    metadata: ListMetaPayload = Field(default_factory=ListMetaPayload)


class MirrorPeerListResponse(KubeListResponse):
    kind: Literal["MirrorPeerList"] = "MirrorPeerList"
    items: list[MirrorPeerPayload] = Field(default_factory=list)


class SecretPayload(KubeBaseModel):
    metadata: ObjectMetaPayload
    type: str = "Opaque"
    data: dict[str, bytes] | None = None

    @field_validator("data", mode="before")
    @classmethod
    def _decode_data(cls, value: object, info: ValidationInfo) -> object:
        # The API serialises secret values as base64 strings. An undecodable
        # payload becomes None so the record fails validation on its own
        # instead of rejecting the whole list page.
        if not isinstance(value, Mapping):
            return value
        decoded: dict[str, bytes] = {}
        for key, encoded in cast(Mapping[str, object], value).items():
            try:
                decoded[key] = base64.b64decode(cast(str, encoded), validate=True)
            except (TypeError, ValueError):
                metadata = info.data.get("metadata")
                name = metadata.name if isinstance(metadata, ObjectMetaPayload) else None
                log.warning(f"Secret {name}: data value for {key!r} is not valid base64")
                return None
        return decoded


class SecretListResponse(KubeListResponse):
    kind: Literal["SecretList"] = "SecretList"
    items: list[SecretPayload] = Field(default_factory=list)


class StatusResponse(KubeBaseModel):
    kind: Literal["Status"]
    status: str | None = None
    message: str = ""
    reason: str | None = None
    code: int | None = None
