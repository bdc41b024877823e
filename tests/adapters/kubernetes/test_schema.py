from __future__ import annotations

import base64
import logging

import pytest
from pydantic import ValidationError

from mcmirror.adapters.kubernetes import (
    MirrorPeerListResponse,
    SecretListResponse,
    parse_mirror_peer,
    parse_secret,
)
from mcmirror.domain.labels import SECRET_LABEL_TYPE_KEY, is_source_secret
from mcmirror.domain.model import MirroringMode, PeerRef, StorageClusterRef
from mcmirror.domain.peering import find_matching_secret, peer_ref_from_secret


def _peer(cluster: str) -> dict[str, object]:
    return {
        "clusterName": cluster,
        "storageClusterRef": {"name": "ocs-storagecluster", "namespace": "openshift-storage"},
    }


def _b64(value: str) -> str:
    return base64.b64encode(value.encode()).decode()


def test_mirror_peer_defaults_follow_crd() -> None:
    response = MirrorPeerListResponse.model_validate(
        {
            "kind": "MirrorPeerList",
            "items": [
                {"metadata": {"name": "mp"}, "spec": {"items": [_peer("east"), _peer("west")]}}
            ],
        }
    )

    mirror_peer = parse_mirror_peer(response.items[0])

    assert mirror_peer.name == "mp"
    assert mirror_peer.spec.mirroring_mode is MirroringMode.SNAPSHOT
    assert mirror_peer.spec.scheduling_interval == "5m"
    assert mirror_peer.spec.replication_secret_name == "rook-csi-rbd-provisioner"
    assert mirror_peer.spec.manage_s3 is False
    assert mirror_peer.status.phase is None
    assert mirror_peer.spec.items[0] == PeerRef(
        cluster_name="east",
        storage_cluster_ref=StorageClusterRef(
            name="ocs-storagecluster", namespace="openshift-storage"
        ),
    )


def test_mirror_peer_explicit_values() -> None:
    response = MirrorPeerListResponse.model_validate(
        {
            "items": [
                {
                    "metadata": {"name": "mp"},
                    "spec": {
                        "items": [_peer("east"), _peer("west")],
                        "mirroringMode": "journal",
                        "schedulingInterval": "1h",
                        "replicationSecretName": "custom",
                        "manageS3": True,
                    },
                    "status": {"phase": "ExchangedSecret", "message": "ok"},
                }
            ],
            "metadata": {"continue": "token-1"},
        }
    )

    mirror_peer = parse_mirror_peer(response.items[0])

    assert response.metadata.continue_token == "token-1"
    assert mirror_peer.spec.mirroring_mode is MirroringMode.JOURNAL
    assert mirror_peer.spec.scheduling_interval == "1h"
    assert mirror_peer.spec.replication_secret_name == "custom"
    assert mirror_peer.spec.manage_s3 is True
    assert mirror_peer.status.phase == "ExchangedSecret"


@pytest.mark.parametrize("count", [1, 3])
def test_mirror_peer_requires_exactly_two_items(count: int) -> None:
    items = [_peer(f"c{i}") for i in range(count)]

    with pytest.raises(ValidationError):
        MirrorPeerListResponse.model_validate(
            {"items": [{"metadata": {"name": "mp"}, "spec": {"items": items}}]}
        )


def test_mirror_peer_rejects_unknown_mode() -> None:
    with pytest.raises(ValidationError):
        MirrorPeerListResponse.model_validate(
            {
                "items": [
                    {
                        "metadata": {"name": "mp"},
                        "spec": {"items": [_peer("a"), _peer("b")], "mirroringMode": "async"},
                    }
                ]
            }
        )


def test_secret_data_is_base64_decoded() -> None:
    response = SecretListResponse.model_validate(
        {
            "kind": "SecretList",
            "items": [
                {
                    "metadata": {
                        "name": "exchange",
                        "namespace": "east",
                        "labels": {SECRET_LABEL_TYPE_KEY: "BLUE"},
                    },
                    "type": "Opaque",
                    "data": {
                        "namespace": _b64("openshift-storage"),
                        "storage-cluster-name": _b64("ocs-storagecluster"),
                        "secret-origin": _b64("rook"),
                        "secret-data": _b64("{}"),
                    },
                }
            ],
        }
    )

    secret = parse_secret(response.items[0])

    assert secret.data is not None
    assert secret.data["secret-origin"] == b"rook"
    assert is_source_secret(secret)
    assert peer_ref_from_secret(secret).cluster_name == "east"


def test_secret_without_data_or_labels() -> None:
    response = SecretListResponse.model_validate(
        {"items": [{"metadata": {"name": "bare", "namespace": "east", "labels": None}}]}
    )

    secret = parse_secret(response.items[0])

    assert secret.data is None
    assert secret.labels == {}


@pytest.mark.parametrize("bad_value", ["%%%", 42, "ünïcode"])
def test_secret_with_undecodable_data_keeps_the_page(
    bad_value: object, caplog: pytest.LogCaptureFixture
) -> None:
    good_data = {
        "namespace": _b64("openshift-storage"),
        "storage-cluster-name": _b64("ocs-storagecluster"),
        "secret-origin": _b64("rook"),
        "secret-data": _b64("{}"),
    }
    with caplog.at_level(logging.WARNING, logger="mcmirror.adapters.kubernetes.schema"):
        response = SecretListResponse.model_validate(
            {
                "items": [
                    {
                        "metadata": {"name": "bad", "namespace": "east"},
                        "data": {"secret-data": bad_value},
                    },
                    {"metadata": {"name": "good", "namespace": "east"}, "data": good_data},
                ]
            }
        )

    bad, good = (parse_secret(item) for item in response.items)

    assert bad.data is None
    assert good.data is not None
    assert "bad" in caplog.text
    assert "not valid base64" in caplog.text
    assert find_matching_secret(peer_ref_from_secret(good), [bad, good]) is good
