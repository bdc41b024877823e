from __future__ import annotations

import base64
from typing import TYPE_CHECKING

import httpx
import pytest

from mcmirror.adapters.kubernetes import MIRROR_PEERS_PATH, KubeApiError, KubeApiFetcher
from mcmirror.config import MissingConfigurationError
from mcmirror.domain.labels import SECRET_LABEL_TYPE_KEY
from mcmirror.domain.ports.fetching import fetch_all_mirror_peers

if TYPE_CHECKING:
    from collections.abc import Callable

    from mcmirror.adapters.http_resilience import ResilienceConfig, ResilientClient
    from mcmirror.config import KubeApiConfig

    type ClientFactoryBuilder = Callable[
        [Callable[[httpx.Request], httpx.Response]],
        Callable[[ResilienceConfig], ResilientClient],
    ]


def _mirror_peer(name: str) -> dict[str, object]:
    return {
        "metadata": {"name": name},
        "spec": {
            "items": [
                {
                    "clusterName": "east",
                    "storageClusterRef": {"name": "ocs", "namespace": "openshift-storage"},
                },
                {
                    "clusterName": "west",
                    "storageClusterRef": {"name": "ocs", "namespace": "openshift-storage"},
                },
            ]
        },
    }


def test_list_mirror_peers_follows_continue_tokens(
    kube_config: KubeApiConfig,
    mock_client_factory: ClientFactoryBuilder,
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        assert request.url.path == MIRROR_PEERS_PATH
        assert request.headers["Authorization"] == "Bearer test-token"
        if "continue" not in request.url.params:
            return httpx.Response(
                200,
                json={
                    "kind": "MirrorPeerList",
                    "metadata": {"continue": "page-2"},
                    "items": [_mirror_peer("first")],
                },
            )
        assert request.url.params["continue"] == "page-2"
        return httpx.Response(
            200,
            json={"kind": "MirrorPeerList", "metadata": {}, "items": [_mirror_peer("second")]},
        )

    fetcher = KubeApiFetcher(
        config=kube_config, page_size=1, client_factory=mock_client_factory(handler)
    )

    mirror_peers = fetch_all_mirror_peers(fetcher.list_mirror_peers)

    assert [mirror_peer.name for mirror_peer in mirror_peers] == ["first", "second"]
    assert len(seen) == 2
    assert seen[0].url.params["limit"] == "1"
    assert str(seen[0].url).startswith("https://api.test:6443/")


def test_list_secrets_passes_label_selector(
    kube_config: KubeApiConfig,
    mock_client_factory: ClientFactoryBuilder,
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/v1/namespaces/east/secrets"
        assert request.url.params["labelSelector"] == SECRET_LABEL_TYPE_KEY
        return httpx.Response(
            200,
            json={
                "kind": "SecretList",
                "items": [
                    {
                        "metadata": {
                            "name": "exchange",
                            "namespace": "east",
                            "labels": {SECRET_LABEL_TYPE_KEY: "GREEN"},
                        },
                        "data": {"secret-data": base64.b64encode(b"blob").decode()},
                    }
                ],
            },
        )

    fetcher = KubeApiFetcher(config=kube_config, client_factory=mock_client_factory(handler))

    secrets = fetcher.list_secrets(namespace="east", label_selector=SECRET_LABEL_TYPE_KEY)

    assert len(secrets) == 1
    assert secrets[0].data == {"secret-data": b"blob"}


def test_http_errors_propagate_unwrapped(
    kube_config: KubeApiConfig,
    mock_client_factory: ClientFactoryBuilder,
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            403,
            json={
                "kind": "Status",
                "status": "Failure",
                "message": "mirrorpeers is forbidden",
                "reason": "Forbidden",
                "code": 403,
            },
        )

    fetcher = KubeApiFetcher(config=kube_config, client_factory=mock_client_factory(handler))

    with pytest.raises(httpx.HTTPStatusError) as exc:
        fetch_all_mirror_peers(fetcher.list_mirror_peers)

    assert exc.value.response.status_code == 403


def test_status_payload_with_success_code_raises_api_error(
    kube_config: KubeApiConfig,
    mock_client_factory: ClientFactoryBuilder,
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={"kind": "Status", "message": "expired", "reason": "Expired", "code": 410}
        )

    fetcher = KubeApiFetcher(config=kube_config, client_factory=mock_client_factory(handler))

    with pytest.raises(KubeApiError, match="expired") as exc:
        fetcher.list_mirror_peers()

    assert exc.value.code == 410
    assert exc.value.reason == "Expired"


def test_unexpected_payload_raises_api_error(
    kube_config: KubeApiConfig,
    mock_client_factory: ClientFactoryBuilder,
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>proxy</html>")

    fetcher = KubeApiFetcher(config=kube_config, client_factory=mock_client_factory(handler))

    with pytest.raises(KubeApiError, match="Unexpected list payload"):
        fetcher.list_secrets(namespace="east")


def test_fetcher_requires_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("KUBE_API_SERVER", raising=False)
    monkeypatch.delenv("KUBE_API_TOKEN", raising=False)

    with pytest.raises(MissingConfigurationError):
        KubeApiFetcher()
