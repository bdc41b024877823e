"""Read-only client for the cluster object API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from mcmirror.adapters.http_resilience import ResilienceConfig, ResilientClient
from mcmirror.config import KubeApiConfig, get_kube_api_config
from mcmirror.domain.ports.fetching import MirrorPeerLister, SecretLister

from .schema import (
    KubeListResponse,
    MirrorPeerListResponse,
    SecretListResponse,
    StatusResponse,
)
from .translator import parse_mirror_peer, parse_secret

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from mcmirror.domain.model import MirrorPeer, Secret

log = getLogger(__name__)

MIRROR_PEERS_PATH: Final[str] = "/apis/multicluster.odf.openshift.io/v1alpha1/mirrorpeers"
DEFAULT_PAGE_SIZE: Final[int] = 500


def secrets_path(namespace: str) -> str:
    return f"/api/v1/namespaces/{namespace}/secrets"


class KubeApiError(RuntimeError):
    """Raised when the API answers with a Status object or an unexpected payload."""

    def __init__(self, message: str, *, code: int | None = None, reason: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.reason = reason


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class KubeApiFetcher:
    """Lists MirrorPeers and Secrets, following ``continue`` tokens to the end.

    HTTP errors are not retried or wrapped here beyond what the transport's
    retry policy already does; they reach the caller as ``httpx`` exceptions.
    """

    config: KubeApiConfig = field(default_factory=get_kube_api_config)
    page_size: int = DEFAULT_PAGE_SIZE
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def list_mirror_peers(self) -> list[MirrorPeer]:
        pages = asyncio.run(self._list_async(MIRROR_PEERS_PATH, MirrorPeerListResponse))
        return [parse_mirror_peer(item) for page in pages for item in page.items]

    def list_secrets(
        self,
        *,
        namespace: str,
        label_selector: str | None = None,
    ) -> list[Secret]:
        pages = asyncio.run(
            self._list_async(
                secrets_path(namespace),
                SecretListResponse,
                label_selector=label_selector,
            )
        )
        return [parse_secret(item) for page in pages for item in page.items]

    async def _list_async[TList: KubeListResponse](
        self,
        path: str,
        response_model: type[TList],
        *,
        label_selector: str | None = None,
    ) -> list[TList]:
        pages: list[TList] = []
        continue_token: str | None = None
        async with self.client_factory(self.config.resilience) as client:
            while True:
                params: dict[str, str | int] = {"limit": self.page_size}
                if label_selector:
                    params["labelSelector"] = label_selector
                if continue_token:
                    params["continue"] = continue_token
                page = await self._perform_request(
                    client=client, path=path, params=params, response_model=response_model
                )
                pages.append(page)
                continue_token = page.metadata.continue_token
                if not continue_token:
                    break
        return pages

    async def _perform_request[TList: KubeListResponse](
        self,
        *,
        client: ResilientClient,
        path: str,
        params: dict[str, str | int],
        response_model: type[TList],
    ) -> TList:
        log.debug("GET %s params=%s", path, params)
        response = await client.get(
            f"{self.config.server}{path}",
            params=params,
            headers={
                "Authorization": f"Bearer {self.config.token}",
                "Accept": "application/json",
            },
        )
        payload = _json_or_none(response)
        status = _status_or_none(payload)
        if response.is_error:
            if status is not None:
                log.error(f"Kubernetes API error {status.code} ({status.reason}): {status.message}")
            response.raise_for_status()
        if status is not None:
            raise KubeApiError(status.message, code=status.code, reason=status.reason)
        if not isinstance(payload, dict) or "items" not in payload:
            raise KubeApiError(f"Unexpected list payload from {path}")

        return response_model.model_validate(payload)


def _json_or_none(response: httpx.Response) -> object:
    try:
        return response.json()
    except ValueError:
        return None


def _status_or_none(payload: object) -> StatusResponse | None:
    if isinstance(payload, dict) and payload.get("kind") == "Status":
        return StatusResponse.model_validate(payload)
    return None


if TYPE_CHECKING:
    _mirror_peer_check: MirrorPeerLister = KubeApiFetcher().list_mirror_peers
    _secret_check: SecretLister = KubeApiFetcher().list_secrets
