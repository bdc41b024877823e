from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from mcmirror.adapters.http_resilience import ResilienceConfig, ResilientClient
from mcmirror.config import KubeApiConfig

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def kube_config() -> KubeApiConfig:
    return KubeApiConfig(
        server="https://api.test:6443",
        token="test-token",
        resilience=ResilienceConfig(name="kube-api-test", base_url="https://api.test:6443"),
    )


@pytest.fixture
def mock_client_factory() -> Callable[
    [Callable[[httpx.Request], httpx.Response]],
    Callable[[ResilienceConfig], ResilientClient],
]:
    def build(
        handler: Callable[[httpx.Request], httpx.Response],
    ) -> Callable[[ResilienceConfig], ResilientClient]:
        async def async_handler(request: httpx.Request) -> httpx.Response:
            return handler(request)

        def factory(resilience: ResilienceConfig) -> ResilientClient:
            client = ResilientClient(resilience)
            client._client = httpx.AsyncClient(transport=httpx.MockTransport(async_handler))  # noqa: SLF001  # type: ignore[reportPrivateUsage]
            return client

        return factory

    return build
