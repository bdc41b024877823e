"""Kubernetes API access configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_flag, optional_env_var, require_env_vars
from .errors import InvalidServerURLError
from .http_resilience import RateLimit, ResilienceConfig

KUBE_TIMEOUT_SECONDS = 15.0
# client-go defaults: 5 QPS.
KUBE_QPS = 5


@dataclass(frozen=True)
class KubeApiConfig:
    """Holds the API server address and bearer token for one cluster."""

    server: str
    token: str
    resilience: ResilienceConfig


def _verify_setting() -> bool | str:
    if env_flag("KUBE_INSECURE_SKIP_TLS_VERIFY"):
        return False
    return optional_env_var("KUBE_CA_BUNDLE") or True


def get_kube_api_config(*, resilience: ResilienceConfig | None = None) -> KubeApiConfig:
    values = require_env_vars(("KUBE_API_SERVER", "KUBE_API_TOKEN"))
    server = values["KUBE_API_SERVER"].strip().rstrip("/")
    if not server.startswith(("https://", "http://")):
        raise InvalidServerURLError(server)
    return KubeApiConfig(
        server=server,
        token=values["KUBE_API_TOKEN"],
        resilience=resilience
        or ResilienceConfig(
            name="kube-api",
            base_url=server,
            timeout_seconds=KUBE_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=KUBE_QPS, per_seconds=1.0),
            verify=_verify_setting(),
        ),
    )
