"""Object-store credential secret keys."""

from __future__ import annotations

from typing import Final

from mcmirror.domain.naming import unique_secret_name

S3_PROFILE_PREFIX: Final[str] = "s3profile"
S3_ORIGIN: Final[str] = "S3"
S3_ENDPOINT: Final[str] = "s3CompatibleEndpoint"
S3_BUCKET_NAME: Final[str] = "s3Bucket"
S3_PROFILE_NAME: Final[str] = "s3ProfileName"
S3_REGION: Final[str] = "s3Region"
AWS_ACCESS_KEY_ID: Final[str] = "AWS_ACCESS_KEY_ID"
AWS_SECRET_ACCESS_KEY: Final[str] = "AWS_SECRET_ACCESS_KEY"

S3_REQUIRED_KEYS: Final[tuple[str, ...]] = (
    S3_PROFILE_NAME,
    S3_BUCKET_NAME,
    S3_ENDPOINT,
    S3_REGION,
    AWS_ACCESS_KEY_ID,
    AWS_SECRET_ACCESS_KEY,
)


def s3_secret_name(
    managed_cluster: str,
    storage_cluster_namespace: str,
    storage_cluster_name: str,
) -> str:
    return unique_secret_name(
        managed_cluster,
        storage_cluster_namespace,
        storage_cluster_name,
        S3_PROFILE_PREFIX,
    )
