"""Structural validation of exchange and credential secrets."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Final

from mcmirror.domain.labels import (
    NAMESPACE_KEY,
    SECRET_DATA_KEY,
    SECRET_ORIGIN_KEY,
    STORAGE_CLUSTER_NAME_KEY,
    role_of,
)
from mcmirror.domain.model import Role
from mcmirror.domain.s3 import S3_REQUIRED_KEYS

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from mcmirror.domain.model import Secret

INTERNAL_REQUIRED_KEYS: Final[tuple[str, ...]] = (
    NAMESPACE_KEY,
    STORAGE_CLUSTER_NAME_KEY,
    SECRET_ORIGIN_KEY,
    SECRET_DATA_KEY,
)


class InvalidReason(StrEnum):
    NIL_RECORD = "nil record"
    EMPTY_EXPECTED_ROLE = "empty expected role"
    ROLE_MISMATCH = "role mismatch"
    NIL_PAYLOAD = "nil payload"
    MISSING_REQUIRED_KEYS = "missing required keys"


class RecordInvalidError(ValueError):
    """Raised when a secret must not be acted upon."""

    def __init__(self, reason: InvalidReason, *, detail: str | None = None) -> None:
        self.reason = reason
        self.detail = detail
        message = str(reason) if detail is None else f"{reason}: {detail}"
        super().__init__(message)


def _missing_keys(data: Mapping[str, object], required: Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted(key for key in required if key not in data))


def missing_internal_keys(data: Mapping[str, bytes]) -> tuple[str, ...]:
    return _missing_keys(data, INTERNAL_REQUIRED_KEYS)


def missing_s3_keys(data: Mapping[str, bytes]) -> tuple[str, ...]:
    return _missing_keys(data, S3_REQUIRED_KEYS)


def validate_internal_secret(secret: Secret | None, expected_role: Role | None) -> None:
    """Raise ``RecordInvalidError`` unless ``secret`` is a usable exchange secret.

    Pass ``Role.IGNORE`` to skip the role check. Only key presence is checked;
    empty values are accepted.
    """

    if secret is None:
        raise RecordInvalidError(InvalidReason.NIL_RECORD)
    if not expected_role:
        raise RecordInvalidError(
            InvalidReason.EMPTY_EXPECTED_ROLE, detail="pass Role.IGNORE to skip the role check"
        )
    if expected_role != Role.IGNORE:
        actual = role_of(secret)
        if actual != expected_role:
            raise RecordInvalidError(
                InvalidReason.ROLE_MISMATCH,
                detail=f"expected {expected_role!s}, got {actual!s}",
            )
    if secret.data is None:
        raise RecordInvalidError(InvalidReason.NIL_PAYLOAD)
    missing = missing_internal_keys(secret.data)
    if missing:
        raise RecordInvalidError(InvalidReason.MISSING_REQUIRED_KEYS, detail=", ".join(missing))


def validate_source_secret(secret: Secret | None) -> None:
    validate_internal_secret(secret, Role.SOURCE)


def validate_destination_secret(secret: Secret | None) -> None:
    validate_internal_secret(secret, Role.DESTINATION)


def validate_s3_secret(data: Mapping[str, bytes] | None) -> bool:
    """Pre-flight check: are all object-store credential keys present?"""

    if data is None:
        return False
    return not missing_s3_keys(data)
