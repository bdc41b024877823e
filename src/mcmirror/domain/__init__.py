"""Classification, validation and matching of exchange secrets."""

from __future__ import annotations

from mcmirror.domain.builders import (
    create_destination_secret,
    create_internal_secret,
    create_source_secret,
)
from mcmirror.domain.events import (
    SOURCE_OR_DESTINATION_FILTER,
    CreateEvent,
    DeleteEvent,
    EventFilter,
    GenericEvent,
    UpdateEvent,
)
from mcmirror.domain.labels import (
    is_destination_secret,
    is_internal_secret,
    is_secret_with_role,
    is_source_secret,
    role_of,
)
from mcmirror.domain.naming import unique_name, unique_secret_name
from mcmirror.domain.peering import (
    find_matching_secret,
    find_mirror_peers_for,
    peer_ref_from_secret,
    peer_refs_for,
)
from mcmirror.domain.validation import (
    InvalidReason,
    RecordInvalidError,
    validate_destination_secret,
    validate_internal_secret,
    validate_s3_secret,
    validate_source_secret,
)

__all__ = [
    "SOURCE_OR_DESTINATION_FILTER",
    "CreateEvent",
    "DeleteEvent",
    "EventFilter",
    "GenericEvent",
    "InvalidReason",
    "RecordInvalidError",
    "UpdateEvent",
    "create_destination_secret",
    "create_internal_secret",
    "create_source_secret",
    "find_matching_secret",
    "find_mirror_peers_for",
    "is_destination_secret",
    "is_internal_secret",
    "is_secret_with_role",
    "is_source_secret",
    "peer_ref_from_secret",
    "peer_refs_for",
    "role_of",
    "unique_name",
    "unique_secret_name",
    "validate_destination_secret",
    "validate_internal_secret",
    "validate_s3_secret",
    "validate_source_secret",
]
