"""Relevance filter for watch notifications on exchange secrets.

Role changes on update are dropped on purpose: a secret that moves from one
role to another is expected to arrive as a delete followed by a create.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from mcmirror.domain.labels import is_destination_secret, is_internal_secret, is_source_secret


@dataclass(frozen=True, slots=True)
class CreateEvent:
    obj: object


@dataclass(frozen=True, slots=True)
class UpdateEvent:
    old: object
    new: object


@dataclass(frozen=True, slots=True)
class DeleteEvent:
    obj: object


@dataclass(frozen=True, slots=True)
class GenericEvent:
    obj: object


type Event = CreateEvent | UpdateEvent | DeleteEvent | GenericEvent


def _never(_event: object) -> bool:
    return False


@dataclass(frozen=True, slots=True)
class EventFilter:
    """Set of per-kind predicates, registered once with the watch loop."""

    create: Callable[[CreateEvent], bool] = _never
    update: Callable[[UpdateEvent], bool] = _never
    delete: Callable[[DeleteEvent], bool] = _never
    generic: Callable[[GenericEvent], bool] = _never

    def __call__(self, event: object) -> bool:
        match event:
            case CreateEvent():
                return self.create(event)
            case UpdateEvent():
                return self.update(event)
            case DeleteEvent():
                return self.delete(event)
            case GenericEvent():
                return self.generic(event)
            case _:
                return False


def _on_create(event: CreateEvent) -> bool:
    return is_source_secret(event.obj) or is_internal_secret(event.obj)


def _on_delete(event: DeleteEvent) -> bool:
    return is_source_secret(event.obj) or is_destination_secret(event.obj)


def _on_update(event: UpdateEvent) -> bool:
    return (
        (is_source_secret(event.old) and is_source_secret(event.new))
        or (is_destination_secret(event.old) and is_destination_secret(event.new))
        or (is_internal_secret(event.old) and is_internal_secret(event.new))
    )


SOURCE_OR_DESTINATION_FILTER = EventFilter(
    create=_on_create,
    update=_on_update,
    delete=_on_delete,
)
