"""Pydantic v2 models for MDJotter containers and notes.

Defines the value types exchanged with the service:
- ContainerCreate / ContainerUpdate: container creation and patch payloads
- Container: a container as returned by the service
- NoteCreate / NoteUpdate: note creation and patch payloads
- Note: a note as returned by the service
- ContainerChildren: the child containers and notes of one container

Field names are snake_case in Python and camelCase on the wire.  Response
models accept whatever object the service returns; only payloads that are
JSON objects are validated, anything else (such as the raw-text fallback)
is handed back unchanged by :func:`parse_resource`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _ResourceModel(_WireModel):
    # Unknown fields from the service are kept on the instance.
    model_config = ConfigDict(extra="allow")


class ContainerCreate(_WireModel):
    """Parameters for creating a container.

    Attributes:
        name: Display name of the container.
        parent_id: Parent container ID; ``None`` creates a root container.
    """

    name: str
    parent_id: int | None = None


class ContainerUpdate(_WireModel):
    """Partial container attributes; only the fields that are set are sent."""

    name: str | None = None
    parent_id: int | None = None


class Container(_ResourceModel):
    """A folder-like container of notes and other containers."""

    id: int | None = None
    name: str | None = None
    parent_id: int | None = None
    user_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class NoteCreate(_WireModel):
    """Parameters for creating a note.

    Attributes:
        title: Note title.
        container_id: Container holding the note.
        contents: Initial text contents.
    """

    title: str
    container_id: int | None = None
    contents: str | None = None


class NoteUpdate(_WireModel):
    """Partial note attributes; only the fields that are set are sent."""

    title: str | None = None
    container_id: int | None = None
    contents: str | None = None


class Note(_ResourceModel):
    """A leaf document with a title and text contents."""

    id: int | None = None
    title: str | None = None
    contents: str | None = None
    container_id: int | None = None
    user_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ContainerChildren(_ResourceModel):
    """Direct children of a container."""

    containers: list[Container] = []
    notes: list[Note] = []


_ResourceT = TypeVar("_ResourceT", bound=BaseModel)


def parse_resource(model: type[_ResourceT], data: Any) -> _ResourceT | Any:
    """Validate a JSON object into *model*; return any other payload as-is."""
    if isinstance(data, dict):
        return model.model_validate(data)
    return data
