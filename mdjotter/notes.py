"""Note operations for the MDJotter API.

Thin wrappers over :meth:`~mdjotter.client.MDJotterClient.user_request`.
The only transformation applied is in :meth:`NoteService.get_note`,
which replaces missing contents with an empty string.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter

from mdjotter.client import MDJotterClient
from mdjotter.models import Note, NoteCreate, NoteUpdate, parse_resource

logger = logging.getLogger(__name__)

_NOTE_LIST = TypeAdapter(list[Note])


class NoteService:
    """Create, read, update, delete and search notes.

    Args:
        client: The client whose session the calls use.
    """

    def __init__(self, client: MDJotterClient) -> None:
        self._client = client

    async def create_note(self, params: NoteCreate | dict[str, Any]) -> Note | str:
        """Create a note (``POST notes``).

        Raises:
            pydantic.ValidationError: If *params* lacks a ``title``.
        """
        payload = NoteCreate.model_validate(params)
        data = await self._client.user_request("notes", "POST", payload)
        return parse_resource(Note, data)

    async def get_note(self, note_id: int) -> Note | str:
        """Retrieve a single note by its ID.

        Calls ``GET notes/{note_id}``.

        Returns:
            The note, with ``contents`` set to ``""`` when the service
            left it out or sent ``null``.  A body that is not a JSON
            object is returned as-is.
        """
        data = await self._client.user_request(f"notes/{note_id}")
        note = parse_resource(Note, data)

        if isinstance(note, Note) and not note.contents:
            note.contents = ""

        return note

    async def update_note(self, note_id: int, attributes: NoteUpdate | dict[str, Any]) -> Note | str:
        payload = NoteUpdate.model_validate(attributes)
        data = await self._client.user_request(f"notes/{note_id}", "PATCH", payload)
        return parse_resource(Note, data)

    async def delete_note(self, note_id: int) -> None:
        await self._client.user_request(f"notes/{note_id}", "DELETE")

    async def search_notes(self, query: str) -> list[Note] | str:
        """Return the notes matching *query* (``POST notes/search``)."""
        data = await self._client.user_request("notes/search", "POST", {"query": query})
        if not isinstance(data, list):
            return data
        notes = _NOTE_LIST.validate_python(data)
        logger.debug("Note search %r matched %d notes", query, len(notes))
        return notes
