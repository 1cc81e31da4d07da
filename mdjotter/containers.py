"""Container operations for the MDJotter API.

All network calls are delegated to
:class:`~mdjotter.client.MDJotterClient`, which handles the session
token and error mapping.  Errors it raises propagate unchanged.

Usage::

    async with MDJotterClient(username, password) as client:
        work = await client.containers.create_container({"name": "Work"})
        children = await client.containers.get_children(work.id)
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter

from mdjotter.client import MDJotterClient
from mdjotter.models import Container, ContainerChildren, ContainerCreate, ContainerUpdate, parse_resource

_CONTAINER_LIST = TypeAdapter(list[Container])


class ContainerService:
    """Create, list, update and delete containers.

    Args:
        client: The client whose session the calls use.
    """

    def __init__(self, client: MDJotterClient) -> None:
        self._client = client

    async def create_container(self, params: ContainerCreate | dict[str, Any]) -> Container | str:
        """Create a container and return it as stored by the service.

        Calls ``POST containers``.  A response body that is not a JSON object is returned as-is.

        Raises:
            pydantic.ValidationError: If *params* lacks a ``name``.
        """
        payload = ContainerCreate.model_validate(params)
        data = await self._client.user_request("containers", "POST", payload)
        return parse_resource(Container, data)

    async def get_root_containers(self) -> list[Container] | str:
        """Return the top-level containers (``GET containers``)."""
        data = await self._client.user_request("containers")
        if not isinstance(data, list):
            return data
        return _CONTAINER_LIST.validate_python(data)

    async def get_children(self, parent_id: int) -> ContainerChildren | str:
        """Return the child containers and notes of *parent_id*."""
        data = await self._client.user_request(f"containers/{parent_id}/children")
        return parse_resource(ContainerChildren, data)

    async def update_container(
        self,
        container_id: int,
        attributes: ContainerUpdate | dict[str, Any],
    ) -> Container | str:
        """Patch a container with the given partial attributes.

        Calls ``PATCH containers/{container_id}``; only the attributes
        that were set are sent.
        """
        payload = ContainerUpdate.model_validate(attributes)
        data = await self._client.user_request(f"containers/{container_id}", "PATCH", payload)
        return parse_resource(Container, data)

    async def delete_container(self, container_id: int) -> None:
        await self._client.user_request(f"containers/{container_id}", "DELETE")
