"""Entity operations.

Entities are sub-units of a customer (seats, workspaces, projects...) holding
their own feature balances.
"""

from typing import TYPE_CHECKING, Any

from autumn.dispatch import Resource, operation
from autumn.errors.models import Result
from autumn.operations import pop_path_id, with_query

if TYPE_CHECKING:
    from autumn.client import Autumn


async def handle_get_entity(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    customer_id = pop_path_id(params, "customer_id")
    entity_id = pop_path_id(params, "entity_id")
    path = f"/customers/{customer_id}/entities/{entity_id}"
    return await client.get(with_query(path, {"expand": params.get("expand")}))


async def handle_create_entity(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    """Create one entity, or several when ``entities`` holds a list."""
    customer_id = pop_path_id(params, "customer_id")
    body = params["entities"] if "entities" in params else params
    return await client.post(f"/customers/{customer_id}/entities", body)


async def handle_delete_entity(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    customer_id = pop_path_id(params, "customer_id")
    entity_id = pop_path_id(params, "entity_id")
    return await client.delete(f"/customers/{customer_id}/entities/{entity_id}")


class Entities(Resource):
    """Entity operations, available as ``Autumn.entities``."""

    get = operation(handle_get_entity)
    create = operation(handle_create_entity)
    delete = operation(handle_delete_entity)
