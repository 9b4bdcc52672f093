"""Customer operations."""

from typing import TYPE_CHECKING, Any

from autumn.dispatch import Resource, operation
from autumn.errors.models import Result
from autumn.operations import pop_path_id, with_query

if TYPE_CHECKING:
    from autumn.client import Autumn


async def handle_get_customer(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    """Fetch a customer. ``expand`` lists related objects to include."""
    customer_id = pop_path_id(params, "customer_id")
    return await client.get(with_query(f"/customers/{customer_id}", {"expand": params.get("expand")}))


async def handle_create_customer(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    """Create a customer, or return the existing one with the same id."""
    expand = params.pop("expand", None)
    return await client.post(with_query("/customers", {"expand": expand}), params)


async def handle_update_customer(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    customer_id = pop_path_id(params, "customer_id")
    return await client.post(f"/customers/{customer_id}", params)


async def handle_delete_customer(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    customer_id = pop_path_id(params, "customer_id")
    return await client.delete(f"/customers/{customer_id}")


async def handle_billing_portal(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    """Get a billing portal URL for the customer."""
    customer_id = pop_path_id(params, "customer_id")
    return await client.post(f"/customers/{customer_id}/billing_portal", params)


class Customers(Resource):
    """Customer operations, available as ``Autumn.customers``."""

    get = operation(handle_get_customer)
    create = operation(handle_create_customer)
    update = operation(handle_update_customer)
    delete = operation(handle_delete_customer)
    billing_portal = operation(handle_billing_portal)
