"""Product operations."""

from typing import TYPE_CHECKING, Any

from autumn.dispatch import Resource, operation
from autumn.errors.models import Result
from autumn.operations import pop_path_id, with_query

if TYPE_CHECKING:
    from autumn.client import Autumn


async def handle_get_product(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    product_id = pop_path_id(params, "id")
    return await client.get(f"/products/{product_id}")


async def handle_create_product(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    return await client.post("/products", params)


async def handle_list_products(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    """List products. Any params are sent as query arguments."""
    return await client.get(with_query("/products", params))


class Products(Resource):
    """Product operations, available as ``Autumn.products``."""

    get = operation(handle_get_product)
    create = operation(handle_create_product)
    list = operation(handle_list_products)
