"""Feature operations."""

from typing import TYPE_CHECKING, Any

from autumn.dispatch import Resource, operation
from autumn.errors.models import Result
from autumn.operations import pop_path_id

if TYPE_CHECKING:
    from autumn.client import Autumn


async def handle_list_features(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    return await client.get("/features")


async def handle_get_feature(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    feature_id = pop_path_id(params, "id")
    return await client.get(f"/features/{feature_id}")


class Features(Resource):
    """Feature operations, available as ``Autumn.features``."""

    list = operation(handle_list_features)
    get = operation(handle_get_feature)
