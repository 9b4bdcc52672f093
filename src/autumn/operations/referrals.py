"""Referral code operations."""

from typing import TYPE_CHECKING, Any

from autumn.dispatch import Resource, operation
from autumn.errors.models import Result

if TYPE_CHECKING:
    from autumn.client import Autumn


async def handle_create_code(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    """Create (or fetch) a customer's referral code for a referral program."""
    return await client.post("/referrals/code", params)


async def handle_redeem_code(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    return await client.post("/referrals/redeem", params)


class Referrals(Resource):
    """Referral operations, available as ``Autumn.referrals``."""

    create_code = operation(handle_create_code)
    redeem_code = operation(handle_redeem_code)
