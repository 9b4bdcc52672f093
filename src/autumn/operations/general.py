"""Top-level billing operations: checkout, attach, check, track..."""

from typing import TYPE_CHECKING, Any

from autumn.errors.models import Result

if TYPE_CHECKING:
    from autumn.client import Autumn


async def handle_checkout(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    """Get a checkout URL or a preview of the charges for attaching a product."""
    return await client.post("/checkout", params)


async def handle_attach(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    """Attach a product to a customer."""
    return await client.post("/attach", params)


async def handle_usage(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    """Set the absolute usage of a feature for a customer."""
    return await client.post("/usage", params)


async def handle_setup_payment(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    return await client.post("/setup_payment", params)


async def handle_cancel(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    """Cancel a customer's product."""
    return await client.post("/cancel", params)


async def handle_check(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    """Check whether a customer may use a feature or product."""
    return await client.post("/check", params)


async def handle_track(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    """Record a usage event for a customer."""
    return await client.post("/track", params)


async def handle_query(client: "Autumn", params: dict[str, Any]) -> Result[Any]:
    return await client.post("/query", params)
