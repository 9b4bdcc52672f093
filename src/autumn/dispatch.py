"""Static and instance dispatch for Autumn operations.

Every operation is written once, as a handler taking ``(client, params)``. The
``operation`` descriptor exposes that handler two ways:

- on the class (``Autumn.check(...)``): a throwaway client is built from the
  environment for the call;
- on an instance (``client.check(...)``): the configured client is used.

``resource`` does the same for groups of operations (``Autumn.customers.get``
and ``client.customers.get``).

Example:
    ```python
    async def handle_check(client: Autumn, params: dict[str, Any]) -> Result:
        return await client.post("/check", params)


    class Autumn:
        check = operation(handle_check)


    await Autumn.check(customer_id="cus_123", feature_id="messages")
    await Autumn(secret_key="am_sk_123").check({"customer_id": "cus_123", "feature_id": "messages"})
    ```
"""

import functools
from collections.abc import Awaitable, Callable, Mapping
from typing import TYPE_CHECKING, Any

from autumn.errors.models import Result

if TYPE_CHECKING:
    from autumn.client import Autumn

Handler = Callable[["Autumn", dict[str, Any]], Awaitable[Result[Any]]]
BoundCall = Callable[..., Awaitable[Result[Any]]]


def merge_params(params: Mapping[str, Any] | None, overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Combine positional params with keyword params. Keywords win."""
    merged = dict(params) if params is not None else {}
    merged.update(overrides)
    return merged


class Resource:
    """A group of operations sharing one client, or one client class.

    Exactly one of ``client`` and ``client_cls`` drives dispatch: with a
    client, operations run on it; without, each call builds its own client
    from ``client_cls.from_env()``.
    """

    def __init__(self, client: "Autumn | None" = None, client_cls: "type[Autumn] | None" = None):
        self.client = client
        self.client_cls = client_cls if client_cls is not None else type(client)

    def __repr__(self) -> str:
        mode = "bound" if self.client is not None else "static"
        return f"<{type(self).__name__} {mode}>"


class operation:
    """Descriptor turning a ``(client, params)`` handler into a client method."""

    def __init__(self, handler: Handler):
        self.handler = handler
        self.name = handler.__name__
        self.__doc__ = handler.__doc__

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            if owner is not None and issubclass(owner, Resource):
                return self
            return self.static(owner)

        if isinstance(instance, Resource):
            if instance.client is None:
                return self.static(instance.client_cls)
            return self.bind(instance.client)

        return self.bind(instance)

    def static(self, client_cls: "type[Autumn]") -> BoundCall:
        """Callable that creates a client from the environment on every call."""

        @functools.wraps(self.handler)
        async def call(params: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Result[Any]:
            client = client_cls.from_env()
            return await self.handler(client, merge_params(params, kwargs))

        return call

    def bind(self, client: "Autumn") -> BoundCall:
        """Callable that runs the handler on an existing client."""

        @functools.wraps(self.handler)
        async def call(params: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Result[Any]:
            return await self.handler(client, merge_params(params, kwargs))

        return call


class resource:
    """Descriptor exposing a Resource subclass on the client, in both forms."""

    def __init__(self, resource_cls: type[Resource]):
        self.resource_cls = resource_cls
        self.__doc__ = resource_cls.__doc__

    def __get__(self, instance: "Autumn | None", owner: "type[Autumn] | None" = None) -> Resource:
        if instance is None:
            return self.resource_cls(client_cls=owner)
        return self.resource_cls(client=instance)
