"""The Autumn client: configuration, HTTP verbs and the operation surface."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx

from autumn.auth.credentials import CredentialResolver
from autumn.auth.headers import LATEST_API_VERSION, compose_headers
from autumn.dispatch import operation, resource
from autumn.errors.handler import to_result
from autumn.errors.models import Result
from autumn.operations import general
from autumn.operations.customers import Customers
from autumn.operations.entities import Entities
from autumn.operations.features import Features
from autumn.operations.products import Products
from autumn.operations.referrals import Referrals

AUTUMN_API_URL = "https://api.useautumn.com/v1"

JSONValue = dict[str, Any] | list[Any] | str | int | float | bool | None

# Level names used by JS-style loggers that stdlib logging does not know
LOG_LEVEL_ALIASES = {
    "TRACE": logging.DEBUG,
    "WARN": logging.WARNING,
    "FATAL": logging.CRITICAL,
    "SILENT": logging.CRITICAL + 10,
}


class Autumn:
    """Client for the Autumn billing and entitlements API.

    Credentials come from the arguments or, failing that, from the
    ``AUTUMN_SECRET_KEY`` / ``AUTUMN_PUBLISHABLE_KEY`` environment variables.
    Configuration is fixed at construction; one client can serve any number of
    concurrent calls.

    Every operation is also available on the class itself, in which case a
    client is built from the environment for that call:

    Example:
        ```python
        from autumn import Autumn

        client = Autumn(secret_key="am_sk_123")
        result = await client.check(customer_id="cus_123", feature_id="messages")

        # Same call using environment credentials
        result = await Autumn.check(customer_id="cus_123", feature_id="messages")

        if result.error:
            print(result.error.message, result.error.status_code)
        ```

    Args:
        secret_key: Secret API key. Preferred over the publishable key.
        publishable_key: Publishable API key.
        url: API base URL.
        version: Value of the ``x-api-version`` header.
        headers: Headers replacing the synthesized ones. Must carry their own
            authorization. ``x-api-version`` is still set.
        log_level: Level applied to the client logger (``"trace"``, ``"debug"``, ``"info"``...).
            Unknown names are ignored with a warning. Without ``logger`` this sets the
            shared ``autumn`` package logger, so it affects every client in the process,
            class-level calls included. Pass a dedicated ``logger`` to scope it.
        logger: Logger to use instead of the ``autumn`` package logger.
        environ: Mapping consulted instead of ``os.environ``.
        load_dotenv: Also read credentials from a ``.env`` file.
        dotenv_path: Explicit ``.env`` location. Implies ``load_dotenv``.
        transport: httpx transport for every request, e.g. ``httpx.MockTransport``.

    Raises:
        CredentialNotFoundError: If no key resolves and no headers were given.
    """

    def __init__(
        self,
        secret_key: str | None = None,
        publishable_key: str | None = None,
        *,
        url: str | None = None,
        version: str | None = None,
        headers: Mapping[str, str] | None = None,
        log_level: str | int | None = None,
        logger: logging.Logger | None = None,
        environ: Mapping[str, str] | None = None,
        load_dotenv: bool = False,
        dotenv_path: str | Path | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        resolver = CredentialResolver(environ=environ, dotenv_path=dotenv_path, load_dotenv=load_dotenv)
        self._keys = resolver.resolve_keys(
            secret_key=secret_key,
            publishable_key=publishable_key,
            headers_supplied=headers is not None,
        )
        self._version = version or LATEST_API_VERSION
        self._headers = compose_headers(self._keys, headers=headers, version=self._version)
        self._url = url or AUTUMN_API_URL
        self._transport = transport

        self.logger = logger or logging.getLogger("autumn")
        if log_level is not None:
            self._apply_log_level(log_level)

    def _apply_log_level(self, log_level: str | int) -> None:
        if isinstance(log_level, int):
            self.logger.setLevel(log_level)
            return

        name = log_level.upper()
        level = LOG_LEVEL_ALIASES.get(name, logging.getLevelName(name))
        if not isinstance(level, int):
            self.logger.warning(f"[Autumn] Ignoring unknown log level {log_level!r}")
            return
        self.logger.setLevel(level)

    @classmethod
    def from_env(cls) -> "Autumn":
        """Client configured only from the environment. Used by class-level calls."""
        return cls()

    @property
    def secret_key(self) -> str | None:
        return self._keys.secret_key

    @property
    def publishable_key(self) -> str | None:
        return self._keys.publishable_key

    @property
    def url(self) -> str:
        return self._url

    @property
    def version(self) -> str:
        return self._version

    @property
    def headers(self) -> dict[str, str]:
        """Copy of the headers sent with every request."""
        return dict(self._headers)

    def __repr__(self) -> str:
        return f"Autumn(url={self._url!r}, version={self._version!r})"

    async def _request(self, method: str, path: str, body: JSONValue = None) -> Result[Any]:
        """Send one request and normalize the response.

        Transport failures (connection refused, DNS...) are logged and re-raised;
        every received response becomes a Result.
        """
        url = f"{self._url}{path}"
        self.logger.debug(f"[Autumn] {method} {url}")

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=None) as http:
                if method == "POST":
                    response = await http.request(method, url, headers=self._headers, json=body)
                else:
                    response = await http.request(method, url, headers=self._headers)
        except httpx.HTTPError as e:
            self.logger.error(f"[Autumn] Error sending {method} {url}: {e}")
            raise

        return to_result(response, logger=self.logger)

    async def get(self, path: str) -> Result[Any]:
        return await self._request("GET", path)

    async def post(self, path: str, body: JSONValue) -> Result[Any]:
        return await self._request("POST", path, body)

    async def delete(self, path: str) -> Result[Any]:
        return await self._request("DELETE", path)

    customers = resource(Customers)
    entities = resource(Entities)
    products = resource(Products)
    referrals = resource(Referrals)
    features = resource(Features)

    checkout = operation(general.handle_checkout)
    attach = operation(general.handle_attach)
    usage = operation(general.handle_usage)
    setup_payment = operation(general.handle_setup_payment)
    cancel = operation(general.handle_cancel)
    check = operation(general.handle_check)
    track = operation(general.handle_track)
    query = operation(general.handle_query)
