"""Authentication components for the Autumn client.

This module provides:
- Secret/publishable key resolution (value → env → .env → default)
- Bearer and API version header composition

Example:
    ```python
    from autumn.auth import CredentialResolver, compose_headers

    resolver = CredentialResolver()
    keys = resolver.resolve_keys(secret_key="am_sk_123")
    headers = compose_headers(keys, version="1.2")
    ```
"""

from autumn.auth.credentials import (
    PUBLISHABLE_KEY_ENV,
    SECRET_KEY_ENV,
    ApiKeys,
    CredentialResolver,
)
from autumn.auth.exceptions import CredentialError, CredentialNotFoundError
from autumn.auth.headers import LATEST_API_VERSION, VERSION_HEADER, compose_headers

__all__ = [
    "LATEST_API_VERSION",
    "PUBLISHABLE_KEY_ENV",
    "SECRET_KEY_ENV",
    "VERSION_HEADER",
    "ApiKeys",
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "compose_headers",
]
