"""Credential resolution for Autumn clients.

Autumn authenticates with either a secret key (server side) or a publishable
key (browser-safe, limited scope). Each key is resolved independently.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment (``os.environ`` or an injected mapping)
3. .env file values (python-dotenv, opt-in)
4. Default value

Example:
    ```python
    from autumn.auth import CredentialResolver

    resolver = CredentialResolver()
    keys = resolver.resolve_keys(secret_key=None, publishable_key=None)

    # Tests can inject their own environment instead of touching os.environ
    resolver = CredentialResolver(environ={"AUTUMN_SECRET_KEY": "am_sk_test"})
    ```

Security Considerations:
    - Credentials are never logged in full (masked with ***)
    - Only source information is logged (env var name, .env file, etc.)
    - .env values are read into the resolver, never written to os.environ
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from autumn.auth.exceptions import CredentialNotFoundError

logger = logging.getLogger(__name__)

SECRET_KEY_ENV = "AUTUMN_SECRET_KEY"
PUBLISHABLE_KEY_ENV = "AUTUMN_PUBLISHABLE_KEY"


@dataclass(frozen=True)
class ApiKeys:
    """The pair of keys in effect for one client."""

    secret_key: str | None = None
    publishable_key: str | None = None

    @property
    def bearer(self) -> str | None:
        """Key sent as the bearer token. The secret key wins when both are set."""
        return self.secret_key or self.publishable_key


class CredentialResolver:
    """Resolve credentials from multiple sources with priority ordering.

    The environment is a capability handed to the resolver. It defaults to
    ``os.environ`` but any mapping works, which lets tests supply fixed values.

    Example:
        ```python
        resolver = CredentialResolver(environ={"AUTUMN_SECRET_KEY": "am_sk_123"})

        secret = resolver.resolve(env_var_name="AUTUMN_SECRET_KEY")
        keys = resolver.resolve_keys(secret_key=None, publishable_key="am_pk_456")
        ```
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        dotenv_path: str | Path | None = None,
        load_dotenv: bool = False,
    ):
        """Initialize credential resolver.

        Args:
            environ: Mapping consulted for ambient values. Defaults to os.environ.
            dotenv_path: Path to a .env file. If None and load_dotenv is True,
                python-dotenv searches parent directories for one.
            load_dotenv: Whether to read a .env file as a fallback source.
        """
        self._environ = os.environ if environ is None else environ
        self._dotenv: dict[str, str | None] = {}
        self._dotenv_loaded = False

        if load_dotenv or dotenv_path is not None:
            self._load_dotenv(dotenv_path)

    def _load_dotenv(self, dotenv_path: str | Path | None) -> None:
        try:
            self._dotenv = dotenv_values(dotenv_path=dotenv_path)
            logger.debug("Loaded .env file for credential resolution")
        except OSError as e:
            logger.warning(f"Failed to load .env file: {e}")
        self._dotenv_loaded = True

    def _mask_credential(self, value: str | None) -> str:
        """Mask a credential value for safe logging."""
        if value is None:
            return "None"
        return "***"

    def _lookup_env(self, env_var_name: str) -> str | None:
        """Read one ambient value, treating an unreadable store as unset."""
        try:
            return self._environ.get(env_var_name) or None
        except Exception as e:
            logger.debug(f"Environment unavailable while reading '{env_var_name}': {e}")
            return None

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Resolve a single credential.

        Empty strings are treated as unset at every level.

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable to consult, then the .env values.
            default: Fallback if no other source provides a value.
            required: Raise CredentialNotFoundError instead of returning None.

        Returns:
            The resolved credential, or None.

        Raises:
            CredentialNotFoundError: If required=True and nothing was found.
        """
        result = None
        source = None

        if value:
            result = value
            source = "explicit parameter"
        elif env_var_name and (env_value := self._lookup_env(env_var_name)):
            result = env_value
            source = f"environment variable '{env_var_name}'"
        elif env_var_name and self._dotenv.get(env_var_name):
            result = self._dotenv[env_var_name]
            source = f".env entry '{env_var_name}'"
        elif default:
            result = default
            source = "default value"

        if result is not None:
            logger.debug(f"Resolved credential from {source}: {self._mask_credential(result)}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_names=(env_var_name,) if env_var_name else ())

        return result

    def resolve_keys(
        self,
        *,
        secret_key: str | None = None,
        publishable_key: str | None = None,
        headers_supplied: bool = False,
    ) -> ApiKeys:
        """Resolve the secret/publishable key pair for a client.

        Args:
            secret_key: Explicit secret key.
            publishable_key: Explicit publishable key.
            headers_supplied: Whether the caller passed its own headers. Those
                carry their own authorization, so missing keys are acceptable.

        Raises:
            CredentialNotFoundError: If neither key resolves and no headers
                were supplied.
        """
        keys = ApiKeys(
            secret_key=self.resolve(value=secret_key, env_var_name=SECRET_KEY_ENV),
            publishable_key=self.resolve(value=publishable_key, env_var_name=PUBLISHABLE_KEY_ENV),
        )

        if keys.bearer is None and not headers_supplied:
            raise CredentialNotFoundError(
                "Autumn secret key or publishable key is required",
                env_var_names=(SECRET_KEY_ENV, PUBLISHABLE_KEY_ENV),
            )

        return keys
