"""Exceptions raised while resolving Autumn credentials.

Example:
    ```python
    from autumn.auth.exceptions import CredentialNotFoundError

    try:
        client = Autumn()
    except CredentialNotFoundError as e:
        print(f"Set one of: {', '.join(e.env_var_names)}")
    ```
"""

from autumn.errors.exceptions import AutumnError


class CredentialError(AutumnError):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when no credential can be resolved for a client.

    This is a configuration error: it is raised synchronously while the
    client is being constructed, before any request is made.

    Attributes:
        env_var_names: The environment variable names that were checked.
    """

    def __init__(self, message: str, env_var_names: tuple[str, ...] = ()):
        """Initialize CredentialNotFoundError.

        Args:
            message: Error message describing what credential is missing.
            env_var_names: Environment variable names consulted during resolution.
        """
        super().__init__(message)
        self.env_var_names = env_var_names
