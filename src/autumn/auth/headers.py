"""Request header composition."""

from collections.abc import Mapping

from autumn.auth.credentials import ApiKeys

LATEST_API_VERSION = "1.2"
VERSION_HEADER = "x-api-version"


def compose_headers(
    keys: ApiKeys,
    headers: Mapping[str, str] | None = None,
    version: str | None = None,
) -> dict[str, str]:
    """Build the header set sent with every request.

    Explicit headers are used as given, apart from the version header which is
    always set. Otherwise a bearer header is built from the secret key, falling
    back to the publishable key.

    Args:
        keys: Resolved credentials.
        headers: Caller-supplied headers replacing the synthesized ones.
        version: API version. Defaults to LATEST_API_VERSION.

    Returns:
        A new dict; the caller's mapping is not modified.
    """
    if headers is not None:
        # Header names are case-insensitive; any caller spelling of the version header is replaced
        composed = {name: value for name, value in headers.items() if name.lower() != VERSION_HEADER}
    else:
        composed = {
            "Authorization": f"Bearer {keys.bearer}",
            "Content-Type": "application/json",
        }

    composed[VERSION_HEADER] = version or LATEST_API_VERSION
    return composed
