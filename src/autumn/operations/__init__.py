"""Domain operations of the Autumn API.

Each handler takes ``(client, params)``, builds a path and payload, and calls
one of the client's HTTP verbs. Handlers are exposed on ``Autumn`` through
``autumn.dispatch``.
"""

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote

import httpx


def pop_path_id(params: dict[str, Any], key: str) -> str:
    """Remove a required identifier from params and percent-encode it for a path.

    Raises:
        ValueError: If the identifier is missing or empty.
    """
    value = params.pop(key, None)
    if value is None or value == "":
        raise ValueError(f"'{key}' is required")
    return quote(str(value), safe="")


def with_query(path: str, query: Mapping[str, Any] | None) -> str:
    """Append a query string, dropping None values and comma-joining lists.

    Empty lists are dropped too.

    Raises:
        TypeError: If a value is a mapping, which has no query string form.
    """
    if not query:
        return path

    cleaned: dict[str, str] = {}
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            raise TypeError(f"Query parameter '{key}' cannot be a mapping")
        if isinstance(value, Iterable) and not isinstance(value, str):
            value = ",".join(str(v) for v in value)
            if not value:
                continue
        elif isinstance(value, bool):
            value = str(value).lower()
        cleaned[key] = str(value)

    if not cleaned:
        return path
    return f"{path}?{httpx.QueryParams(cleaned)}"
