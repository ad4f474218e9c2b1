"""GraphQL response envelope handling.

Every GraphQL response is wrapped in ``{"data": {...}, "errors": [...]}`` with
results keyed by operation name. :func:`unwrap` picks out the one payload a
caller asked for and decides whether reported errors are fatal.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

from tradesafe.exceptions import RequestFailedError

_LOG = logging.getLogger(__name__)

NOT_FOUND_MARKER = "No query results"


class ResponseEnvelope(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: dict[str, Any] | None = None
    errors: list[Any] | None = None


def _has_usable_payload(payload: Any) -> bool:
    # An empty list/object is still a resolved result.
    if isinstance(payload, (dict, list)):
        return True
    return bool(payload)


def unwrap(envelope: ResponseEnvelope, operation_name: str) -> Any:
    """Return ``data[operation_name]`` from *envelope*.

    Raises:
        RequestFailedError: If the server reported errors and produced no
            usable data for *operation_name*.
    """
    payload = (envelope.data or {}).get(operation_name)

    if envelope.errors is not None:
        serialized = json.dumps(envelope.errors)
        if not _has_usable_payload(payload):
            raise RequestFailedError(f"GraphQL errors: {serialized}", errors=envelope.errors)
        _LOG.warning("GraphQL returned errors alongside data for %s: %s", operation_name, serialized)

    return payload


def is_not_found_error(exc: BaseException) -> bool:
    """Check if an error reports an upstream "no results" condition."""
    return NOT_FOUND_MARKER in str(exc)
