"""Documents as handed to the document store.

The creation timestamp of a persisted document is owned by the store, not
by the caller: the caller only places the SERVER_TIMESTAMP sentinel in the
document and the store adapter substitutes its own commit-time clock value
during the write.
"""

from __future__ import annotations

from typing import Any, Mapping

CREATED_AT_FIELD = "createdAt"


class ServerTimestamp:
    """Placeholder for "the store's clock at commit time".

    There is exactly one instance, SERVER_TIMESTAMP; compare with ``is``.
    """

    _instance: ServerTimestamp | None = None

    def __new__(cls) -> ServerTimestamp:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = ServerTimestamp()


def with_created_at(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``fields`` with ``createdAt`` bound to the sentinel.

    A ``createdAt`` already present in ``fields`` is replaced.
    """
    return {**fields, CREATED_AT_FIELD: SERVER_TIMESTAMP}
