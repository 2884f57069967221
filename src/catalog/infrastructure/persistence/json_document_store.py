"""JSON-file-backed implementation of DocumentStore.

Used for local development and as a stand-in for the managed store when
no Google credentials are available. All collections share one file:
``{collection: {document_id: document}}``.
"""

from __future__ import annotations

import json
import os
import secrets
import string
import tempfile
import threading
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any, Mapping

from catalog.domain.model.document import ServerTimestamp
from catalog.domain.repository.document_store import DocumentStore

_AUTO_ID_ALPHABET = string.ascii_letters + string.digits
_AUTO_ID_LENGTH = 20


def auto_id() -> str:
    """Random 20-character alphanumeric ID, same shape as Firestore's."""
    return "".join(secrets.choice(_AUTO_ID_ALPHABET) for _ in range(_AUTO_ID_LENGTH))


class JsonDocumentStore(DocumentStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()
        self._ensure_file()

    # --- DocumentStore interface ----------------------------------------------

    def add(self, collection: str, document: Mapping[str, Any]) -> str:
        with self._lock:
            data = self._load()
            documents = data.setdefault(collection, {})
            document_id = auto_id()
            while document_id in documents:
                document_id = auto_id()
            committed_at = datetime.now(timezone.utc).isoformat()
            documents[document_id] = _resolve(document, committed_at)
            self._persist(data)
        return document_id

    # --- Inspection -----------------------------------------------------------

    def get(self, collection: str, document_id: str) -> dict[str, Any] | None:
        with self._lock:
            data = self._load()
        return data.get(collection, {}).get(document_id)

    def list_all(self, collection: str) -> dict[str, dict[str, Any]]:
        with self._lock:
            data = self._load()
        return data.get(collection, {})

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, dict[str, dict[str, Any]]]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist(self, data: dict[str, dict[str, dict[str, Any]]]) -> None:
        # Written beside the target and swapped in whole.
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=self._file_path.name, suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2, default=_encode)
                fh.write("\n")
            os.replace(tmp_name, self._file_path)
        except BaseException:
            os.unlink(tmp_name)
            raise

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")


def _resolve(value: Any, committed_at: str) -> Any:
    if isinstance(value, ServerTimestamp):
        return committed_at
    if isinstance(value, Mapping):
        return {k: _resolve(v, committed_at) for k, v in value.items()}
    return value


def _encode(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
