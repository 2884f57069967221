"""Cloud Firestore implementation of DocumentStore."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import firebase_admin
from firebase_admin import firestore as firebase_firestore
from google.cloud import firestore

from catalog.domain.model.document import ServerTimestamp
from catalog.domain.repository.document_store import DocumentStore

logger = logging.getLogger(__name__)


class FirestoreDocumentStore(DocumentStore):
    """Writes documents through a google-cloud-firestore client.

    The client owns connection management, retries and consistency;
    nothing here adds to them.
    """

    def __init__(self, client: firestore.Client) -> None:
        self._client = client

    @classmethod
    def from_app(cls, app: firebase_admin.App) -> FirestoreDocumentStore:
        return cls(firebase_firestore.client(app))

    # --- DocumentStore interface ----------------------------------------------

    def add(self, collection: str, document: Mapping[str, Any]) -> str:
        _update_time, ref = self._client.collection(collection).add(
            _to_firestore(document)
        )
        return ref.id

    def close(self) -> None:
        logger.debug("Closing Firestore client")
        self._client.close()


def _to_firestore(value: Any) -> Any:
    """Swap the domain sentinel for the client's own server-timestamp marker.

    Only top-level and map values are converted. Firestore does not accept
    server timestamps inside arrays, so a sentinel there is left for the
    client to reject.
    """
    if isinstance(value, ServerTimestamp):
        return firestore.SERVER_TIMESTAMP
    if isinstance(value, Mapping):
        return {k: _to_firestore(v) for k, v in value.items()}
    return value
