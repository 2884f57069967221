"""Tests for the Firestore adapter against a mocked client."""

from unittest.mock import MagicMock

import pytest
from google.cloud import firestore

from catalog.domain.model.document import SERVER_TIMESTAMP
from catalog.infrastructure.persistence.firestore_document_store import (
    FirestoreDocumentStore,
)


def _client(document_id: str = "abc123") -> MagicMock:
    client = MagicMock()
    ref = MagicMock()
    ref.id = document_id
    client.collection.return_value.add.return_value = (MagicMock(), ref)
    return client


class TestFirestoreDocumentStore:

    def test_returns_reference_id(self):
        store = FirestoreDocumentStore(_client("XyZ"))
        assert store.add("products", {"name": "Widget"}) == "XyZ"

    def test_writes_to_named_collection_once(self):
        client = _client()
        FirestoreDocumentStore(client).add("products", {"name": "Widget"})
        client.collection.assert_called_once_with("products")
        client.collection.return_value.add.assert_called_once()

    def test_sentinel_becomes_firestore_server_timestamp(self):
        client = _client()
        FirestoreDocumentStore(client).add(
            "products", {"name": "Widget", "createdAt": SERVER_TIMESTAMP}
        )
        (document,), _ = client.collection.return_value.add.call_args
        assert document == {"name": "Widget", "createdAt": firestore.SERVER_TIMESTAMP}

    def test_sentinel_in_map_converted(self):
        client = _client()
        FirestoreDocumentStore(client).add("products", {"meta": {"at": SERVER_TIMESTAMP}})
        (document,), _ = client.collection.return_value.add.call_args
        assert document["meta"]["at"] is firestore.SERVER_TIMESTAMP

    def test_sentinel_in_array_left_for_client(self):
        client = _client()
        FirestoreDocumentStore(client).add("products", {"meta": [SERVER_TIMESTAMP]})
        (document,), _ = client.collection.return_value.add.call_args
        assert document["meta"] == [SERVER_TIMESTAMP]

    def test_client_errors_propagate(self):
        client = _client()
        client.collection.return_value.add.side_effect = RuntimeError("quota exceeded")
        with pytest.raises(RuntimeError, match="quota exceeded"):
            FirestoreDocumentStore(client).add("products", {"name": "Widget"})

    def test_close_closes_client(self):
        client = _client()
        FirestoreDocumentStore(client).close()
        client.close.assert_called_once_with()
