"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

The document store is built once per process, on first use, and torn
down by ``shutdown`` at interpreter exit. Requests never re-initialize it.
"""

from __future__ import annotations

import atexit
import logging
import threading

import firebase_admin

from catalog.application.add_product import AddProductHandler
from catalog.domain.repository.document_store import DocumentStore
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.persistence.firestore_document_store import (
    FirestoreDocumentStore,
)
from catalog.infrastructure.persistence.json_document_store import (
    JsonDocumentStore,
)

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_store: DocumentStore | None = None
_firebase_app: firebase_admin.App | None = None


def _build_store(settings: Settings) -> DocumentStore:
    global _firebase_app

    if settings.store_backend == "json":
        logger.info("Using JSON document store at %s", settings.json_store_path)
        return JsonDocumentStore(settings.json_store_path)

    options = {"projectId": settings.gcp_project} if settings.gcp_project else None
    app = firebase_admin.initialize_app(options=options)
    try:
        store = FirestoreDocumentStore.from_app(app)
    except Exception:
        # initialize_app refuses to run twice while the default app exists.
        firebase_admin.delete_app(app)
        raise
    _firebase_app = app
    logger.info("Using Firestore document store (project=%s)", app.project_id)
    return store


def document_store() -> DocumentStore:
    global _store

    with _lock:
        if _store is None:
            settings = get_settings()
            _store = _build_store(settings)
            atexit.register(shutdown)
        return _store


def add_product_handler() -> AddProductHandler:
    return AddProductHandler(
        store=document_store(),
        collection=get_settings().products_collection,
    )


def shutdown() -> None:
    global _store, _firebase_app

    with _lock:
        if _store is not None:
            _store.close()
            _store = None
        if _firebase_app is not None:
            firebase_admin.delete_app(_firebase_app)
            _firebase_app = None
    atexit.unregister(shutdown)
