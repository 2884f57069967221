"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from catalog.application.dto import ProductCreated
from catalog.domain.exceptions import MalformedRequestError
from catalog.domain.model.document import with_created_at
from catalog.domain.model.product import NewProduct
from catalog.domain.repository.document_store import DocumentStore

logger = logging.getLogger(__name__)

PRODUCTS_COLLECTION = "products"


class AddProductHandler:

    def __init__(
        self,
        store: DocumentStore,
        collection: str = PRODUCTS_COLLECTION,
    ) -> None:
        self._store = store
        self._collection = collection

    def handle(self, request_body: NewProduct | Mapping[str, Any]) -> ProductCreated:
        """Persist the request body as a new product document.

        The body is expected to look like a NewProduct, but only the outer
        shape is checked: it has to be a JSON object, else
        MalformedRequestError is raised. Its fields are written as received,
        so a body missing ``name`` or ``price`` still produces a document.
        Errors raised by the store are not caught here.
        """
        if not isinstance(request_body, Mapping):
            kind = type(request_body).__name__
            raise MalformedRequestError(
                f"Product payload must be a JSON object, got {kind}"
            )

        logger.info(
            "Adding product. %s", request_body, extra={"product": dict(request_body)}
        )
        document = with_created_at(request_body)
        product_id = self._store.add(self._collection, document)
        logger.debug("Product %s added to '%s'", product_id, self._collection)
        return ProductCreated(product_id=product_id)
