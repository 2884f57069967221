"""Abstract document store.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (Firestore, JSON file,
in-memory) live in the infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class DocumentStore(ABC):

    @abstractmethod
    def add(self, collection: str, document: Mapping[str, Any]) -> str:
        """Create a document in ``collection`` and return its generated ID.

        Any ServerTimestamp value in ``document`` must be resolved to the
        store's clock at commit time. Errors from the underlying client
        are raised as-is.
        """

    def close(self) -> None:
        """Release client resources. Called once at process shutdown."""
