"""Unit tests for creation-timestamp enrichment."""

from catalog.domain.model.document import (
    CREATED_AT_FIELD,
    SERVER_TIMESTAMP,
    ServerTimestamp,
    with_created_at,
)


class TestServerTimestamp:

    def test_is_singleton(self):
        assert ServerTimestamp() is SERVER_TIMESTAMP

    def test_repr(self):
        assert repr(SERVER_TIMESTAMP) == "SERVER_TIMESTAMP"


class TestWithCreatedAt:

    def test_adds_exactly_one_field(self):
        fields = {"name": "Widget", "price": {"amount": 1, "currency": "USD"}}
        document = with_created_at(fields)
        assert set(document) == set(fields) | {CREATED_AT_FIELD}
        assert document[CREATED_AT_FIELD] is SERVER_TIMESTAMP

    def test_keeps_other_fields_untouched(self):
        document = with_created_at({"name": "Widget", "extra": [1, 2]})
        assert document["name"] == "Widget"
        assert document["extra"] == [1, 2]

    def test_does_not_mutate_input(self):
        fields = {"name": "Widget"}
        with_created_at(fields)
        assert fields == {"name": "Widget"}

    def test_client_supplied_created_at_is_replaced(self):
        document = with_created_at({"name": "Widget", "createdAt": "1999-01-01"})
        assert document[CREATED_AT_FIELD] is SERVER_TIMESTAMP

    def test_empty_input(self):
        assert with_created_at({}) == {CREATED_AT_FIELD: SERVER_TIMESTAMP}
