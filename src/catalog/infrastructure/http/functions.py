"""HTTP functions served by the Functions Framework.

Each function is a deploy target: ``add_product`` and ``hello_world``.
Neither checks the HTTP method. Exceptions other than request-shape
errors are left to the framework, which logs them and answers 500.
"""

from __future__ import annotations

import logging

import flask
import functions_framework

from catalog.domain.exceptions import DomainException
from catalog.infrastructure import bootstrap
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.logging_config import configure_logging

logger = logging.getLogger(__name__)

HELLO_TEXT = "Hello from Firebase!"

configure_logging(get_settings().log_level)


@functions_framework.http
def add_product(request: flask.Request) -> flask.Response | tuple[flask.Response, int]:
    """Store the JSON body as a product and return its generated ID."""
    handler = bootstrap.add_product_handler()

    # A missing or unparsable body is an empty product, as in the hosted runtime.
    body = request.get_json(silent=True)
    if body is None:
        body = {}

    try:
        result = handler.handle(body)
    except DomainException as exc:
        logger.warning("Rejected product payload: %s", exc)
        return flask.jsonify({"error": str(exc)}), 400

    return flask.jsonify(result.to_json())


@functions_framework.http
def hello_world(request: flask.Request) -> flask.Response:
    logger.info("Hello logs!")
    return flask.Response(HELLO_TEXT, status=200, mimetype="text/plain")
