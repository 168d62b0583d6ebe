"""Map failures inside the request pipeline to responses.

Matcher-reported errors never reach this module: they are ordinary
outcomes answered by the dispatcher. What arrives here is an
``HTTPError`` raised on purpose, or a bug.
"""

import logging

from splitme.errors import HTTPError
from splitme.http.request import Request
from splitme.http.response import Response, text_response

logger = logging.getLogger("splitme.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Plain-text response carrying the error's status and detail."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)
    response = text_response(exc.detail or f"Error {exc.status}", exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request, *, debug: bool = False) -> Response:
    """Log an unexpected exception and answer 500."""
    logger.exception("500 %s %s", request.method, request.url)
    if debug:
        return text_response(f"Internal Server Error\n\n{type(exc).__name__}: {exc}", 500)
    return text_response("Internal Server Error", 500)
