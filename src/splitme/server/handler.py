"""ASGI handler — translates ASGI scope/messages to splitme types.

The only component that touches raw HTTP scopes. Builds the typed
Request, runs it through the middleware chain and the dispatcher, and
sends the Response back through ASGI send().
"""

from collections.abc import Awaitable, Callable

from splitme.server.asgi import Receive, Scope, Send
from splitme.errors import HTTPError
from splitme.http.request import Request
from splitme.http.response import Response
from splitme.middleware.protocol import Middleware, Next
from splitme.server.errors import handle_http_error, handle_internal_error
from splitme.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    dispatch: Callable[[Request], Awaitable[Response]],
    middleware: tuple[Middleware, ...] = (),
    debug: bool = False,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    handler: Next = dispatch
    for mw in reversed(middleware):

        async def make_next(req: Request, _mw: Middleware = mw, _next: Next = handler) -> Response:
            return await _mw(req, _next)

        handler = make_next

    try:
        response = await handler(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug=debug)

    await send_response(response, send, head=request.method == "HEAD")
