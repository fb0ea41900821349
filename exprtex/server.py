"""
A small web service that converts expressions into LaTeX.

Send a POST request to /render with a JSON payload of the format:

{
    "expression": "sqrt(x^2 + 1)" // required, the expression to convert
}

or a GET request to /render?expression=...

The response is a JSON object of the format:

{
    "status": "ok", // "ok" or "error"
    "result": "\\sqrt{x^{2}+1}", // the LaTeX, only if successful
    "kind": "syntax", // "syntax", "format" or "internal", only for conversion errors
    "reason": "Unexpected end of input", // the error message, only if unsuccessful
    "span": [4, 1] // [offset, length] of the token that caused the error, or null if unknown
}
"""

import asyncio
import logging
import marshmallow
import typing
from aiohttp import web
from . import parser, renderer, schemas, util
from .errors import ExpressionError


logger = logging.getLogger("exprtex")


class Server:
    """
    A class that starts a web server and converts expressions.
    """

    def __init__(self, config: schemas.Config, version: str = ""):
        self.config = config
        self.version = version
        self.request_schema = schemas.RenderRequestSchema(max_length=config.max_length)
        self.app = None # type: web.Application
        self.runner = None # type: web.AppRunner
        self.site = None # type: web.TCPSite
        self._closed = None # type: asyncio.Event

    def make_app(self) -> web.Application:
        """
        Create the web application without starting it.
        """
        app = web.Application()
        router = app.router
        router.add_get("/", self._homepage_handler)
        router.add_post("/render", self._render_handler_post)
        router.add_get("/render", self._render_handler_get)
        return app

    async def start(self):
        """
        Start the server.
        """
        self._closed = asyncio.Event()
        self.app = self.make_app()
        self.runner = web.AppRunner(self.app)
        await self.runner.setup()
        self.site = web.TCPSite(self.runner, self.config.host, self.config.port)
        await self.site.start()
        logger.info(f"Started web server on {self.config.host}:{self.config.port}.")

    async def wait_closed(self):
        """
        Wait until close() is called.
        """
        await self._closed.wait()

    def close(self):
        """
        Make wait_closed() return.
        """
        self._closed.set()

    async def stop(self):
        """
        Stop the server.
        """
        await self.runner.cleanup()

    async def _homepage_handler(self, req: web.Request): # pylint: disable=unused-argument
        """
        Handle a GET request to the homepage.
        """
        return web.Response(text=f"exprtex {self.version} is running. POST to /render to convert expressions.")

    async def _render_handler_post(self, req: web.Request):
        """
        Handle a POST request to convert an expression.
        """
        if req.content_type not in ("application/json", "text/json"):
            logger.warning(f"Rejected request with content type {req.content_type}")
            return web.json_response({"status": "error", "reason": "Request must be JSON."}, status=400)
        try:
            payload = await req.json()
        except ValueError as e:
            # Also covers bodies that are not valid UTF-8
            logger.warning(f"Rejected request with invalid JSON: {e}")
            return web.json_response({"status": "error", "reason": f"Invalid JSON: {e}"}, status=400)
        return self.convert(payload)

    async def _render_handler_get(self, req: web.Request):
        """
        Handle a GET request to convert an expression.
        """
        return self.convert(dict(req.query))

    def convert(self, payload: typing.Any) -> web.Response:
        """
        Convert the expression in a request payload and create the response.
        """
        try:
            request = self.request_schema.load(payload)
        except marshmallow.ValidationError as e:
            reason = util.format_validation_error(e)
            logger.warning(f"Rejected invalid request: {reason}")
            return web.json_response({"status": "error", "reason": reason}, status=400)

        try:
            result = renderer.render(parser.parse(request.expression))
        except ExpressionError as e:
            logger.warning(f"Cannot convert {request.expression!r}: {type(e).__name__}: {e.message}")
            return web.json_response({
                "status": "error",
                "kind": e.kind,
                "reason": e.message,
                "span": list(e.span) if e.span is not None else None,
            }, status=500 if e.kind == "internal" else 400)
        return web.json_response({"status": "ok", "result": result})
