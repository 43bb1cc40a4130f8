import logging
from starlette.types import Scope, Receive, Send
from starlette.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger("header_editor.echo")


class EchoHeadersApp:
    """Terminal app that answers with the request headers it received."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        if scope["type"] != "http":
            await PlainTextResponse("Unsupported", status_code=400)(scope, receive, send)
            return

        await JSONResponse(self.collect_headers(scope))(scope, receive, send)

    @staticmethod
    def collect_headers(scope: Scope) -> dict[str, list[str]]:
        headers: dict[str, list[str]] = {}
        for k, v in scope.get("headers", []):
            headers.setdefault(k.decode("latin-1"), []).append(v.decode("latin-1"))
        return headers

    async def _handle_lifespan(self, scope: Scope, receive: Receive, send: Send):
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                logger.info("[echo] Shutdown complete.")
                await send({"type": "lifespan.shutdown.complete"})
                return
