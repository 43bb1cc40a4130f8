import logging
from typing import Callable, Iterable, Sequence
from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Scope, Receive, Send

logger = logging.getLogger("header_editor.editor")

KeyMutation = Callable[[str], str]
ValuesMutation = Callable[[Sequence[str]], Iterable[str] | str]


class HeaderEditorMiddleware:
    """Renames one request header and rewrites its values before calling ``app``.

    ``key_mutation`` runs once, here in the constructor, so a broken mutation
    fails pipeline assembly instead of the first request. ``values_mutation``
    runs on every request that carries ``key``.
    """

    def __init__(
        self,
        app: ASGIApp,
        key: str,
        key_mutation: KeyMutation,
        values_mutation: ValuesMutation,
    ) -> None:
        for name, value in (
            ("app", app),
            ("key", key),
            ("key_mutation", key_mutation),
            ("values_mutation", values_mutation),
        ):
            if value is None:
                raise ValueError(f"{name} is required")

        self.app = app
        self.key = key
        self.values_mutation = values_mutation
        self.mutated_key = key_mutation(key)
        if not isinstance(self.mutated_key, str):
            raise ValueError(f"key_mutation must return a str, got {type(self.mutated_key).__name__}")

        logger.debug(f"Header editor configured: {self.key!r} -> {self.mutated_key!r}")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        self.rewrite(MutableHeaders(scope=scope))
        await self.app(scope, receive, send)

    def rewrite(self, headers: MutableHeaders) -> None:
        values = headers.getlist(self.key)
        if not values:
            return

        mutated = self.values_mutation(values)
        if isinstance(mutated, str):
            mutated = [mutated]
        # every value must encode before the headers are touched
        mutated = list(mutated)
        for value in mutated:
            value.encode("latin-1")

        del headers[self.key]
        # last write wins over any header already stored under the new key
        del headers[self.mutated_key]
        for value in mutated:
            headers.append(self.mutated_key, value)
