"""The wren App: route registration, lifecycle hooks, and the ASGI entry point.

Routes and hooks are added while the module is imported. The first
request, lifespan event, or ``app.run()`` freezes the app; from then on
the route table is read-only.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any, overload

from wren._internal.asgi import Receive, Scope, Send
from wren._internal.invoke import invoke
from wren._internal.types import Handler
from wren.config import AppConfig
from wren.endpoint import Endpoint
from wren.observe import LoggingObserver, RequestObserver
from wren.routing.route import Route
from wren.routing.router import Router
from wren.server.handler import handle_request
from wren.static import StaticFiles

logger = logging.getLogger("wren.app")


class App:
    """The wren application.

    Holds its own route table; nothing is registered process-wide, so
    several apps can live side by side (handy in tests)::

        app = App()

        @app.get("/users/:id")
        async def show_user(req):
            return Text(f"user {req.params['id']}")

        app.post("/users", create_user)

    Thread safety:
        Registration is single-threaded (decorators at import time). The
        freeze transition uses a Lock + double-check so exactly one
        thread compiles the route table, even if several ASGI workers
        deliver their first request at once.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_observer",
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "_static",
        "config",
    )

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        observer: RequestObserver | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self._router: Router = Router()
        self._observer: RequestObserver = observer or LoggingObserver()
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Built by _freeze()
        self._static: StaticFiles | None = None

    # -- Route registration --

    @overload
    def get(self, template: str, handler: Handler, *, query: type | None = None) -> Handler: ...

    @overload
    def get(
        self, template: str, handler: None = None, *, query: type | None = None
    ) -> Callable[[Handler], Handler]: ...

    def get(
        self,
        template: str,
        handler: Handler | None = None,
        *,
        query: type | None = None,
    ) -> Any:
        """Register a GET handler, directly or as a decorator.

        Args:
            template: Path template; ``/:name`` segments become
                ``req.params["name"]``.
            handler: Sync or async callable receiving a ``GetRequest``.
            query: Optional dataclass to validate the query string into.
        """
        return self._register("GET", template, handler, lambda h: Endpoint(get=h, query=query))

    @overload
    def post(self, template: str, handler: Handler, *, body: type | None = None) -> Handler: ...

    @overload
    def post(
        self, template: str, handler: None = None, *, body: type | None = None
    ) -> Callable[[Handler], Handler]: ...

    def post(
        self,
        template: str,
        handler: Handler | None = None,
        *,
        body: type | None = None,
    ) -> Any:
        """Register a POST handler, directly or as a decorator.

        Args:
            template: Path template; ``/:name`` segments become
                ``req.params["name"]``.
            handler: Sync or async callable receiving a ``PostRequest``.
            body: Optional dataclass to validate the parsed body into.
        """
        return self._register("POST", template, handler, lambda h: Endpoint(post=h, body=body))

    def endpoint(
        self,
        template: str,
        *,
        get: Handler | None = None,
        post: Handler | None = None,
        query: type | None = None,
        body: type | None = None,
    ) -> Endpoint:
        """Register one Endpoint serving both GET and POST on *template*.

        The endpoint is added to the route list of each method, so a GET
        to a POST-only endpoint (or the reverse) is answered with 400 by
        the endpoint itself rather than falling through.
        """
        self._check_not_frozen()
        ep = Endpoint(get=get, post=post, query=query, body=body)
        self._add_endpoint(template, ep)
        return ep

    def _register(
        self,
        method: str,
        template: str,
        handler: Handler | None,
        build: Callable[[Handler], Endpoint],
    ) -> Any:
        def decorator(func: Handler) -> Handler:
            self._check_not_frozen()
            self._router.add(Route.create(method, template, self._with_timeout(build(func))))
            return func

        if handler is None:
            return decorator
        return decorator(handler)

    def _add_endpoint(self, template: str, ep: Endpoint) -> None:
        self._with_timeout(ep)
        for method in ("GET", "POST"):
            self._router.add(Route.create(method, template, ep))

    def _with_timeout(self, ep: Endpoint) -> Endpoint:
        if ep.timeout is None:
            ep.timeout = self.config.request_timeout
        return ep

    @property
    def routes(self) -> list[Route]:
        """Registered routes, for introspection."""
        return self._router.routes

    # -- Lifecycle hooks --

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Decorator: run *func* (sync or async) once before serving starts.

        Hooks run in the order they were added. If one raises, the server
        is told startup failed.
        """
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Decorator: run *func* (sync or async) when the server shuts down."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Freeze the app and serve it until interrupted.

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        self._ensure_frozen()

        from wren.server.run import run_server

        run_server(
            self,
            host or self.config.host,
            port or self.config.port,
            workers=self.config.workers,
            reload=self.config.debug,
            log_level=self.config.log_level,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            config=self.config,
            static=self._static,
            observer=self._observer,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Answer the server's lifespan messages.

        The app is frozen before the first startup message is read, so
        registration mistakes surface before any request arrives.
        """
        self._ensure_frozen()

        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await self.startup()
                except Exception as exc:
                    logger.exception("Startup failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def startup(self) -> None:
        """Run startup hooks in registration order."""
        for hook in self._startup_hooks:
            await invoke(hook)

    async def shutdown(self) -> None:
        """Run shutdown hooks in registration order."""
        for hook in self._shutdown_hooks:
            await invoke(hook)

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile routes and open the static root. Caller holds _freeze_lock."""
        self._router.compile()

        if self.config.static_dir is not None:
            self._static = StaticFiles(self.config.static_dir, index=self.config.index_file)

        self._frozen = True
        logger.debug("Frozen with %d route(s)", len(self._router))

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app once it is frozen (first request, lifespan "
                "startup, or app.run()). Register routes and hooks at import time."
            )
            raise RuntimeError(msg)
