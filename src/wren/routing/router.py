"""Ordered route table.

Routes are registered during setup and frozen when the app starts
serving. Registration order is match priority: the first route added
for a method is the first one tried.
"""

from wren.errors import ConfigurationError
from wren.routing.route import SUPPORTED_METHODS, Route


class Router:
    """One ordered list of routes per HTTP method.

    Usage::

        router = Router()
        router.add(Route.create("GET", "/users/:id", endpoint))
        router.compile()
        for route in router.routes_for("GET"):
            ...
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: dict[str, list[Route]] = {method: [] for method in sorted(SUPPORTED_METHODS)}
        self._compiled = False

    def add(self, route: Route) -> None:
        """Append a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        if route.method not in self._routes:
            allowed = ", ".join(sorted(self._routes))
            msg = f"Unsupported method {route.method!r} for {route.path!r}; expected one of {allowed}."
            raise ConfigurationError(msg)
        self._routes[route.method].append(route)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def supports(self, method: str) -> bool:
        """True if routes can be registered for *method* at all."""
        return method in self._routes

    def routes_for(self, method: str) -> tuple[Route, ...]:
        """Routes for *method* in registration order (empty if unsupported)."""
        return tuple(self._routes.get(method, ()))

    @property
    def routes(self) -> list[Route]:
        """Every registered route, grouped by method.

        Useful for introspection (``wren routes``).
        """
        return [route for method in self._routes for route in self._routes[method]]

    def __len__(self) -> int:
        return sum(len(routes) for routes in self._routes.values())
