"""An HTTP server front end: route registration and the API description."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from beauty.application import Application, instance
from beauty.responses import ContentType, Response
from beauty.route import Route, RouteCallback
from beauty.router import Router, Verb
from beauty.swagger import RouteInfo, ServerInfo, swagger_path

_OPENAPI_VERSION = "3.0.1"
_SWAGGER_DESCRIPTION = "Swagger API description entrypoint"


class ServerRoute:
    """One path on a server, to which several verbs can be bound in turn."""

    def __init__(self, server: Server, path: str) -> None:
        self._server = server
        self.path = path

    def get(self, callback: RouteCallback, route_info: RouteInfo | None = None) -> ServerRoute:
        self._server.get(self.path, callback, route_info)
        return self

    def put(self, callback: RouteCallback, route_info: RouteInfo | None = None) -> ServerRoute:
        self._server.put(self.path, callback, route_info)
        return self

    def post(self, callback: RouteCallback, route_info: RouteInfo | None = None) -> ServerRoute:
        self._server.post(self.path, callback, route_info)
        return self

    def options(
        self, callback: RouteCallback, route_info: RouteInfo | None = None
    ) -> ServerRoute:
        self._server.options(self.path, callback, route_info)
        return self

    def delete(
        self, callback: RouteCallback, route_info: RouteInfo | None = None
    ) -> ServerRoute:
        self._server.delete(self.path, callback, route_info)
        return self

    def ws(self, handler: Any) -> ServerRoute:
        self._server.ws(self.path, handler)
        return self

    def __repr__(self) -> str:
        return f"ServerRoute({self.path!r})"


class Server:
    """Holds the routes of an HTTP server and the application that runs it.

    Registration methods return the server so that calls can be chained.
    Usable as a context manager: leaving it stops the server.
    """

    def __init__(self, app: Application | None = None) -> None:
        self.app = app if app is not None else instance()
        self.router = Router()
        self.info = ServerInfo()
        self._concurrency = 1

    def concurrency(self, value: int) -> Server:
        """Set the number of worker threads used when the server starts."""
        self._concurrency = value
        return self

    def add_route(self, path: str) -> ServerRoute:
        return ServerRoute(self, path)

    def _add(
        self,
        verb: Verb,
        path: str,
        callback: RouteCallback,
        route_info: RouteInfo | None,
    ) -> Server:
        self.router.add_route(verb, Route(path, callback, route_info or RouteInfo()))
        return self

    def get(
        self, path: str, callback: RouteCallback, route_info: RouteInfo | None = None
    ) -> Server:
        return self._add(Verb.GET, path, callback, route_info)

    def put(
        self, path: str, callback: RouteCallback, route_info: RouteInfo | None = None
    ) -> Server:
        return self._add(Verb.PUT, path, callback, route_info)

    def post(
        self, path: str, callback: RouteCallback, route_info: RouteInfo | None = None
    ) -> Server:
        return self._add(Verb.POST, path, callback, route_info)

    def options(
        self, path: str, callback: RouteCallback, route_info: RouteInfo | None = None
    ) -> Server:
        return self._add(Verb.OPTIONS, path, callback, route_info)

    def delete(
        self, path: str, callback: RouteCallback, route_info: RouteInfo | None = None
    ) -> Server:
        return self._add(Verb.DELETE, path, callback, route_info)

    def ws(self, path: str, handler: Any) -> Server:
        """Register a WebSocket route, reached through GET."""
        self.router.add_route(Verb.GET, Route(path, ws_handler=handler))
        return self

    def stop(self) -> None:
        self.app.stop()

    def run(self) -> None:
        """Run the application loop in the calling thread."""
        self.app.run()

    def wait(self) -> None:
        """Block until the application is stopped."""
        self.app.wait()

    def enable_swagger(self, entrypoint: str = "/swagger") -> None:
        """Serve an OpenAPI description of every route at ``entrypoint``."""
        self.get(
            entrypoint,
            self._swagger_handler(),
            RouteInfo(description=_SWAGGER_DESCRIPTION),
        )

    def _swagger_handler(self) -> Callable[[Any, Response], None]:
        def handler(request: Any, response: Response) -> None:
            response.set_header("Access-Control-Allow-Origin", "*")
            response.set_content_type(ContentType.APPLICATION_JSON)
            response.body = json.dumps(self._swagger_document(), separators=(",", ":"))

        return handler

    def _swagger_document(self) -> dict[str, Any]:
        paths: dict[str, Any] = {}
        for verb, routes in self.router.items():
            for route in routes:
                description: dict[str, Any] = {"description": route.route_info.description}
                # Each parameter replaces the previous one: only the last is kept.
                for param in route.route_info.route_parameters:
                    description["parameters"] = {
                        "name": param.name,
                        "in": param.in_,
                        "description": param.description,
                        "required": param.required,
                        "schema": {"type": param.type, "format": param.format},
                    }
                # A later verb on the same path replaces the earlier entry.
                paths[swagger_path(route)] = {verb.value.lower(): description}

        return {
            "openapi": _OPENAPI_VERSION,
            "info": {
                "title": self.info.title,
                "description": self.info.description,
                "version": self.info.version,
            },
            "paths": paths,
        }

    def __enter__(self) -> Server:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def __repr__(self) -> str:
        return f"Server(app={self.app!r})"