"""A route: a path pattern with ``:name`` parameters bound to a handler."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any

from beauty.attributes import Attributes
from beauty.swagger import RouteInfo, RouteParameter
from beauty.utils import split

RouteCallback = Callable[..., Any]


class Route:
    """A path such as ``/topic/:name`` with its handler and description.

    A route built with ``ws_handler`` only matches WebSocket requests; any
    other route only matches plain HTTP requests.
    """

    def __init__(
        self,
        path: str,
        callback: RouteCallback | None = None,
        route_info: RouteInfo | None = None,
        ws_handler: Any = None,
    ) -> None:
        if not path.startswith("/"):
            raise ValueError(f"Route path [{path}] must begin with '/'.")

        self.path = path
        self.callback = callback
        self.ws_handler = ws_handler
        self.is_websocket = ws_handler is not None
        self.segments: tuple[str, ...] = tuple(split(path, "/"))
        self.route_info = RouteInfo(
            route_parameters=[
                RouteParameter(
                    name=segment[1:],
                    in_="path",
                    description="Undefined",
                    type="Undefined",
                    format="",
                    required=True,
                )
                for segment in self.segments
                if segment.startswith(":")
            ]
        )
        if route_info is not None:
            self._update_route_info(route_info)

    def _update_route_info(self, route_info: RouteInfo) -> None:
        self.route_info.description = route_info.description
        by_name = {param.name: param for param in self.route_info.route_parameters}
        for param in route_info.route_parameters:
            found = by_name.get(param.name)
            if found is not None:
                found.description = param.description
                found.type = param.type
                found.format = param.format
            else:
                # Not part of the path, so taken to be a query parameter.
                extra = replace(param, in_=param.in_ or "query")
                self.route_info.route_parameters.append(extra)
                by_name[extra.name] = extra

    def match(self, target: str, is_websocket: bool = False) -> Attributes | None:
        """Match a request target such as ``/topic/x?a=1``.

        Returns the query and path parameters as attributes when the target
        matches (the mapping may be empty), or ``None`` when it does not.
        """
        if self.is_websocket != is_websocket:
            return None

        target_split = split(target, "?")
        request_paths = split(target_split[0], "/")
        if len(self.segments) != len(request_paths):
            return None

        attrs = target_split[1] if len(target_split) > 1 else ""
        for segment, request_segment in zip(self.segments, request_paths):
            if segment.startswith(":"):
                attrs += ("&" if attrs else "") + f"{segment[1:]}={request_segment}"
            elif segment != request_segment:
                return None

        return Attributes(attrs)

    def __repr__(self) -> str:
        kind = "ws" if self.is_websocket else "http"
        return f"Route({self.path!r}, {kind})"