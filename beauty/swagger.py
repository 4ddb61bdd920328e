"""OpenAPI descriptions of a server, its routes and their parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beauty.route import Route


@dataclass
class ServerInfo:
    """Title, description and version published in the API description."""

    title: str = ""
    description: str = ""
    version: str = ""


@dataclass
class RouteParameter:
    """One parameter of a route; ``in_`` is ``"path"`` or ``"query"``."""

    name: str = ""
    in_: str = ""
    description: str = ""
    type: str = ""
    format: str = ""
    required: bool = False


@dataclass
class RouteInfo:
    """Description of a route and its parameters."""

    description: str = ""
    route_parameters: list[RouteParameter] = field(default_factory=list)


def swagger_path(route: Route) -> str:
    """Return the route path with ``:name`` segments written as ``{name}``."""
    return "/".join(
        f"{{{segment[1:]}}}" if segment.startswith(":") else segment
        for segment in route.segments
    )