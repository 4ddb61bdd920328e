"""Routes grouped by HTTP verb, most specific first."""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping, Sequence

from beauty.route import Route


class Verb(str, enum.Enum):
    """HTTP request methods."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"


def _specificity(route: Route) -> tuple[int, int]:
    # Fewer segments first; among equals, parameters towards the end rank
    # before parameters towards the start, static segments first of all.
    cost = sum(
        1 << power
        for power, segment in enumerate(reversed(route.segments))
        if segment.startswith(":")
    )
    return len(route.segments), cost


class Router(Mapping[Verb, Sequence[Route]]):
    """Mapping of each verb to its routes, kept in matching order."""

    def __init__(self) -> None:
        self._routes: dict[Verb, list[Route]] = {}

    def add_route(self, verb: Verb | str, route: Route) -> None:
        """Register ``route`` for ``verb`` and keep the routes ordered."""
        routes = self._routes.setdefault(Verb(verb), [])
        routes.append(route)
        routes.sort(key=_specificity)

    def find(self, verb: Verb | str) -> Sequence[Route]:
        """Return the routes for ``verb`` in matching order, empty if none."""
        return tuple(self._routes.get(Verb(verb), ()))

    def __getitem__(self, verb: Verb) -> Sequence[Route]:
        return tuple(self._routes[Verb(verb)])

    def __iter__(self) -> Iterator[Verb]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)