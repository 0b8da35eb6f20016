"""Route context: the routes of the runtime and their lifecycle status."""

import threading
from dataclasses import dataclass, replace

from ..domain.exceptions import RouteAlreadyExistsError, RouteNotFoundError
from ..domain.models import ServiceStatus
from ..observability.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Route:
    """Snapshot of a route."""

    route_id: str
    endpoint_uri: str
    status: ServiceStatus = ServiceStatus.INITIALIZED

    @property
    def consumer_running(self) -> bool:
        """The route consumer only runs while the route is started."""
        return self.status == ServiceStatus.STARTED


class RouteContext:
    """Holds the routes of the runtime.

    Readers always get immutable ``Route`` snapshots, so a concurrent
    start/stop never exposes a half-updated route.
    """

    def __init__(self, name: str):
        self.name = name
        self._status = ServiceStatus.INITIALIZED
        self._routes: dict[str, Route] = {}
        self._lock = threading.Lock()

    @property
    def status(self) -> ServiceStatus:
        with self._lock:
            return self._status

    def start(self) -> None:
        """Mark the context as started. Route status is left untouched."""
        with self._lock:
            self._status = ServiceStatus.STARTED
        logger.info("Route context started", context_name=self.name)

    def stop(self) -> None:
        """Stop the context and all of its routes."""
        with self._lock:
            self._routes = {
                route_id: replace(route, status=ServiceStatus.STOPPED)
                for route_id, route in self._routes.items()
            }
            self._status = ServiceStatus.STOPPED
        logger.info("Route context stopped", context_name=self.name)

    def add_route(
        self, route_id: str, endpoint_uri: str, auto_start: bool = True
    ) -> Route:
        """Add a route to the context."""
        with self._lock:
            if route_id in self._routes:
                raise RouteAlreadyExistsError(route_id)
            status = ServiceStatus.STARTED if auto_start else ServiceStatus.STOPPED
            route = Route(route_id=route_id, endpoint_uri=endpoint_uri, status=status)
            self._routes[route_id] = route

        logger.info(
            "Route added",
            route_id=route_id,
            endpoint_uri=endpoint_uri,
            status=status.value,
        )
        return route

    def get_route(self, route_id: str) -> Route:
        with self._lock:
            try:
                return self._routes[route_id]
            except KeyError:
                raise RouteNotFoundError(route_id) from None

    def routes(self) -> list[Route]:
        """Snapshot of every route in insertion order."""
        with self._lock:
            return list(self._routes.values())

    def start_route(self, route_id: str) -> Route:
        return self._set_route_status(route_id, ServiceStatus.STARTED)

    def stop_route(self, route_id: str) -> Route:
        return self._set_route_status(route_id, ServiceStatus.STOPPED)

    def _set_route_status(self, route_id: str, status: ServiceStatus) -> Route:
        with self._lock:
            if route_id not in self._routes:
                raise RouteNotFoundError(route_id)
            previous = self._routes[route_id]
            route = replace(previous, status=status)
            self._routes[route_id] = route

        if previous.status != status:
            logger.info(
                "Route status changed",
                route_id=route_id,
                previous_status=previous.status.value,
                status=status.value,
            )
        return route
