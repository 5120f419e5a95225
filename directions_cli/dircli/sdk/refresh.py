"""Directions refresh v1 response models."""

from __future__ import annotations

from dircli.sdk.models import DirectionsJsonObject, Incident, LegAnnotation


class RouteLegRefresh(DirectionsJsonObject):
    annotation: LegAnnotation | None = None
    incidents: list[Incident] | None = None


class DirectionsRouteRefresh(DirectionsJsonObject):
    legs: list[RouteLegRefresh] | None = None


class DirectionsRefreshResponse(DirectionsJsonObject):
    """Response of the route refresh endpoint: fresh annotations for one route."""

    code: str
    message: str | None = None
    route: DirectionsRouteRefresh | None = None
