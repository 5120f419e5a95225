"""Directions v5 response models.

Field order matches the wire order the Directions API serializer writes, so a
canonical response re-encodes byte-for-byte. Unknown keys are kept as extras
and written back after the declared fields.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DirectionsJsonObject(BaseModel):
    """Base for every Directions model: keeps unrecognized properties."""

    model_config = ConfigDict(extra="allow")

    @property
    def unrecognized_properties(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class Admin(DirectionsJsonObject):
    country_code: str | None = Field(default=None, alias="iso_3166_1")
    country_code_alpha3: str | None = Field(default=None, alias="iso_3166_1_alpha3")


class DirectionsWaypoint(DirectionsJsonObject):
    name: str | None = None
    location: list[float] | None = None
    distance: float | None = None


class StepManeuver(DirectionsJsonObject):
    """Maneuver at the start of a step. ``location`` is ``[lon, lat]``."""

    location: list[float]
    bearing_before: float | None = None
    bearing_after: float | None = None
    instruction: str | None = None
    type: str | None = None
    modifier: str | None = None
    exit: int | None = None


class StepIntersection(DirectionsJsonObject):
    location: list[float]
    bearings: list[int] | None = None
    classes: list[str] | None = None
    entry: list[bool] | None = None
    in_: int | None = Field(default=None, alias="in")
    out: int | None = None
    lanes: list[dict[str, Any]] | None = None
    geometry_index: int | None = None


class LegStep(DirectionsJsonObject):
    distance: float
    duration: float
    duration_typical: float | None = None
    speed_limit_unit: str | None = Field(default=None, alias="speedLimitUnit")
    speed_limit_sign: str | None = Field(default=None, alias="speedLimitSign")
    geometry: str | None = None
    name: str | None = None
    ref: str | None = None
    destinations: str | None = None
    mode: str
    pronunciation: str | None = None
    rotary_name: str | None = None
    rotary_pronunciation: str | None = None
    maneuver: StepManeuver
    voice_instructions: list[dict[str, Any]] | None = Field(
        default=None, alias="voiceInstructions"
    )
    banner_instructions: list[dict[str, Any]] | None = Field(
        default=None, alias="bannerInstructions"
    )
    driving_side: str | None = None
    weight: float
    intersections: list[StepIntersection] | None = None
    exits: str | None = None


class Incident(DirectionsJsonObject):
    id: str
    type: str | None = None
    closed: bool | None = None
    description: str | None = None
    impact: str | None = None
    sub_type: str | None = None
    alertc_codes: list[int] | None = None
    geometry_index_start: int | None = None
    geometry_index_end: int | None = None
    creation_time: str | None = None
    start_time: str | None = None
    end_time: str | None = None


class LegAnnotation(DirectionsJsonObject):
    distance: list[float] | None = None
    duration: list[float] | None = None
    speed: list[float] | None = None
    maxspeed: list[dict[str, Any]] | None = None
    congestion: list[str] | None = None
    congestion_numeric: list[int | None] | None = None


class RouteLeg(DirectionsJsonObject):
    distance: float | None = None
    duration: float | None = None
    duration_typical: float | None = None
    summary: str | None = None
    admins: list[Admin] | None = None
    steps: list[LegStep] | None = None
    incidents: list[Incident] | None = None
    annotation: LegAnnotation | None = None


class DirectionsRoute(DirectionsJsonObject):
    route_index: str | None = Field(default=None, alias="routeIndex")
    distance: float
    duration: float
    duration_typical: float | None = None
    geometry: str | None = None
    weight: float | None = None
    weight_typical: float | None = None
    weight_name: str | None = None
    legs: list[RouteLeg] | None = None
    waypoints: list[DirectionsWaypoint] | None = None
    route_options: dict[str, Any] | None = Field(default=None, alias="routeOptions")
    voice_language: str | None = Field(default=None, alias="voiceLocale")
    request_uuid: str | None = Field(default=None, alias="requestUuid")
    toll_costs: list[dict[str, Any]] | None = None


class Metadata(DirectionsJsonObject):
    info_map: dict[str, str] | None = Field(default=None, alias="map")


class DirectionsResponse(DirectionsJsonObject):
    """Top-level Directions API response."""

    code: str
    message: str | None = None
    waypoints: list[DirectionsWaypoint] | None = None
    routes: list[DirectionsRoute]
    uuid: str | None = None
    metadata: Metadata | None = None

    def with_route_indices(self) -> DirectionsResponse:
        """Return a copy whose routes carry their index and the response uuid."""
        routes = [
            route.model_copy(update={"route_index": str(i), "request_uuid": self.uuid})
            for i, route in enumerate(self.routes)
        ]
        return self.model_copy(update={"routes": routes})
