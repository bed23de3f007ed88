"""Gridpoint and station models."""

from dataclasses import dataclass, field

from nwsclient.models.common import Point


@dataclass(frozen=True)
class Gridpoint:
    office: str  # forecast office (WFO), three upper-case letters
    grid_x: int
    grid_y: int
    city: str = ""
    state: str = ""


@dataclass(frozen=True)
class Station:
    id: str  # call sign, upper-cased
    name: str = ""
    location: Point = field(default_factory=Point)
