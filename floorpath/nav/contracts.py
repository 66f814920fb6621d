"""Validated floor document contracts."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from floorpath.nav.coordinate import Coordinate
from floorpath.nav.obstacles import Circle, Obstacle, Rectangle


class PointModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    x: float
    y: float
    heading: float | None = None
    is_walkable: bool = Field(default=True, alias="isWalkable")
    name: str | None = None

    def to_coordinate(self) -> Coordinate:
        return Coordinate(
            x=self.x,
            y=self.y,
            heading=self.heading or 0.0,
            is_walkable=self.is_walkable,
            name=self.name,
        )


class RectangleObstacleModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    type: Literal["RectangleObstacle"]
    top_left: PointModel = Field(alias="topLeft")
    bottom_right: PointModel = Field(alias="bottomRight")

    @model_validator(mode="after")
    def validate_corners(self) -> "RectangleObstacleModel":
        if (
            self.top_left.x > self.bottom_right.x
            or self.top_left.y > self.bottom_right.y
        ):
            raise ValueError("topLeft must not lie past bottomRight")
        return self

    def to_obstacle(self) -> Rectangle:
        return Rectangle(
            top_left=self.top_left.to_coordinate(),
            bottom_right=self.bottom_right.to_coordinate(),
        )


class CircleObstacleModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["Circle"]
    center: PointModel
    radius: float = Field(ge=0)

    def to_obstacle(self) -> Circle:
        return Circle(center=self.center.to_coordinate(), radius=self.radius)


ObstacleModel = Annotated[
    Union[RectangleObstacleModel, CircleObstacleModel],
    Field(discriminator="type"),
]


class FloorModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    floor_id: str = Field(alias="floorId")
    width: float | None = Field(default=None, ge=0)
    height: float | None = Field(default=None, ge=0)
    end_locations: list[PointModel] = Field(
        default_factory=list, alias="endLocations"
    )
    obstacles: list[ObstacleModel] = Field(default_factory=list)

    def to_obstacles(self) -> list[Obstacle]:
        return [obstacle.to_obstacle() for obstacle in self.obstacles]

    def to_end_locations(self) -> list[Coordinate]:
        return [point.to_coordinate() for point in self.end_locations]


class FloorsDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    floors: list[FloorModel]

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "FloorsDocument":
        seen: set[str] = set()
        for floor in self.floors:
            if floor.floor_id in seen:
                raise ValueError(f"duplicate floorId {floor.floor_id}")
            seen.add(floor.floor_id)
        return self
