"""Load floor obstacles and destinations from a JSON floor document."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from floorpath.nav.contracts import FloorModel, FloorsDocument
from floorpath.nav.coordinate import Coordinate
from floorpath.nav.obstacles import Circle, Obstacle, Rectangle


@dataclass(frozen=True)
class FloorData:
    floor_id: str
    width: float
    height: float
    end_locations: list[Coordinate]
    obstacles: list[Obstacle]

    def destination_names(self) -> list[str]:
        return [point.name for point in self.end_locations if point.name]


def load_floors(path: Path) -> FloorsDocument:
    return FloorsDocument.model_validate(_load_json(path))


def load_floor_data(path: Path, floor_id: str) -> FloorData:
    document = load_floors(path)
    for floor in document.floors:
        if floor.floor_id == floor_id:
            return _to_floor_data(floor)
    known = ", ".join(floor.floor_id for floor in document.floors) or "none"
    raise ValueError(f"No floor {floor_id!r} in {path} (known: {known}).")


def find_destination(floor: FloorData, name: str) -> Coordinate:
    wanted = name.strip().lower()
    for point in floor.end_locations:
        if point.name and point.name.lower() == wanted:
            return point
    raise ValueError(
        f"Unknown destination {name!r} on floor {floor.floor_id}. "
        f"Available: {', '.join(floor.destination_names()) or 'none'}."
    )


def _to_floor_data(floor: FloorModel) -> FloorData:
    obstacles = floor.to_obstacles()
    end_locations = floor.to_end_locations()
    width, height = floor.width, floor.height
    if width is None or height is None:
        inferred_width, inferred_height = _infer_extent(obstacles, end_locations)
        logger.debug(
            f"[floor] {floor.floor_id} has no explicit size, inferred "
            f"{inferred_width}x{inferred_height}"
        )
        width = inferred_width if width is None else width
        height = inferred_height if height is None else height
    return FloorData(
        floor_id=floor.floor_id,
        width=width,
        height=height,
        end_locations=end_locations,
        obstacles=obstacles,
    )


def _infer_extent(
    obstacles: list[Obstacle], end_locations: list[Coordinate]
) -> tuple[float, float]:
    xs = [point.x for point in end_locations]
    ys = [point.y for point in end_locations]
    for obstacle in obstacles:
        match obstacle:
            case Rectangle(bottom_right=bottom_right):
                xs.append(bottom_right.x)
                ys.append(bottom_right.y)
            case Circle(center=center, radius=radius):
                xs.append(center.x + radius)
                ys.append(center.y + radius)
    return max(xs, default=0.0), max(ys, default=0.0)


def _load_json(path: Path) -> dict:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing floor data file: {path}") from exc
    return json.loads(text)
