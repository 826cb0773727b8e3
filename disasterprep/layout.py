"""Screen layout for drawing a disaster-planning scenario.

Works out where each city of a scenario lands on a canvas, how a city's
label is shortened, and how a city counts as covered by a set of supply
locations.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import AbstractSet

from disasterprep.parser import DisasterTest

BUFFER_SPACE = 60.0
"""Space left empty around the edge of the canvas."""

LOGICAL_PADDING = 1e-5
"""Padding added to the data range so collinear points still have extent."""

MAX_LABEL_LENGTH = 3
"""Longest label drawn inside a city."""

CITY_RADIUS = 25.0
"""Radius of a city on screen."""


class CityState(enum.Enum):
    """How a city is covered by a set of supply locations."""

    UNCOVERED = 0
    COVERED_INDIRECTLY = 1
    COVERED_DIRECTLY = 2


@dataclass(frozen=True)
class Geometry:
    """The data range of a scenario and the canvas area it is drawn into."""

    min_data_x: float
    min_data_y: float
    max_data_x: float
    max_data_y: float
    min_draw_x: float
    min_draw_y: float
    max_draw_x: float
    max_draw_y: float

    def to_physical(self, x: float, y: float) -> tuple[float, float]:
        """Convert a point in scenario coordinates to canvas coordinates."""
        px = (x - self.min_data_x) / (self.max_data_x - self.min_data_x) * (
            self.max_draw_x - self.min_draw_x
        ) + self.min_draw_x
        py = (y - self.min_data_y) / (self.max_data_y - self.min_data_y) * (
            self.max_draw_y - self.min_draw_y
        ) + self.min_draw_y
        return px, py


def compute_geometry(
    test: DisasterTest, canvas_width: float, canvas_height: float
) -> Geometry | None:
    """Fit the scenario into the canvas, keeping its aspect ratio.

    Returns None when there is nothing to draw: the canvas is too small to
    leave room inside its border, or the scenario has no cities.
    """
    if canvas_width <= 2 * BUFFER_SPACE or canvas_height <= 2 * BUFFER_SPACE:
        return None
    if not test.city_locations:
        return None

    xs = [x for x, _ in test.city_locations.values()]
    ys = [y for _, y in test.city_locations.values()]
    min_data_x = min(xs, default=math.inf) - LOGICAL_PADDING
    min_data_y = min(ys, default=math.inf) - LOGICAL_PADDING
    max_data_x = max(xs, default=-math.inf) + LOGICAL_PADDING
    max_data_y = max(ys, default=-math.inf) + LOGICAL_PADDING

    win_width = canvas_width - 2 * BUFFER_SPACE
    win_height = canvas_height - 2 * BUFFER_SPACE
    win_aspect = win_width / win_height
    data_aspect = (max_data_x - min_data_x) / (max_data_y - min_data_y)

    if data_aspect >= win_aspect:
        data_width = win_width
        data_height = data_width / data_aspect
    else:
        data_height = win_height
        data_width = data_aspect * data_height

    min_draw_x = (win_width - data_width) / 2.0 + BUFFER_SPACE
    min_draw_y = (win_height - data_height) / 2.0 + BUFFER_SPACE

    return Geometry(
        min_data_x=min_data_x,
        min_data_y=min_data_y,
        max_data_x=max_data_x,
        max_data_y=max_data_y,
        min_draw_x=min_draw_x,
        min_draw_y=min_draw_y,
        max_draw_x=min_draw_x + data_width,
        max_draw_y=min_draw_y + data_height,
    )


def shorthand_for(name: str) -> str:
    """Return a short label for a city name.

    A single word gives its first three letters; several words give their
    initials, at most three of them.
    """
    components = name.split(" ")
    if len(components) == 1:
        return components[0][:MAX_LABEL_LENGTH]

    initials = (component[0] for component in components if component)
    return "".join(initials)[:MAX_LABEL_LENGTH]


def city_state(
    city: str,
    network: Mapping[str, Iterable[str]],
    selected: AbstractSet[str],
) -> CityState:
    """Return how ``city`` is covered by the ``selected`` supply locations."""
    if city in selected:
        return CityState.COVERED_DIRECTLY
    if any(neighbor in selected for neighbor in network.get(city, ())):
        return CityState.COVERED_INDIRECTLY
    return CityState.UNCOVERED