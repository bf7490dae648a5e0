"""
Epox Artificial Ant

A minimal artificial-ant world used as the context object for the ant
action functions (MOVE, TURN-LEFT, IF-FOOD-AHEAD, ...). The landscape is
a toroidal grid of food cells backed by a numpy boolean array.
"""

from enum import Enum
from typing import Iterable, Optional, Tuple

import numpy as np

Location = Tuple[int, int]


class Orientation(Enum):
    """Compass direction an ant faces, valued as a (dx, dy) step."""
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)


_CLOCKWISE = [Orientation.NORTH, Orientation.EAST, Orientation.SOUTH, Orientation.WEST]


class AntLandscape:
    """Toroidal grid of cells, each holding food or not."""

    def __init__(self, width: int, height: int, food_locations: Iterable[Location] = ()):
        if width <= 0 or height <= 0:
            raise ValueError(f"Landscape dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.food = np.zeros((height, width), dtype=bool)
        for x, y in food_locations:
            self.set_food_at((x, y))

    def wrap(self, location: Location) -> Location:
        x, y = location
        return (x % self.width, y % self.height)

    def is_food_at(self, location: Location) -> bool:
        x, y = self.wrap(location)
        return bool(self.food[y, x])

    def set_food_at(self, location: Location) -> None:
        x, y = self.wrap(location)
        self.food[y, x] = True

    def remove_food_at(self, location: Location) -> None:
        x, y = self.wrap(location)
        self.food[y, x] = False

    @property
    def food_count(self) -> int:
        return int(np.count_nonzero(self.food))


class Ant:
    """
    An ant moving over an AntLandscape with a limited number of moves.

    Every action (move, turn or skip) consumes one move. Once max_moves
    is reached further actions have no effect.
    """

    def __init__(self, landscape: AntLandscape, max_moves: int = 600,
                 location: Location = (0, 0), orientation: Orientation = Orientation.EAST):
        self.landscape = landscape
        self.max_moves = max_moves
        self.location = landscape.wrap(location)
        self.orientation = orientation
        self.moves = 0
        self.food_eaten = 0

    def reset(self, location: Location = (0, 0), orientation: Orientation = Orientation.EAST,
              landscape: Optional[AntLandscape] = None) -> None:
        if landscape is not None:
            self.landscape = landscape
        self.location = self.landscape.wrap(location)
        self.orientation = orientation
        self.moves = 0
        self.food_eaten = 0

    def can_act(self) -> bool:
        return self.moves < self.max_moves

    def location_ahead(self) -> Location:
        dx, dy = self.orientation.value
        x, y = self.location
        return self.landscape.wrap((x + dx, y + dy))

    def is_food_ahead(self) -> bool:
        return self.landscape.is_food_at(self.location_ahead())

    def move(self) -> None:
        if not self.can_act():
            return
        self.moves += 1
        self.location = self.location_ahead()
        if self.landscape.is_food_at(self.location):
            self.landscape.remove_food_at(self.location)
            self.food_eaten += 1

    def turn_left(self) -> None:
        self._turn(-1)

    def turn_right(self) -> None:
        self._turn(1)

    def skip(self) -> None:
        if self.can_act():
            self.moves += 1

    def _turn(self, step: int) -> None:
        if not self.can_act():
            return
        self.moves += 1
        idx = _CLOCKWISE.index(self.orientation)
        self.orientation = _CLOCKWISE[(idx + step) % len(_CLOCKWISE)]
