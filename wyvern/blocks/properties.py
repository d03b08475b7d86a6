"""Enumerated block state properties and their string forms."""

from enum import Enum


class _Property(Enum):
    def __str__(self) -> str:
        return self.value


class BlockDirection(_Property):
    UP = "up"
    DOWN = "down"
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class Axis(_Property):
    X = "x"
    Y = "y"
    Z = "z"


class BedPart(_Property):
    HEAD = "head"
    FOOT = "foot"


class Half(_Property):
    TOP = "top"
    BOTTOM = "bottom"


class StairShape(_Property):
    STRAIGHT = "straight"
    INNER_LEFT = "inner_left"
    INNER_RIGHT = "inner_right"
    OUTER_LEFT = "outer_left"
    OUTER_RIGHT = "outer_right"


class BlockType(_Property):
    SINGLE = "single"
    DOUBLE = "double"
    TOP = "top"
    BOTTOM = "bottom"