import logging
from enum import Enum

DATA_FILE = "../data/cross.pts"
DEFAULT_LOG_LEVEL = logging.INFO

COMMENT_PREFIX = "#"
COORD_DELIMITERS = (",", " ", "\t")


class Direction(str, Enum):
    NONE = ""
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"


VERTICAL_DIRECTIONS = frozenset([Direction.NORTH, Direction.SOUTH])
HORIZONTAL_DIRECTIONS = frozenset([Direction.EAST, Direction.WEST])
MAXIMIZING_DIRECTIONS = frozenset([Direction.NORTH, Direction.EAST])

# Octants crossed, in order, walking counterclockwise around a regular
# octagon from its left-bottom corner.
VALID_PATH_LABELS = ("SE", "E", "NE", "N", "NW", "W", "SW", "S")

# Extreme point that opens each octant of VALID_PATH_LABELS, e.g. "WS" is
# the west-most point, ties broken south-most.
LOCAL_MAXIMUM_LABELS = ("WS", "SW", "SE", "ES", "EN", "NE", "NW", "WN")
