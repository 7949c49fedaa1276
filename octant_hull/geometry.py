import math
import typing as t

from octant_hull import constants, errors
from octant_hull.constants import Direction
from octant_hull.data import DirectionPair, Point


def relative_direction(from_: Point, to: Point) -> DirectionPair:
    """
    Compass direction of travel from one point to another, vertical part
    first. (0, 0) to (1, 1) is (NORTH, EAST); (0, 0) to (1, 0) is
    (EAST, NONE).
    """
    directions = []
    if to.y > from_.y:
        directions.append(Direction.NORTH)
    elif to.y < from_.y:
        directions.append(Direction.SOUTH)
    if to.x > from_.x:
        directions.append(Direction.EAST)
    elif to.x < from_.x:
        directions.append(Direction.WEST)
    return DirectionPair(*directions)


def slope(from_: Point, to: Point) -> float:
    x_diff = float(to.x - from_.x)
    if x_diff == 0:
        return math.inf
    return (to.y - from_.y) / x_diff


def squared_magnitude(from_: Point, to: Point) -> float:
    x_diff = float(to.x - from_.x)
    y_diff = float(to.y - from_.y)
    return x_diff * x_diff + y_diff * y_diff


def _axis_value(point: Point, direction: Direction) -> int:
    if direction in constants.VERTICAL_DIRECTIONS:
        return point.y
    return point.x


def extremal_points(
    points: t.Sequence[Point],
    direction: Direction,
) -> t.List[Point]:
    """
    All points tied for the extreme along ``direction``: NORTH is the
    greatest y, SOUTH the least, EAST the greatest x and WEST the least.
    Input order is kept.
    """
    if not points:
        raise errors.PreconditionViolation(
            'Cannot find extremal points of an empty point set')
    if direction == Direction.NONE:
        raise errors.PreconditionViolation(
            'An axis direction is required to find extremal points')
    pick = max if direction in constants.MAXIMIZING_DIRECTIONS else min
    best = pick(_axis_value(p, direction) for p in points)
    return [p for p in points if _axis_value(p, direction) == best]


def inflection_point(points: t.Sequence[Point], pair: DirectionPair) -> Point:
    # primary axis first, secondary axis breaks the tie
    return extremal_points(extremal_points(points, pair.first),
                           pair.second)[0]
