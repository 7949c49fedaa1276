import logging
import typing as t

from octant_hull import data, errors, geometry, util
from octant_hull.constants import Direction
from octant_hull.data import Point, Vector

logger = logging.getLogger(__name__)

ANCHOR = data.DirectionPair(Direction.WEST, Direction.SOUTH)


def remove_interior_points(points: t.Sequence[Point]) -> t.List[Point]:
    # TODO: drop points boxed in by the eight inflection points before
    #  building the path
    return list(points)


def _vectors(anchor: Point, points: t.Sequence[Point]) -> t.List[Vector]:
    return [Vector(p, geometry.slope(anchor, p),
                   geometry.squared_magnitude(anchor, p))
            for p in points if p.coords != anchor.coords]


def build_radial_path(points: t.Sequence[Point]) -> t.List[Point]:
    """
    Order the points into one closed path starting at the leftmost, then
    bottommost, point and sweeping counterclockwise by slope. Points at
    the same slope are ordered nearest first.
    """
    anchor = geometry.inflection_point(points, ANCHOR)
    vectors = sorted(_vectors(anchor, points), key=lambda v: v.sort_key)
    return [anchor] + [v.terminal_point for v in vectors]


def reduce_to_convex_path(path: t.Sequence[Point]) -> t.List[Point]:
    """
    Walk a radially sorted path and keep only the points where every turn
    follows the counterclockwise octant order of ``data.VALID_PATH``.

    A candidate moving in the same octant as the last accepted point is
    kept. A candidate opening a new octant is kept only when the octant
    does not go backwards and the last accepted point is the extreme point
    that opens it. Anything else, including duplicates of the last
    accepted point, is dropped.

    The closing edge from the last kept point back to ``path[0]`` is not
    checked.
    """
    if not path:
        return []
    last_accepted = path[0]
    last_octant_index = 0
    trimmed_path = [last_accepted]
    for candidate in path[1:]:
        transition = geometry.relative_direction(last_accepted, candidate)
        if transition == data.VALID_PATH[last_octant_index]:
            trimmed_path.append(candidate)
            last_accepted = candidate
            continue
        transition_index = data.VALID_PATH_INDEX.get(transition)
        if transition_index is None or transition_index < last_octant_index:
            continue
        pivot = geometry.inflection_point(
            path, data.LOCAL_MAXIMUMS[transition_index])
        if pivot == last_accepted:
            trimmed_path.append(candidate)
            last_accepted = candidate
            last_octant_index = transition_index
    return trimmed_path


def remove_colinear_points(points: t.Sequence[Point]) -> t.List[Point]:
    # TODO: drop hull points lying strictly between their neighbours
    return list(points)


@util.timeit
def convex_hull(points: t.Sequence[Point]) -> t.List[Point]:
    if not points:
        raise errors.PreconditionViolation(
            'Cannot compute the convex hull of an empty point set')
    exterior_points = remove_interior_points(points)
    concave_path = build_radial_path(exterior_points)
    logger.debug("concave path: %s", concave_path)
    convex_path = reduce_to_convex_path(concave_path)
    logger.debug("convex path:  %s", convex_path)
    return remove_colinear_points(convex_path)
