import logging
import typing as t
from dataclasses import dataclass
from os import path
from types import MappingProxyType

from octant_hull import constants, errors, util
from octant_hull.constants import Direction

logger = logging.getLogger(__name__)

Coords = t.Tuple[int, int]


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __repr__(self):
        return f'({self.x}, {self.y})'

    __str__ = __repr__

    @property
    def coords(self) -> Coords:
        return self.x, self.y

    def array(self) -> t.List[int]:
        return [self.x, self.y]


def as_points(coords: t.Iterable[Coords]) -> t.List[Point]:
    return [Point(x, y) for x, y in coords]


@dataclass(frozen=True)
class DirectionPair:
    first: Direction = Direction.NONE
    second: Direction = Direction.NONE

    @property
    def label(self) -> str:
        return label_from_direction_pair(self)

    def __repr__(self):
        return f'{self.__class__.__name__}({self.label!r})'


@dataclass(frozen=True)
class Vector:
    terminal_point: Point
    slope: float
    magnitude: float

    @property
    def sort_key(self) -> t.Tuple[float, float]:
        return self.slope, self.magnitude


def direction_pair_from_label(label: str) -> DirectionPair:
    """
    Turn a compass label into a DirectionPair, e.g. "NW" becomes
    (NORTH, WEST) and "E" becomes (EAST, NONE).
    """
    if not 0 < len(label) <= 2:
        raise errors.ParseError(f'Invalid direction label {label!r}')
    try:
        directions = [Direction(c) for c in label]
    except ValueError:
        raise errors.ParseError(
            f'Invalid direction label {label!r}') from None
    return DirectionPair(*directions)


def label_from_direction_pair(pair: DirectionPair) -> str:
    return pair.first.value + pair.second.value


VALID_PATH: t.Tuple[DirectionPair, ...] = tuple(
    direction_pair_from_label(label)
    for label in constants.VALID_PATH_LABELS)

LOCAL_MAXIMUMS: t.Tuple[DirectionPair, ...] = tuple(
    direction_pair_from_label(label)
    for label in constants.LOCAL_MAXIMUM_LABELS)

VALID_PATH_INDEX: t.Mapping[DirectionPair, int] = MappingProxyType(
    {pair: index for index, pair in enumerate(VALID_PATH)})


def _split_coords(read_line: str) -> t.List[str]:
    for delimiter in constants.COORD_DELIMITERS:
        if delimiter in read_line:
            return [f for f in read_line.split(delimiter) if f.strip()]
    return [read_line]


def _read_points(fh: t.TextIO) -> t.List[Point]:
    points = []
    for line_number, read_line in enumerate(fh, start=1):
        read_line = read_line.strip()
        if not read_line or read_line.startswith(constants.COMMENT_PREFIX):
            continue
        fields = _split_coords(read_line)
        if len(fields) != 2:
            raise errors.ParseError(f'Expected "x,y", got {read_line!r}',
                                    line_number)
        try:
            x, y = (int(f) for f in fields)
        except ValueError:
            raise errors.ParseError(
                f'Coordinates must be integers, got {read_line!r}',
                line_number) from None
        points.append(Point(x, y))
    return points


@util.timeit
def load_datafile(path_name: str) -> t.Tuple[str, t.List[Point]]:
    with open(path_name) as fh:
        points = _read_points(fh)
    name = path.splitext(path.basename(path_name))[0]
    logger.info("Loaded %s points from %s", len(points), name)
    return name, points
