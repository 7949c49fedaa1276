import logging
import typing as t

from octant_hull import args, convex_hull, data, graph, util

logger = logging.getLogger(__name__)


def draw(
    name: str,
    points: t.List[data.Point],
    hull: t.List[data.Point],
) -> graph.Plot:
    plot = graph.Plot(f'{name} hull')
    plot.draw_points(points)
    plot.draw_hull(hull)
    plot.draw_points(hull, color='red', zorder=3)
    return plot


@util.timeit
def run(argv=None) -> t.List[data.Point]:
    startup_args = args.parse_args(argv)
    util.setup_logging(logging.getLevelName(startup_args.log_level))
    logger.info('Loading %s', startup_args.datafile)
    name, points = data.load_datafile(startup_args.datafile)
    hull = convex_hull.convex_hull(points)
    logger.info('%s hull: %s', name, hull)
    if startup_args.show or startup_args.save:
        plot = draw(name, points, hull)
        if startup_args.save:
            plot.save(startup_args.save)
        if startup_args.show:
            plot.show()
    return hull


def main():
    run()


if __name__ == '__main__':
    main()
