import logging

from octant_hull import args, data, graph, processing
from octant_hull.data import as_points


def test_parse_args_defaults():
    parsed = args.parse_args([])
    assert parsed.datafile == args.DEFAULT_DATA_FILE
    assert parsed.datafile.endswith('cross.pts')
    assert not parsed.show
    assert parsed.save is None
    assert parsed.log_level == 'INFO'


def test_parse_args_ignores_unknown():
    parsed = args.parse_args(['--datafile', 'x.pts', '--log-level', 'DEBUG',
                              '--bogus'])
    assert parsed.datafile == 'x.pts'
    assert parsed.log_level == 'DEBUG'


def test_run_default_datafile(root_logger, octagon):
    assert processing.run([]) == octagon


def test_run_saves_plot(root_logger, data_dir, tmp_path):
    image = tmp_path / "hull.png"
    hull = processing.run(['--datafile', f'{data_dir}/random.pts',
                           '--save', str(image)])
    assert hull == as_points([(0, 0), (3, 0), (3, 3), (0, 3)])
    assert image.exists()
    assert image.stat().st_size > 0


def test_draw_hull(octagon):
    plot = processing.draw('octagon', octagon, octagon)
    assert len(plot.ax.collections) == 1
    plot.close()


def test_draw_skips_degenerate_hull():
    plot = graph.Plot()
    plot.draw_points([])
    plot.draw_hull([data.Point(0, 0), data.Point(1, 1)])
    assert not plot.ax.collections
    plot.close()


def _stream_handlers(logger):
    return [h for h in logger.handlers if type(h) is logging.StreamHandler]


def test_run_twice_logs_once(root_logger, data_dir):
    processing.run(['--datafile', f'{data_dir}/square.pts'])
    handlers = _stream_handlers(root_logger)
    assert len(handlers) <= 1
    processing.run(['--datafile', f'{data_dir}/square.pts',
                    '--log-level', 'DEBUG'])
    assert _stream_handlers(root_logger) == handlers
    assert root_logger.level == logging.DEBUG
