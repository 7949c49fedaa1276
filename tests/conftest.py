import logging

import matplotlib
import pytest

from octant_hull import data, util

matplotlib.use('Agg')

DATA_DIR = util.get_relative_path(__file__, '../data')


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def cross():
    return data.as_points([(0, 1), (1, 1), (1, 0), (2, 0), (2, 1), (3, 1),
                           (3, 2), (2, 2), (2, 3), (1, 3), (1, 2), (0, 2)])


@pytest.fixture
def octagon():
    return data.as_points([(0, 1), (1, 0), (2, 0), (3, 1), (3, 2), (2, 3),
                           (1, 3), (0, 2)])


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
