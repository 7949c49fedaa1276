import argparse
import logging

from octant_hull import constants, util

DEFAULT_DATA_FILE = util.get_relative_path(__file__, constants.DATA_FILE)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_args(argv=None):
    parser = argparse.ArgumentParser("Octant convex hull")
    parser.add_argument("--datafile", type=str, default=DEFAULT_DATA_FILE)
    parser.add_argument("--show", action="store_true")
    parser.add_argument("--save", type=str, default=None)
    parser.add_argument("--log-level", choices=LOG_LEVELS,
                        default=logging.getLevelName(
                            constants.DEFAULT_LOG_LEVEL))
    parsed, _ = parser.parse_known_args(argv)
    return parsed
