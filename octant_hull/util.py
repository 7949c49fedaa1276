import logging
import time
from os import path

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def setup_logging(level: int = logging.INFO):
    logging.getLogger().setLevel(level)
    logging.basicConfig(format=LOG_FORMAT)


def get_relative_path(module: str, path_name: str) -> str:
    return path.abspath(path.join(path.dirname(module), path_name))


def timeit(method):
    def timed(*args, **kw):
        ts = time.time()
        result = method(*args, **kw)
        te = time.time()
        logger.debug("%s elapsed time: %f sec", method.__qualname__, (te - ts))
        return result

    return timed
