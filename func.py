import functools
import logging
import time

import numpy as np

logger = logging.getLogger(__name__)


def length(x: np.ndarray) -> float:
    return float(np.linalg.norm(x))


def distance(x: np.ndarray, y: np.ndarray) -> float:
    return length(x - y)


def time_it(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger.info(f'Running {func.__name__}...')
        start = time.time()
        result = func(*args, **kwargs)
        end = time.time()
        logger.info(f"Time taken by {func.__name__} is {end - start:.04f} seconds")
        return result
    return wrapper
