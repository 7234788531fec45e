import itertools
import logging

import pytest

from gradstudio.gradients.engine import GradientEngine


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo ``setup_logging`` so caplog sees gradstudio records in every test."""
    yield
    logger = logging.getLogger("gradstudio")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def ticking_clock():
    """Deterministic clock returning 1000, 1001, ..."""
    counter = itertools.count(1000)
    return lambda: next(counter)


@pytest.fixture
def engine(ticking_clock):
    return GradientEngine(rng=1234, clock=ticking_clock)
