import logging

import pytest

from biasvariance.config import DemoConfig


@pytest.fixture
def config():
    return DemoConfig(seed=42, n=30, noise_sd=0.3, true_function="sine",
                      max_degree=10, high_degree=9, n_repeats=50)


@pytest.fixture
def noiseless_config():
    return DemoConfig(seed=7, n=25, noise_sd=0.0, true_function="linear",
                      max_degree=4, high_degree=3, n_repeats=5)


@pytest.fixture(autouse=True)
def reset_package_logger():
    # setup_logging binds handlers to the captured stdout of whichever test called it
    yield
    logger = logging.getLogger("biasvariance")
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
