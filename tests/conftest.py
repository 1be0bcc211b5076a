# python
import pytest

from validator_options import GlobalConfiguration, ValidatorConfiguration
from validator_options.resolvers import DISPLAY_NAME_CACHE


@pytest.fixture(autouse=True)
def restore_global_configuration():
    GlobalConfiguration.reset()
    DISPLAY_NAME_CACHE.clear()
    yield
    GlobalConfiguration.reset()
    DISPLAY_NAME_CACHE.clear()


@pytest.fixture
def config():
    return ValidatorConfiguration()
