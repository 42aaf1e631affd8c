import random

import pytest

from examslots.config import get_active_config
from examslots.models import SchedulingSession


@pytest.fixture()
def config():
    return get_active_config()


@pytest.fixture()
def codes(config):
    return config["weekday_codes"]


@pytest.fixture()
def make_session(config):
    def _make(seed=0):
        return SchedulingSession(config=config, rng=random.Random(seed))
    return _make
