import logging

import pytest

from py_driftcalc import BaseEngineConfigDict, Calculator, engines
from py_driftcalc.logger import logger

logger.setLevel(logging.DEBUG)


def pytest_addoption(parser):
    parser.addoption(
        "--engine",
        action="store",
        default="EulerIntegrationEngine",
        help="Specify the engine class name from py_driftcalc.engines",
    )


@pytest.fixture(scope="class")
def loaded_engine_instance(request):
    engine_name = request.config.getoption("--engine")
    logger.info(f"Attempting to load engine: '{engine_name}'")
    engine = getattr(engines, engine_name, None)
    if engine is None:
        pytest.exit(f"Cannot start tests: no engine named {engine_name!r} in py_driftcalc.engines", returncode=1)
    # probe:
    engine({})
    yield engine


@pytest.fixture
def calc(loaded_engine_instance):
    return Calculator(engine=loaded_engine_instance)


@pytest.fixture
def slow_floor_calc(loaded_engine_instance):
    config = BaseEngineConfigDict(cMinimumVelocity=800.0)
    return Calculator(config=config, engine=loaded_engine_instance)
