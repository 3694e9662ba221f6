"""
Shared pytest fixtures for shop-simulator tests.
"""

import logging
from pathlib import Path

import pytest

from shopsimulator import ConstantValue, SimulationConfig


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Returns the root test_output directory. Created once per test session.
    Files here persist after tests complete for easy access.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Returns a directory for the current test to write output files.
    Directory structure: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_name = request.node.name

    test_dir = test_output_root / module_name / test_name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture
def make_config():
    """Build a SimulationConfig with test-friendly defaults."""

    def _make(**overrides) -> SimulationConfig:
        params = {
            "num_servers": 1,
            "num_self_checkouts": 0,
            "max_queue": 0,
            "arrival_times": [0.0],
        }
        params.update(overrides)
        return SimulationConfig(**params)

    return _make


@pytest.fixture
def no_rest():
    return ConstantValue(0.0)


@pytest.fixture(autouse=True)
def reset_shopsimulator_logging():
    """Reset the package logger before and after each test.

    Removes every handler except a NullHandler and resets the level, so a
    test enabling logging cannot leak output into the next one.
    """
    logger = logging.getLogger("shopsimulator")

    def _reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()
