"""
Global test configuration and fixtures
"""

import time

import pytest

from lazy_transform.config import TransformOptions
from tests.fakes import FakeSymbolOracle

SLOW_TEST_THRESHOLD = 5.0


@pytest.fixture(autouse=True)
def track_test_duration(request):
    """Warn about slow tests."""
    start_time = time.time()

    yield

    duration = time.time() - start_time
    if duration > SLOW_TEST_THRESHOLD:
        print(f"\nSLOW TEST ({duration:.2f}s): {request.node.nodeid}")


@pytest.fixture
def oracle() -> FakeSymbolOracle:
    """Empty in-memory oracle."""
    return FakeSymbolOracle()


@pytest.fixture
def options() -> TransformOptions:
    return TransformOptions()


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Tree-sitter backed tests")


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
