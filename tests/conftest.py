"""Shared fixtures for hostbench tests."""

import logging

import pytest

from hostbench.config.config_loader import ConfigLoader
from hostbench.consts.EngineType import EngineType
from hostbench.service.runner import build_runner
from hostbench.service.suites.sql_suite import SqlFixture
from hostbench.util.log_config import configure_package_logging

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class FakeClock:
    """Deterministic nanosecond clock advancing by a fixed step per reading."""

    def __init__(self, start=1_000, step=10):
        self.now = start
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


def make_loader(tmp_path, engine=EngineType.SQLITE):
    loader = ConfigLoader()
    loader.config_data.engine = engine
    loader.config_data.temp_dir = str(tmp_path)
    loader.config_data.sqrt_iterations = 1_000
    return loader


def make_sql_fixture(tmp_path, engine=EngineType.SQLITE):
    loader = make_loader(tmp_path, engine)
    runner = build_runner(engine, tmp_path / loader.config_data.db_file_name)
    return SqlFixture.from_files(runner, loader.schema_sql_files(), loader.query_sql_files())


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def loader(tmp_path):
    """Packaged config pointed at tmp_path with a short CPU loop."""
    return make_loader(tmp_path)


@pytest.fixture(params=[EngineType.SQLITE, EngineType.DUCKDB], ids=["sqlite", "duckdb"])
def sql_fixture(request, tmp_path):
    """An SqlFixture per engine; the database is closed afterwards if a test left it open."""
    fixture = make_sql_fixture(tmp_path, request.param)
    yield fixture
    if fixture.runner.is_open:
        fixture.runner.close()


@pytest.fixture
def restore_package_logging():
    """Detach file handlers and reset levels on hostbench loggers after the test."""
    yield
    for name, logger in list(logging.root.manager.loggerDict.items()):
        if isinstance(logger, logging.Logger) and name.startswith("hostbench"):
            for handler in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
                logger.removeHandler(handler)
                handler.close()
    configure_package_logging(level=logging.INFO)
