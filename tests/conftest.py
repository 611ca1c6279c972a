import pytest
from PyQt6.QtCore import QCoreApplication

from countdown.core.engine import CountdownEngine
from countdown.core.tick_source import ManualTickSource


@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def clock() -> ManualTickSource:
    return ManualTickSource()


@pytest.fixture
def engine(clock):
    engine = CountdownEngine(clock)
    yield engine
    engine.close()
