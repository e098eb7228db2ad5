import pytest

from sync_notes.config import Settings
from sync_notes.services import Authorizer, Collector
from sync_notes.utils import DocumentStore


class FakeClock:
    """Manually advanced replacement for time.time."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock(100 * 24 * 3600.0)


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def authorizer(clock):
    return Authorizer(ttl_seconds=3600, clock=clock)


@pytest.fixture
def store(data_dir, clock):
    return DocumentStore(str(data_dir), clock=clock)


@pytest.fixture
def collector(data_dir):
    return Collector(str(data_dir))


@pytest.fixture
def settings(tmp_path):
    s = Settings()
    s.DATA_DIR = str(tmp_path / "notes")
    s.TOKEN_SWEEP_INTERVAL_SECONDS = 3600
    s.NOTE_SWEEP_INTERVAL_SECONDS = 3600
    return s
