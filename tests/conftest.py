"""Shared test fixtures for CareerHub."""

import pytest

from careerhub.models import Job, JobInput, JobStatus, JobType
from careerhub.storage import MemoryStorage, SqliteStorage, init_db
from careerhub.store import JobStore

START_MS = 1_760_000_000_000


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = START_MS) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1000) -> None:
        self.now += ms


@pytest.fixture
def start_ms():
    return START_MS


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def store(memory_storage, clock):
    return JobStore(memory_storage, clock=clock)


@pytest.fixture
def sqlite_storage(tmp_path):
    engine = init_db(str(tmp_path / "test.db"))
    yield SqliteStorage(engine)
    engine.dispose()


@pytest.fixture
def backend_input():
    return JobInput(
        title="Backend Engineer",
        department="Platform",
        location="Bangkok Office",
        type=JobType.FULL_TIME,
        description="Build and run the services behind our internal tools.",
        requirements=["Python", "PostgreSQL", "Python"],
        salary_range="90k - 130k THB",
        status=JobStatus.OPEN,
    )


@pytest.fixture
def intern_input():
    return JobInput(
        title="Data Intern",
        department="Analytics",
        location="Remote",
        type=JobType.INTERN,
        description="Help the analytics team clean up reporting pipelines.",
        requirements=["SQL", ""],
    )


@pytest.fixture
def sample_jobs():
    return [
        Job(
            id="a1",
            title="Backend Engineer",
            department="Platform",
            location="Bangkok Office",
            status=JobStatus.OPEN,
            created_at=START_MS,
            updated_at=START_MS,
        ),
        Job(
            id="b2",
            title="Product Designer",
            department="Design",
            location="Remote",
            status=JobStatus.CLOSED,
            created_at=START_MS,
            updated_at=START_MS,
        ),
        Job(
            id="c3",
            title="Platform Support Intern",
            department="IT Support",
            location="Chiang Mai",
            type=JobType.INTERN,
            status=JobStatus.ARCHIVED,
            created_at=START_MS,
            updated_at=START_MS,
        ),
    ]
