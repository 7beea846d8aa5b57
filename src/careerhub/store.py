"""The job store: sole owner of the persisted job collection.

Every mutation reads the whole collection from the storage slot, changes
it, and writes the whole collection back. There is no locking; two writers
sharing one slot can lose each other's updates.
"""

from __future__ import annotations

import logging
import secrets
import string
import time
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from careerhub.errors import CorruptPayloadError, JobNotFoundError
from careerhub.models import (
    FIELD_NAMES,
    STORE_MANAGED_FIELDS,
    Job,
    JobInput,
    JobStatus,
    JobType,
    jobs_from_json,
    jobs_to_json,
)
from careerhub.storage import StoragePort

logger = logging.getLogger(__name__)

STORAGE_KEY = "careerhub_internal_jobs"

ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 9

DAY_MS = 86_400_000


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def generate_id() -> str:
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


def seed_jobs(now: int) -> list[Job]:
    """The fixed records written to an absent slot."""
    return [
        Job(
            id="1",
            title="Senior Frontend Engineer",
            department="Engineering",
            location="Bangkok Office",
            type=JobType.FULL_TIME,
            description="We are looking for a React expert to lead our internal tools team.",
            requirements=["5+ years React", "TypeScript mastery", "Strong UI/UX skills"],
            salary_range="100k - 150k THB",
            status=JobStatus.OPEN,
            created_at=now - DAY_MS * 5,
            updated_at=now - DAY_MS * 5,
        ),
        Job(
            id="2",
            title="Product Designer",
            department="Design",
            location="Remote",
            type=JobType.FULL_TIME,
            description="Join us to redefine the user experience of our enterprise platform.",
            requirements=["Figma expert", "Design systems experience", "User research skills"],
            salary_range="80k - 120k THB",
            status=JobStatus.OPEN,
            created_at=now - DAY_MS * 2,
            updated_at=now - DAY_MS * 2,
        ),
    ]


def _normalize_fields(fields: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    """Map caller-supplied fields onto attribute names.

    Models contribute only the fields that were explicitly set. Unknown keys
    and store-managed fields are dropped.
    """
    if isinstance(fields, BaseModel):
        fields = fields.model_dump(exclude_unset=True)
    normalized = {}
    for key, value in fields.items():
        name = FIELD_NAMES.get(key)
        if name is None or name in STORE_MANAGED_FIELDS:
            continue
        normalized[name] = value
    return normalized


class JobStore:
    """Create/read/update/archive/delete over one storage slot."""

    def __init__(
        self,
        storage: StoragePort,
        key: str = STORAGE_KEY,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[], str] = generate_id,
    ) -> None:
        self._storage = storage
        self._key = key
        self._clock = clock
        self._id_factory = id_factory

    @property
    def key(self) -> str:
        return self._key

    def list(self) -> list[Job]:
        """Return the whole collection, seeding the slot if it is absent."""
        payload = self._storage.get_item(self._key)
        if payload is None:
            jobs = seed_jobs(self._clock())
            self._save(jobs)
            logger.info("Seeded storage slot '%s' with %d jobs", self._key, len(jobs))
            return jobs
        try:
            return jobs_from_json(payload)
        except ValidationError as e:
            raise CorruptPayloadError(self._key, str(e)) from e

    def get_by_id(self, job_id: str) -> Job | None:
        for job in self.list():
            if job.id == job_id:
                return job
        return None

    def create(self, data: JobInput | Mapping[str, Any]) -> Job:
        """Add a new job at the front of the collection and return it."""
        fields = _normalize_fields(data)
        jobs = self.list()
        now = self._clock()
        job = Job.model_validate(
            {**fields, "id": self._new_id(jobs), "created_at": now, "updated_at": now}
        )
        self._save([job, *jobs])
        logger.debug("Created job %s (%s)", job.id, job.title)
        return job

    def update(self, job_id: str, fields: Mapping[str, Any] | BaseModel) -> Job:
        """Merge ``fields`` over an existing job, keeping its position.

        Raises JobNotFoundError if no job has ``job_id``.
        """
        changes = _normalize_fields(fields)
        jobs = self.list()
        index = next((i for i, j in enumerate(jobs) if j.id == job_id), None)
        if index is None:
            raise JobNotFoundError(job_id)

        current = jobs[index]
        merged = {
            **current.model_dump(),
            **changes,
            "updated_at": max(self._clock(), current.updated_at + 1),
        }
        updated = Job.model_validate(merged)
        jobs[index] = updated
        self._save(jobs)
        logger.debug("Updated job %s: %s", job_id, ", ".join(sorted(changes)) or "no fields")
        return updated

    def archive(self, job_id: str) -> Job:
        return self.update(job_id, {"status": JobStatus.ARCHIVED})

    def delete(self, job_id: str) -> None:
        """Remove a job. Deleting an unknown id is not an error."""
        jobs = self.list()
        remaining = [j for j in jobs if j.id != job_id]
        self._save(remaining)
        if len(remaining) != len(jobs):
            logger.debug("Deleted job %s", job_id)

    def reset(self) -> None:
        """Clear the slot so the next ``list()`` seeds it again."""
        self._storage.remove_item(self._key)
        logger.info("Cleared storage slot '%s'", self._key)

    def _new_id(self, jobs: list[Job]) -> str:
        taken = {j.id for j in jobs}
        job_id = self._id_factory()
        while job_id in taken:
            job_id = self._id_factory()
        return job_id

    def _save(self, jobs: list[Job]) -> None:
        self._storage.set_item(self._key, jobs_to_json(jobs))
