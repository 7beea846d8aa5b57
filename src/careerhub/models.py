"""Pydantic data models for CareerHub."""

import json
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


# --- Job Models ---

class JobStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    ARCHIVED = "ARCHIVED"


class JobType(str, Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    INTERN = "Intern"


class JobInput(BaseModel):
    """Fields a caller supplies when creating a job posting."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    department: str
    location: str
    type: JobType = JobType.FULL_TIME
    description: str = ""
    requirements: list[str] = Field(default_factory=list)
    salary_range: str | None = None
    status: JobStatus = JobStatus.OPEN


class Job(JobInput):
    """A stored job posting. Timestamps are milliseconds since the epoch."""
    id: str
    created_at: int
    updated_at: int


# Fields the store assigns itself; callers can never write them.
STORE_MANAGED_FIELDS = frozenset({"id", "created_at", "updated_at"})

# camelCase and snake_case spellings both map to the attribute name
FIELD_NAMES = {
    **{name: name for name in Job.model_fields},
    **{to_camel(name): name for name in Job.model_fields},
}

_JOB_LIST = TypeAdapter(list[Job])


def job_to_dict(job: Job) -> dict:
    """Convert a job to its JSON-ready camelCase form."""
    return job.model_dump(mode="json", by_alias=True, exclude_none=True)


def jobs_to_json(jobs: list[Job], indent: int | None = None) -> str:
    """Serialize a collection as a bare JSON array."""
    return json.dumps([job_to_dict(j) for j in jobs], indent=indent, ensure_ascii=False)


def jobs_from_json(payload: str) -> list[Job]:
    """Parse a JSON array of jobs.

    Raises ``pydantic.ValidationError`` when the payload is not valid JSON or
    any record is malformed.
    """
    return _JOB_LIST.validate_json(payload)


class JobStats(BaseModel):
    """Dashboard counters for a collection."""
    total: int = 0
    open: int = 0
    closed: int = 0


# --- Polishing Models ---

class PolishRequest(BaseModel):
    title: str
    description: str


class PolishResponse(BaseModel):
    description: str
