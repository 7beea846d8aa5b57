"""Exception hierarchy for CareerHub."""


class CareerHubError(Exception):
    """Base class for every error raised by CareerHub."""


class JobNotFoundError(CareerHubError):
    def __init__(self, job_id: str) -> None:
        super().__init__(f"Job not found: {job_id}")
        self.job_id = job_id


class StorageError(CareerHubError):
    """The storage slot could not be read or written."""


class StorageUnavailableError(StorageError):
    pass


class CorruptPayloadError(StorageError):
    """The storage slot holds something other than a JSON array of jobs."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Corrupt payload in storage slot '{key}': {reason}")
        self.key = key
