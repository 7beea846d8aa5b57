"""List-view helpers: search, status tabs and dashboard counters."""

from careerhub.models import Job, JobStats, JobStatus

STATUS_LABELS = {
    JobStatus.OPEN: "Open",
    JobStatus.CLOSED: "Closed",
    JobStatus.ARCHIVED: "Archived",
}


def filter_jobs(
    jobs: list[Job],
    search: str = "",
    status: JobStatus | None = None,
) -> list[Job]:
    """Keep jobs whose title or department contains ``search``.

    Matching is case-insensitive. ``status=None`` is the "all" tab.
    Collection order is preserved.
    """
    needle = search.lower()
    return [
        job
        for job in jobs
        if (needle in job.title.lower() or needle in job.department.lower())
        and (status is None or job.status == status)
    ]


def job_stats(jobs: list[Job]) -> JobStats:
    """Count open postings; everything else counts as closed."""
    open_count = sum(1 for j in jobs if j.status == JobStatus.OPEN)
    return JobStats(total=len(jobs), open=open_count, closed=len(jobs) - open_count)
