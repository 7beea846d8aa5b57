"""Job listing, detail and mutation routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from fastapi.responses import RedirectResponse, Response

from careerhub.models import JobInput, JobStatus, job_to_dict
from careerhub.store import JobStore
from careerhub.views import filter_jobs, job_stats
from careerhub.web.deps import get_store

router = APIRouter()

ALL_TAB = "ALL"


def _parse_status_tab(status: str | None) -> JobStatus | None:
    if status is None or status.upper() == ALL_TAB:
        return None
    try:
        return JobStatus(status.upper())
    except ValueError:
        valid = ", ".join([ALL_TAB, *(s.value for s in JobStatus)])
        raise HTTPException(status_code=422, detail=f"Invalid status: {status}. Valid: {valid}")


@router.get("/")
async def index():
    """Redirect root to jobs list."""
    return RedirectResponse(url="/jobs", status_code=302)


@router.get("/jobs")
async def job_list(
    search: str = Query(""),
    status: str | None = Query(None),
    store: JobStore = Depends(get_store),
):
    """List jobs filtered by search text and status tab, with dashboard stats."""
    tab = _parse_status_tab(status)
    jobs = store.list()
    return {
        "jobs": [job_to_dict(j) for j in filter_jobs(jobs, search=search, status=tab)],
        "stats": job_stats(jobs).model_dump(),
    }


@router.get("/jobs/{job_id}")
async def job_detail(job_id: str, store: JobStore = Depends(get_store)):
    job = store.get_by_id(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail=f"Job not found: {job_id}")
    return job_to_dict(job)


@router.post("/jobs", status_code=201)
async def create_job(data: JobInput, store: JobStore = Depends(get_store)):
    return job_to_dict(store.create(data))


@router.patch("/jobs/{job_id}")
async def update_job(
    job_id: str,
    fields: dict[str, Any] = Body(...),
    store: JobStore = Depends(get_store),
):
    """Merge the given fields into a job. Unknown jobs are a 404."""
    return job_to_dict(store.update(job_id, fields))


@router.post("/jobs/{job_id}/archive")
async def archive_job(job_id: str, store: JobStore = Depends(get_store)):
    return job_to_dict(store.archive(job_id))


@router.delete("/jobs/{job_id}", status_code=204)
async def delete_job(job_id: str, store: JobStore = Depends(get_store)):
    store.delete(job_id)
    return Response(status_code=204)
