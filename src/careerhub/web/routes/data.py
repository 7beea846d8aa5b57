"""Backup export and storage reset routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from careerhub.export import export_filename, export_jobs
from careerhub.store import JobStore
from careerhub.web.deps import get_store

router = APIRouter()


@router.get("/export")
async def export(store: JobStore = Depends(get_store)):
    """Download the whole collection as a dated JSON file."""
    return Response(
        content=export_jobs(store.list()),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )


@router.post("/reset", status_code=204)
async def reset(store: JobStore = Depends(get_store)):
    """Clear the storage slot; the next listing re-seeds it."""
    store.reset()
    return Response(status_code=204)
