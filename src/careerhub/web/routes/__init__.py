"""Aggregates all web route sub-routers."""

from fastapi import APIRouter

from careerhub.web.routes.data import router as data_router
from careerhub.web.routes.jobs import router as jobs_router
from careerhub.web.routes.polish import router as polish_router

router = APIRouter()
router.include_router(jobs_router)
router.include_router(data_router)
router.include_router(polish_router)
