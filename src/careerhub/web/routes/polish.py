"""Job description polishing route."""

import asyncio

from fastapi import APIRouter, Depends

from careerhub.config import CareerHubConfig
from careerhub.models import PolishRequest, PolishResponse
from careerhub.polish import polish_job_description
from careerhub.web.deps import get_config, get_llm_client

router = APIRouter()


@router.post("/polish", response_model=PolishResponse)
async def polish(
    body: PolishRequest,
    config: CareerHubConfig = Depends(get_config),
    llm_client=Depends(get_llm_client),
):
    """Rewrite a description with the LLM; falls back to the input text."""
    description = await asyncio.to_thread(
        polish_job_description,
        body.title,
        body.description,
        llm_client=llm_client,
        language=config.polish.language,
    )
    return PolishResponse(description=description)
