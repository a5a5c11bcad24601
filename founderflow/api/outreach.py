"""
Outreach API routes - generation, saving and history.
"""
from typing import Optional

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from founderflow.api.deps import (
    CurrentSession, get_current_session, get_enrichment_service, get_message_generator
)
from founderflow.database import get_session
from founderflow.schemas.outreach import (
    GenerateOutreachRequest, GenerateOutreachResponse, OutreachRecordList,
    SaveOutreachRequest, SaveOutreachResponse
)
from founderflow.services.enrichment_service import EnrichmentService
from founderflow.services.integrations.base import MessageGenerator
from founderflow.services.outreach_service import OutreachService

router = APIRouter(prefix="/api", tags=["outreach"])


@router.post(
    "/generate-outreach",
    response_model=GenerateOutreachResponse,
    response_model_exclude_none=True
)
async def generate_outreach(
    request: GenerateOutreachRequest,
    current: CurrentSession = Depends(get_current_session),
    session: AsyncSession = Depends(get_session),
    generator: Optional[MessageGenerator] = Depends(get_message_generator),
    enrichment_service: EnrichmentService = Depends(get_enrichment_service)
):
    """Generate a personalised message for one contact."""
    outreach_service = OutreachService(session, generator, enrichment_service)
    return await outreach_service.generate(current.user_id, request)


@router.post("/save-outreach", response_model=SaveOutreachResponse)
async def save_outreach(
    request: SaveOutreachRequest,
    current: CurrentSession = Depends(get_current_session),
    session: AsyncSession = Depends(get_session)
):
    """Save a previously generated message to the outreach board."""
    outreach_service = OutreachService(session)
    record = await outreach_service.save(current.user_id, request)
    return {"outreach_record_id": record.id}


@router.get("/outreach-records", response_model=OutreachRecordList)
async def list_outreach_records(
    current: CurrentSession = Depends(get_current_session),
    session: AsyncSession = Depends(get_session)
):
    """The caller's outreach history, newest first."""
    outreach_service = OutreachService(session)
    return {"records": await outreach_service.list_records(current.user_id)}
