"""
Subscription API routes.
"""
from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from founderflow.api.deps import CurrentSession, get_current_session
from founderflow.database import get_session
from founderflow.schemas.subscription import SubscriptionStatus, SubscriptionUpdate
from founderflow.services.subscription_service import SubscriptionService

router = APIRouter(prefix="/api", tags=["subscription"])


@router.get("/subscription", response_model=SubscriptionStatus, response_model_exclude_unset=True)
async def get_subscription(
    current: CurrentSession = Depends(get_current_session),
    session: AsyncSession = Depends(get_session)
):
    """Paid status of the caller."""
    service = SubscriptionService(session)
    return await service.get_status(current.user_id)


@router.post("/subscription", response_model=SubscriptionStatus, response_model_exclude_unset=True)
async def activate_subscription(
    update: Optional[SubscriptionUpdate] = Body(None),
    current: CurrentSession = Depends(get_current_session),
    session: AsyncSession = Depends(get_session)
):
    """Create or extend the caller's subscription."""
    update = update or SubscriptionUpdate()
    service = SubscriptionService(session)
    result = await service.activate(current.user_id, update.plan, update.duration_months)
    return {"success": True, **result}


@router.delete("/subscription", response_model=SubscriptionStatus, response_model_exclude_unset=True)
async def cancel_subscription(
    current: CurrentSession = Depends(get_current_session),
    session: AsyncSession = Depends(get_session)
):
    service = SubscriptionService(session)
    result = await service.cancel(current.user_id)
    return {"success": True, **result}


@router.get("/debug/subscription")
async def debug_subscription(
    current: CurrentSession = Depends(get_current_session),
    session: AsyncSession = Depends(get_session)
):
    """Raw subscription record and how its paid status was derived."""
    service = SubscriptionService(session)
    return await service.debug_view(current.user_id)
