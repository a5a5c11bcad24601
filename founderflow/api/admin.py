"""
Admin API routes - entry maintenance, review and manual plan grants.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from founderflow.api.deps import CurrentSession, require_admin
from founderflow.database import get_session
from founderflow.schemas.common import ErrorResponse
from founderflow.schemas.admin import (
    BatchDeleteResponse, ClearEntriesRequest, CollectionEstimate, DataManagementResponse,
    DeleteSelectedRequest, DeleteSelectedResponse, GrantProRequest, GrantProResponse,
    LinkedInPostsResponse
)
from founderflow.services.admin_review_service import AdminReviewService
from founderflow.services.batch_deletion_service import BatchDeletionService
from founderflow.services.subscription_service import SubscriptionService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/admin",
    tags=["admin"],
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}}
)


@router.get("/clear-entries", response_model=CollectionEstimate)
async def estimate_entries(
    admin: CurrentSession = Depends(require_admin),
    session: AsyncSession = Depends(get_session)
):
    """Bounded size estimate of the entry collection."""
    service = BatchDeletionService(session)
    return await service.estimate_collection_size()


@router.delete("/clear-entries", response_model=BatchDeleteResponse)
async def clear_entries_batch(
    request: Optional[ClearEntriesRequest] = Body(None),
    admin: CurrentSession = Depends(require_admin),
    session: AsyncSession = Depends(get_session)
):
    """Delete one batch of entries. Call again while hasMoreEntries is true."""
    logger.info(f"Admin {admin.email} clearing entries")
    service = BatchDeletionService(session)
    return await service.delete_batch(request.batch_size if request else None)


@router.get("/data-management", response_model=DataManagementResponse)
async def review_entries(
    admin: CurrentSession = Depends(require_admin),
    session: AsyncSession = Depends(get_session)
):
    """Recent entries with data quality stats."""
    service = AdminReviewService(session)
    entries, stats = await service.list_entries()
    return {"entries": entries, "stats": stats}


@router.delete(
    "/data-management",
    response_model=DeleteSelectedResponse,
    response_model_exclude_none=True
)
async def delete_selected_entries(
    request: Optional[DeleteSelectedRequest] = Body(None),
    admin: CurrentSession = Depends(require_admin),
    session: AsyncSession = Depends(get_session)
):
    """Delete up to 100 entries by id. Per-id failures are reported, not raised."""
    service = AdminReviewService(session)
    return await service.delete_selected(request.entry_ids if request else None)


@router.get("/linkedin-posts", response_model=LinkedInPostsResponse)
async def linkedin_post_entries(
    admin: CurrentSession = Depends(require_admin),
    session: AsyncSession = Depends(get_session)
):
    """Recent entries for LinkedIn post drafting."""
    service = AdminReviewService(session)
    return {"entries": await service.list_recent_entries()}


@router.get("/grant-pro")
async def grant_pro_usage(admin: CurrentSession = Depends(require_admin)):
    """Usage notes for the grant endpoint."""
    return {
        "success": True,
        "message": "Use POST request to grant Pro access",
        "instructions": {
            "self": "POST /api/admin/grant-pro with no body",
            "other": "POST /api/admin/grant-pro with {\"targetUserId\": \"user_xxx\"}",
            "duration": "POST /api/admin/grant-pro with {\"durationDays\": 90}",
        },
    }


@router.post("/grant-pro", response_model=GrantProResponse)
async def grant_pro(
    request: Optional[GrantProRequest] = Body(None),
    admin: CurrentSession = Depends(require_admin),
    session: AsyncSession = Depends(get_session)
):
    """Grant paid access to a user (the caller when no target is given)."""
    request = request or GrantProRequest()
    target_user_id = request.target_user_id or admin.user_id

    service = SubscriptionService(session)
    subscription = await service.grant(
        target_user_id,
        granted_by=admin.email,
        duration_days=request.duration_days,
    )
    return {
        "message": f"Pro access granted until {subscription.expires_at:%Y-%m-%d}",
        "subscription": {
            "user_id": subscription.user_id,
            "status": subscription.status,
            "expires_at": subscription.expires_at,
            "granted_by": subscription.granted_by,
        },
    }
