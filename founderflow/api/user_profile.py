"""
User profile API routes.
"""
from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from founderflow.api.deps import CurrentSession, get_current_session
from founderflow.database import get_session
from founderflow.schemas.profile import SaveProfileResponse, UserProfileResponse, UserProfileUpdate
from founderflow.services.profile_service import ProfileService

router = APIRouter(prefix="/api/user-profile", tags=["user-profile"])


@router.get("", response_model=UserProfileResponse)
async def get_profile(
    current: CurrentSession = Depends(get_current_session),
    session: AsyncSession = Depends(get_session)
):
    """Stored profile, or an empty one."""
    service = ProfileService(session)
    return await service.get(current.user_id)


@router.post("", response_model=SaveProfileResponse)
async def save_profile(
    update: UserProfileUpdate,
    current: CurrentSession = Depends(get_current_session),
    session: AsyncSession = Depends(get_session)
):
    """Merge the given fields into the caller's profile."""
    service = ProfileService(session)
    return {"profile": await service.save(current.user_id, update)}
