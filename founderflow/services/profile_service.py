"""
User profile service.
"""
import logging
from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from founderflow.models.profile import UserProfile
from founderflow.repositories.profile_repo import UserProfileRepository
from founderflow.schemas.profile import UserProfileUpdate

logger = logging.getLogger(__name__)


def profile_payload(user_id: str, profile: Optional[UserProfile]) -> dict:
    """Profile with empty defaults, the shape the profile editor expects."""
    if profile is None:
        return {"user_id": user_id}
    return {
        "user_id": profile.user_id,
        "resume_text": profile.resume_text or "",
        "resume_pdf_base64": profile.resume_pdf_base64 or "",
        "name": profile.name or "",
        "title": profile.title or "",
        "goals": profile.goals or "",
        "skills": profile.skills or [],
        "experience": profile.experience or "",
        "projects": profile.projects or "",
        "updated_at": profile.updated_at,
    }


class ProfileService:
    """Service for user profile operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.profile_repo = UserProfileRepository(session)

    async def get(self, user_id: str) -> dict:
        return profile_payload(user_id, await self.profile_repo.get(user_id))

    async def save(self, user_id: str, update: UserProfileUpdate) -> dict:
        """Merge the provided fields; everything left out or null stays as stored."""
        changes = {
            field: value
            for field, value in update.model_dump(exclude_unset=True).items()
            if value is not None
        }
        profile = await self.profile_repo.upsert(user_id, changes)
        logger.info(f"Saved profile for {user_id} (fields: {sorted(changes)})")
        return profile_payload(user_id, profile)
