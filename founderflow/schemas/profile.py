"""
User profile schemas.
"""
from datetime import datetime
from typing import Optional, List

from founderflow.schemas.common import CamelModel


class UserProfileUpdate(CamelModel):
    """Partial profile update. Fields left out are not touched."""
    resume_text: Optional[str] = None
    resume_pdf_base64: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    goals: Optional[str] = None
    skills: Optional[List[str]] = None
    experience: Optional[str] = None
    projects: Optional[str] = None


class UserProfileResponse(CamelModel):
    """Profile as returned to the editor. Missing values come back empty."""
    user_id: Optional[str] = None
    resume_text: str = ""
    resume_pdf_base64: str = ""
    name: str = ""
    title: str = ""
    goals: str = ""
    skills: List[str] = []
    experience: str = ""
    projects: str = ""
    updated_at: Optional[datetime] = None


class SaveProfileResponse(CamelModel):
    success: bool = True
    profile: UserProfileResponse
