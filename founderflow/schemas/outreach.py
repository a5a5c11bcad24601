"""
Outreach schemas.
"""
from datetime import datetime
from typing import Optional, List, Literal
from pydantic import BaseModel

from founderflow.schemas.common import CamelModel

OutreachType = Literal["job", "collaboration", "friendship"]
MessageType = Literal["email", "linkedin"]


class JobData(BaseModel):
    """Target contact, as stored on the entry. Keeps the entry's field names."""
    name: Optional[str] = None
    company: Optional[str] = None
    role: Optional[str] = None
    company_info: Optional[str] = None
    looking_for: Optional[str] = None
    linkedinurl: Optional[str] = None
    email: Optional[str] = None
    company_url: Optional[str] = None
    apply_url: Optional[str] = None
    url: Optional[str] = None

    class Config:
        extra = "allow"


class GenerateOutreachRequest(CamelModel):
    """Generate a message for one contact."""
    job_data: JobData
    outreach_type: OutreachType
    message_type: MessageType
    contact_id: Optional[str] = None
    save_to_database: bool = True

    class Config:
        json_schema_extra = {
            "example": {
                "jobData": {
                    "name": "Dana Lee",
                    "company": "Acme Robotics",
                    "role": "Founder",
                    "looking_for": "Founding engineer",
                    "company_url": "https://acme-robotics.io"
                },
                "outreachType": "job",
                "messageType": "email",
                "saveToDatabase": True
            }
        }


class GenerateOutreachResponse(CamelModel):
    message: str
    outreach_record_id: Optional[str] = None
    warning: Optional[str] = None


class SaveOutreachRequest(CamelModel):
    """Save a message generated earlier without persisting."""
    job_data: JobData
    outreach_type: OutreachType
    message_type: MessageType
    generated_message: Optional[str] = None


class SaveOutreachResponse(CamelModel):
    success: bool = True
    outreach_record_id: str


class OutreachRecordResponse(CamelModel):
    """Outreach history row."""
    id: str
    owner_user_id: str
    contact_id: Optional[str]
    founder_name: str
    company: str
    linkedin_url: str
    email: str
    message_type: str
    outreach_type: str
    generated_message: str
    stage: str
    created_at: datetime
    updated_at: datetime
    last_interaction_date: datetime

    class Config:
        from_attributes = True


class OutreachRecordList(CamelModel):
    success: bool = True
    records: List[OutreachRecordResponse]
