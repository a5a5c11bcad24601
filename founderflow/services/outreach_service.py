"""
Outreach service - message generation pipeline and history.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from founderflow.core.exceptions import ExternalServiceError, NotFoundError, ValidationError
from founderflow.models.outreach import OutreachRecord
from founderflow.repositories.outreach_repo import OutreachRecordRepository
from founderflow.repositories.profile_repo import UserProfileRepository
from founderflow.schemas.outreach import GenerateOutreachRequest, SaveOutreachRequest
from founderflow.services.enrichment_service import EnrichmentService
from founderflow.services.integrations.base import MessageGenerator
from founderflow.services.prompt_builder import build_prompt

logger = logging.getLogger(__name__)

INITIAL_STAGE = "sent"
NOT_SAVED_WARNING = "Message generated but not saved to history"


class OutreachService:
    """Generates outreach messages and keeps their history."""

    def __init__(
        self,
        session: AsyncSession,
        generator: Optional[MessageGenerator] = None,
        enrichment_service: Optional[EnrichmentService] = None
    ):
        self.session = session
        self.generator = generator
        self.enrichment_service = enrichment_service
        self.record_repo = OutreachRecordRepository(session)
        self.profile_repo = UserProfileRepository(session)

    def _record_data(
        self,
        user_id: str,
        job_data: dict,
        outreach_type: str,
        message_type: str,
        message: str,
        contact_id: Optional[str] = None
    ) -> dict:
        return {
            "owner_user_id": user_id,
            "contact_id": contact_id,
            "founder_name": job_data.get("name") or "",
            "company": job_data.get("company") or "",
            "linkedin_url": job_data.get("linkedinurl") or "",
            "email": job_data.get("email") or "",
            "message_type": message_type,
            "outreach_type": outreach_type,
            "generated_message": message,
            "stage": INITIAL_STAGE,
        }

    async def generate(self, user_id: str, request: GenerateOutreachRequest) -> dict:
        """
        Run the pipeline: preconditions, enrichment, prompt, one model call,
        optional persistence.

        Returns:
            {"message", "outreach_record_id"?, "warning"?}
        """
        profile = await self.profile_repo.get(user_id)
        if profile is None:
            raise NotFoundError(message="User profile not found. Please set up your profile first.")

        logger.info(
            f"Resume check for {user_id}: pdf={bool(profile.resume_pdf_base64)} "
            f"text={bool(profile.resume_text)}"
        )
        if not profile.has_resume:
            raise ValidationError("No resume found. Please upload a PDF or add resume text in your profile.")

        if self.generator is None:
            raise ExternalServiceError("Gemini API key not configured")

        job_data = request.job_data.model_dump()

        enrichment = {}
        if self.enrichment_service is not None:
            enrichment = await self.enrichment_service.enrich(job_data)

        has_pdf = bool(profile.resume_pdf_base64)
        prompt = build_prompt(
            request.outreach_type,
            request.message_type,
            job_data,
            enrichment=enrichment,
            resume_text=profile.resume_text,
            has_pdf_resume=has_pdf,
            goals=profile.goals,
        )

        try:
            message = await self.generator.generate(
                prompt,
                pdf_base64=profile.resume_pdf_base64 if has_pdf else None
            )
        except Exception as e:
            logger.exception("Generation call failed")
            raise ExternalServiceError("Failed to generate outreach message", details=str(e))

        if not request.save_to_database:
            return {"message": message}

        try:
            record = await self.record_repo.create(self._record_data(
                user_id,
                job_data,
                request.outreach_type,
                request.message_type,
                message,
                contact_id=request.contact_id,
            ))
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to save outreach record: {e}")
            return {"message": message, "warning": NOT_SAVED_WARNING}

        return {"message": message, "outreach_record_id": record.id}

    async def save(self, user_id: str, request: SaveOutreachRequest) -> OutreachRecord:
        """Persist a message the user generated earlier."""
        if not request.generated_message:
            raise ValidationError("No message to save")

        try:
            return await self.record_repo.create(self._record_data(
                user_id,
                request.job_data.model_dump(),
                request.outreach_type,
                request.message_type,
                request.generated_message,
            ))
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise ExternalServiceError("Failed to save outreach to board", details=str(e))

    async def list_records(self, user_id: str) -> List[OutreachRecord]:
        return await self.record_repo.list_for_owner(user_id)
