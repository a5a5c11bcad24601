"""
API dependencies - shared across all routes.
"""
import logging
from typing import Optional

import httpx
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from founderflow.config import Settings, get_settings
from founderflow.core.exceptions import ForbiddenError, UnauthorizedError
from founderflow.core.security import decode_token
from founderflow.services.enrichment_service import EnrichmentService
from founderflow.services.integrations.base import MessageGenerator
from founderflow.services.link_preview_service import LinkPreviewService

logger = logging.getLogger(__name__)

SESSION_COOKIE = "__session"

bearer_scheme = HTTPBearer(auto_error=False)


class CurrentSession(BaseModel):
    """Identity carried by a verified session token."""
    user_id: str
    email: Optional[str] = None
    email_verified: bool = False


def _session_token(request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    if credentials and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(SESSION_COOKIE)


async def get_current_session(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings)
) -> CurrentSession:
    """Resolve the caller from the Bearer header or the session cookie."""
    token = _session_token(request, credentials)
    if not token:
        raise UnauthorizedError()

    payload = decode_token(token, settings.AUTH_JWT_SECRET, settings.AUTH_JWT_ALGORITHM)
    if not payload:
        raise UnauthorizedError()

    user_id = payload.get("sub") or payload.get("user_id")
    if not user_id:
        raise UnauthorizedError()

    return CurrentSession(
        user_id=str(user_id),
        email=payload.get("email"),
        email_verified=bool(payload.get("email_verified", False)),
    )


async def require_admin(
    current: CurrentSession = Depends(get_current_session),
    settings: Settings = Depends(get_settings)
) -> CurrentSession:
    """Admin = verified email equal to ADMIN_EMAIL."""
    email = (current.email or "").strip().lower()
    if not current.email_verified or email != settings.ADMIN_EMAIL.strip().lower():
        logger.warning(f"Admin access denied for user {current.user_id}")
        raise ForbiddenError()
    return current


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_message_generator(request: Request) -> Optional[MessageGenerator]:
    """None when no model is configured."""
    return request.app.state.message_generator


def get_enrichment_service(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings)
) -> EnrichmentService:
    return EnrichmentService(
        http_client,
        proxy_url=settings.ENRICHMENT_PROXY_URL,
        timeout=settings.ENRICHMENT_TIMEOUT_SECONDS,
    )


def get_link_preview_service(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings)
) -> LinkPreviewService:
    return LinkPreviewService(http_client, timeout=settings.LINK_PREVIEW_TIMEOUT_SECONDS)
