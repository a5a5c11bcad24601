"""
Link preview API route.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from founderflow.api.deps import get_link_preview_service
from founderflow.services.link_preview_service import LinkPreviewService, parse_preview_url

router = APIRouter(prefix="/api", tags=["link-preview"])


@router.get("/link-preview")
async def link_preview(
    url: Optional[str] = Query(None),
    service: LinkPreviewService = Depends(get_link_preview_service)
):
    """Open Graph image of a LinkedIn URL; image is null when none can be found."""
    target = parse_preview_url(url)
    return {"image": await service.resolve_preview_image(target)}
