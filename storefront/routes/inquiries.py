"""Contact form and print inquiry routes"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from ..core.config import Settings
from ..core.dependencies import get_app_settings, get_catalogs, get_relay
from ..models.checkout import ContactRequest, InquiryRequest, SubmissionResponse
from ..models.product import CatalogName
from ..services.catalog import CatalogRegistry
from ..services.relay import WebhookRelay
from ..services.submissions import build_contact_payload, build_inquiry_payload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Inquiries"])


@router.post("/api/contact", response_model=SubmissionResponse)
async def submit_contact(
    request: ContactRequest,
    settings: Settings = Depends(get_app_settings),
    relay: WebhookRelay = Depends(get_relay),
):
    """Send a contact form message"""
    result = await relay.submit(settings.contact_webhook_url, build_contact_payload(request))
    if not result.delivered:
        raise HTTPException(
            status_code=502,
            detail="Error sending message. Please try again later.",
        )

    return SubmissionResponse(
        success=True,
        delivered=True,
        message="Thank you for your message. We'll respond as soon as possible.",
    )


@router.post("/api/limited-edition/{product_id}/inquiry", response_model=SubmissionResponse)
async def submit_inquiry(
    product_id: str,
    request: InquiryRequest,
    settings: Settings = Depends(get_app_settings),
    catalogs: CatalogRegistry = Depends(get_catalogs),
    relay: WebhookRelay = Depends(get_relay),
):
    """Send an inquiry about a limited edition print"""
    product = catalogs.get(CatalogName.LIMITED_EDITION).get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    result = await relay.submit(
        settings.inquiry_webhook_url,
        build_inquiry_payload(request, product),
    )
    if not result.delivered:
        raise HTTPException(
            status_code=502,
            detail="Error submitting inquiry. Please try again later.",
        )

    logger.info(f"Inquiry received for {product.id} ({product.name})")
    return SubmissionResponse(
        success=True,
        delivered=True,
        message="Inquiry submitted successfully! We'll get back to you within 24 hours.",
    )
