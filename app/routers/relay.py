"""Relay endpoints that forward form payloads to the automation webhooks (PUBLIC)"""
from fastapi import APIRouter, Depends, HTTPException
from typing import Any, Dict, Optional
import json
import httpx
import logging

from app.config import get_settings
from app.models.forms import BusinessInquiry, ContactRequest, SubmitResult
from app.services.webhook_service import WebhookDeliveryError, get_http_client, post_json

logger = logging.getLogger(__name__)
router = APIRouter()


async def forward(
    source: str,
    webhook_url: Optional[str],
    payload: Dict[str, Any],
    client: httpx.AsyncClient
) -> SubmitResult:
    """Pass a payload through unchanged to the downstream webhook"""
    if not webhook_url:
        logger.warning(f"No webhook configured for {source} submissions, payload not forwarded")
        logger.info(f"Unforwarded {source} submission: {json.dumps(payload)}")
        return SubmitResult(success=True, forwarded=False)

    try:
        await post_json(webhook_url, payload, client=client)
        logger.info(f"Forwarded {source} submission")
        return SubmitResult(success=True, forwarded=True)

    except WebhookDeliveryError as e:
        logger.error(f"Relay error for {source} submission: {e}")
        raise HTTPException(status_code=502, detail="Failed to forward submission")


@router.post("/business", response_model=SubmitResult)
async def relay_business(
    inquiry: BusinessInquiry,
    client: httpx.AsyncClient = Depends(get_http_client)
):
    """Forward a business inquiry"""
    settings = get_settings()
    return await forward("business", settings.business_webhook_url, inquiry.model_dump(), client)


@router.post("/contact", response_model=SubmitResult)
async def relay_contact(
    contact: ContactRequest,
    client: httpx.AsyncClient = Depends(get_http_client)
):
    """Forward a contact request"""
    settings = get_settings()
    return await forward("contact", settings.contact_webhook_url, contact.model_dump(), client)
