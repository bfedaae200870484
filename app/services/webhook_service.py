"""Outbound webhook delivery"""
import httpx
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class WebhookDeliveryError(Exception):
    """The webhook could not be reached or answered with a non-2xx status"""

    def __init__(self, url: str, status_code: Optional[int] = None, reason: str = ""):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        if status_code is not None:
            message = f"Webhook {url} returned {status_code}"
        else:
            message = f"Webhook {url} unreachable: {reason}"
        super().__init__(message)


async def post_json(
    url: str,
    payload: Dict[str, Any],
    client: Optional[httpx.AsyncClient] = None
) -> httpx.Response:
    """
    POST a JSON payload to a webhook exactly once

    Args:
        url: Webhook URL
        payload: JSON-serialisable body
        client: Optional shared client; a short-lived one is opened otherwise

    Returns:
        The 2xx response

    Raises:
        WebhookDeliveryError: On transport failure or non-2xx status
    """
    headers = {"Content-Type": "application/json"}

    try:
        if client is not None:
            response = await client.post(url, json=payload, headers=headers)
        else:
            async with httpx.AsyncClient() as own_client:
                response = await own_client.post(url, json=payload, headers=headers)
    except httpx.HTTPError as e:
        raise WebhookDeliveryError(url, reason=str(e) or e.__class__.__name__) from e

    if not response.is_success:
        raise WebhookDeliveryError(url, status_code=response.status_code)

    logger.info(f"Webhook delivered to {url}: {response.status_code}")
    return response


async def get_http_client():
    """FastAPI dependency: one AsyncClient per request"""
    async with httpx.AsyncClient() as client:
        yield client
