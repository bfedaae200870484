"""Tests for the relay endpoints that forward payloads to automation webhooks."""

import logging

import httpx
import pytest
from httpx import AsyncClient

BUSINESS = {
    "name": "Jane",
    "phone": "555-1234",
    "email": "j@x.com",
    "businessType": "SaaS",
    "packageInterested": "Starter",
}


@pytest.mark.asyncio
async def test_business_relay_forwards_payload_unchanged(client: AsyncClient, webhook, monkeypatch):
    monkeypatch.setenv("BUSINESS_WEBHOOK_URL", "https://n8n.example.com/webhook/business")

    response = await client.post("/api/business", json=BUSINESS)

    assert response.status_code == 200
    assert response.json() == {"success": True, "forwarded": True, "error": None}
    assert str(webhook.requests[0].url) == "https://n8n.example.com/webhook/business"
    assert webhook.bodies == [BUSINESS]


@pytest.mark.asyncio
async def test_relay_without_webhook_accepts_but_does_not_forward(client: AsyncClient, webhook):
    response = await client.post("/api/business", json=BUSINESS)

    assert response.status_code == 200
    assert response.json()["forwarded"] is False
    assert webhook.requests == []


@pytest.mark.asyncio
async def test_unforwarded_payload_is_logged_for_recovery(client: AsyncClient, webhook, caplog):
    caplog.set_level(logging.INFO, logger="app.routers.relay")

    await client.post("/api/business", json=BUSINESS)

    assert "Unforwarded business submission" in caplog.text
    assert '"email": "j@x.com"' in caplog.text


@pytest.mark.asyncio
async def test_contact_relay_allows_empty_website(client: AsyncClient, webhook, monkeypatch):
    monkeypatch.setenv("CONTACT_WEBHOOK_URL", "https://n8n.example.com/webhook/contact")
    payload = {
        "name": "Sam",
        "email": "sam@example.com",
        "phone": "+1 555 0100",
        "companyName": "Acme",
        "serviceCategory": "Custom",
        "packageTier": "Scale",
        "budgetRange": "open",
        "preferredCallTime": "Evening (5 PM - 8 PM)",
    }

    response = await client.post("/api/contact", json=payload)

    assert response.status_code == 200
    assert webhook.bodies == [{**payload, "website": ""}]


@pytest.mark.asyncio
async def test_relay_rejects_incomplete_payload(client: AsyncClient, webhook):
    response = await client.post("/api/business", json={"name": "Jane"})

    assert response.status_code == 422
    assert webhook.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("failure", ["status", "network"])
async def test_downstream_failure_is_bad_gateway(client: AsyncClient, webhook, monkeypatch, failure):
    monkeypatch.setenv("BUSINESS_WEBHOOK_URL", "https://n8n.example.com/webhook/business")
    if failure == "status":
        webhook.status_code = 500
    else:
        webhook.error = httpx.ReadTimeout("timed out")

    response = await client.post("/api/business", json=BUSINESS)

    assert response.status_code == 502
    assert response.json() == {"detail": "Failed to forward submission"}
