"""Tests for the verification HTTP client."""

import json

import httpx
import pytest
import respx

from code_verify.client import (
    VerifyClient,
    VerifyConnectionError,
    VerifyResponseError,
    VerifyServerError,
)
from code_verify.config import Settings

BASE_URL = "http://verify.test"


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings(api_base_url=BASE_URL)


@pytest.mark.asyncio
@respx.mock
async def test_verify_success(settings):
    route = respx.post(f"{BASE_URL}/api/verify").respond(200, json={"success": True})
    client = VerifyClient(settings)

    result = await client.verify("123456")

    assert result.success is True
    assert json.loads(route.calls[0].request.content) == {"code": "123456"}
    await client.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_verify_rejection_is_returned(settings):
    respx.post(f"{BASE_URL}/api/verify").respond(
        400,
        json={"success": False, "message": "Verification Error: Code ends in 7"},
    )
    client = VerifyClient(settings)

    result = await client.verify("123457")

    assert result.success is False
    assert result.message == "Verification Error: Code ends in 7"
    await client.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_verify_server_error(settings):
    respx.post(f"{BASE_URL}/api/verify").respond(
        500,
        json={"success": False, "message": "Server error, please try again later."},
    )
    client = VerifyClient(settings)

    with pytest.raises(VerifyServerError):
        await client.verify("123456")
    await client.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_verify_connection_error(settings):
    respx.post(f"{BASE_URL}/api/verify").mock(side_effect=httpx.ConnectError("refused"))
    client = VerifyClient(settings)

    with pytest.raises(VerifyConnectionError):
        await client.verify("123456")
    await client.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_verify_timeout(settings):
    respx.post(f"{BASE_URL}/api/verify").mock(side_effect=httpx.ReadTimeout("slow"))
    client = VerifyClient(settings)

    with pytest.raises(VerifyConnectionError):
        await client.verify("123456")
    await client.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_verify_malformed_body(settings):
    respx.post(f"{BASE_URL}/api/verify").respond(200, text="not json")
    client = VerifyClient(settings)

    with pytest.raises(VerifyResponseError):
        await client.verify("123456")
    await client.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_verify_body_without_success_flag(settings):
    respx.post(f"{BASE_URL}/api/verify").respond(200, json={"ok": True})
    client = VerifyClient(settings)

    with pytest.raises(VerifyResponseError):
        await client.verify("123456")
    await client.aclose()


@pytest.mark.asyncio
async def test_client_against_app():
    """Client and form should work end to end against the real app."""
    from code_verify.form import CodeEntryForm, VerificationResult
    from code_verify.main import create_app

    settings = Settings(api_base_url="http://testserver")
    transport = httpx.ASGITransport(app=create_app(settings))
    http = httpx.AsyncClient(transport=transport, base_url=settings.api_base_url)
    client = VerifyClient(settings, http=http)

    form = CodeEntryForm()
    form.paste("000007")
    assert await form.submit(client) is VerificationResult.SERVER_VALIDATION_FAILURE

    form.paste("123456")
    assert await form.submit(client) is VerificationResult.SUCCESS
    assert form.code == ""
    await client.aclose()
