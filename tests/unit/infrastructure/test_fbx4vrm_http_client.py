import json
import logging

import httpx
import pytest
import respx
from httpx import Response

from fbx4vrm_reporter.domain.value_objects import TransportFailure
from fbx4vrm_reporter.infrastructure.http.fbx4vrm_http_client import Fbx4vrmHttpClient

BASE_URL = "https://reports.example.com:8443"


def test_base_url_trailing_slash_is_trimmed(settings):
    http_client = Fbx4vrmHttpClient(settings)

    assert http_client.base_url == BASE_URL
    assert http_client.timeout == 5
    assert http_client.verify is True


def test_certificate_bypass_disables_verification(settings, caplog):
    caplog.set_level(logging.WARNING, logger="fbx4vrm_reporter")

    http_client = Fbx4vrmHttpClient(settings.model_copy(update={"skip_certificate_validation": True}))

    assert http_client.verify is False
    assert "Certificate validation disabled" in caplog.text


@pytest.mark.asyncio
@respx.mock
async def test_get_returns_status_and_body(settings):
    route = respx.get(f"{BASE_URL}/api/v1/fbx4vrm").mock(return_value=Response(200, text='{"api":"fbx4vrm"}'))

    result = await Fbx4vrmHttpClient(settings).get("/api/v1/fbx4vrm")

    assert route.called
    assert result.succeeded
    assert result.status_code == 200
    assert result.body == '{"api":"fbx4vrm"}'
    assert route.calls.last.request.headers["Accept"] == "application/json"


@pytest.mark.asyncio
@respx.mock
async def test_post_json_sends_json_body(settings):
    route = respx.post(f"{BASE_URL}/bug-reports/queue/submit").mock(
        return_value=Response(200, json={"status": "queued"})
    )

    await Fbx4vrmHttpClient(settings).post_json("/bug-reports/queue/submit", {"report_id": "abcd1234"})

    sent = route.calls.last.request
    assert sent.headers["Content-Type"] == "application/json"
    assert json.loads(sent.content) == {"report_id": "abcd1234"}


@pytest.mark.asyncio
@respx.mock
async def test_http_error_is_reported_not_raised(settings):
    respx.get(f"{BASE_URL}/bug-reports/queue/stats").mock(return_value=Response(404, text="missing"))

    result = await Fbx4vrmHttpClient(settings).get("/bug-reports/queue/stats")

    assert not result.succeeded
    assert result.failure == TransportFailure.HTTP
    assert result.status_code == 404
    assert result.error == "Not Found"
    assert result.body == "missing"


@pytest.mark.asyncio
@respx.mock
async def test_connection_error_is_reported_not_raised(settings):
    respx.get(f"{BASE_URL}/api/v1/fbx4vrm").mock(side_effect=httpx.ConnectError("Name or service not known"))

    result = await Fbx4vrmHttpClient(settings).get("/api/v1/fbx4vrm")

    assert result.failure == TransportFailure.CONNECTION
    assert result.status_code == 0
    assert result.error == "Name or service not known"
    assert result.body is None


@pytest.mark.asyncio
@respx.mock
async def test_timeout_counts_as_connection_error(settings):
    respx.get(f"{BASE_URL}/api/v1/fbx4vrm").mock(side_effect=httpx.ReadTimeout(""))

    result = await Fbx4vrmHttpClient(settings).get("/api/v1/fbx4vrm")

    assert result.failure == TransportFailure.CONNECTION
    assert result.error == "ReadTimeout"


@pytest.mark.asyncio
@respx.mock
async def test_set_base_url_redirects_following_requests(settings):
    route = respx.get("http://localhost:8000/api/v1/fbx4vrm").mock(return_value=Response(200, text="{}"))
    http_client = Fbx4vrmHttpClient(settings)

    http_client.set_base_url("http://localhost:8000/")
    await http_client.get("/api/v1/fbx4vrm")

    assert route.called


@pytest.mark.asyncio
@respx.mock
async def test_verbose_logging_shortens_image_payloads(settings, caplog):
    caplog.set_level(logging.INFO, logger="fbx4vrm_reporter")
    respx.post(f"{BASE_URL}/api/v1/fbx4vrm/bug-reports").mock(return_value=Response(200, json={"status": "accepted"}))
    http_client = Fbx4vrmHttpClient(settings.model_copy(update={"verbose_logging": True}))
    image = "A" * 500

    await http_client.post_json("/api/v1/fbx4vrm/bug-reports", {"screenshot": {"base64": image}})

    assert f"POST {BASE_URL}/api/v1/fbx4vrm/bug-reports" in caplog.text
    assert "Response code: 200" in caplog.text
    assert "[500 chars]" in caplog.text
    assert image not in caplog.text


@pytest.mark.asyncio
@respx.mock
async def test_quiet_by_default(settings, caplog):
    caplog.set_level(logging.INFO, logger="fbx4vrm_reporter")
    respx.get(f"{BASE_URL}/api/v1/fbx4vrm").mock(return_value=Response(200, text="{}"))

    await Fbx4vrmHttpClient(settings).get("/api/v1/fbx4vrm")

    assert "GET" not in caplog.text
