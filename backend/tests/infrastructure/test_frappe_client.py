"""FrappeClient — auth headers, retry policy and response shapes over MockTransport."""

import httpx
import pytest

from signo_connect.core.errors import FrappeAPIError
from signo_connect.infrastructure.frappe_client import FrappeClient


async def test_requests_carry_token_and_x_key(frappe, fake_frappe):
    fake_frappe.responses["/Drivers"] = {"data": []}
    await frappe.list_drivers()
    request = fake_frappe.requests[0]
    assert request.headers["Authorization"] == "token test-key:test-secret"
    assert request.headers["x-key"] == "test-x-key"


async def test_list_drivers_sends_paging_params(frappe, fake_frappe):
    fake_frappe.responses["/Drivers"] = {"data": [{"name": "SIG00001"}]}
    drivers = await frappe.list_drivers(limit_start=20, limit_page_length=10)
    assert drivers == [{"name": "SIG00001"}]
    params = fake_frappe.requests[0].url.params
    assert params["limit_start"] == "20"
    assert params["limit_page_length"] == "10"


async def test_server_error_retried_then_succeeds(frappe, fake_frappe):
    fake_frappe.responses["/Job"] = [
        httpx.Response(503),
        httpx.Response(200, json={"data": [{"name": "JOB-1"}]}),
    ]
    assert await frappe.list_jobs() == [{"name": "JOB-1"}]
    assert len(fake_frappe.requests) == 2


async def test_server_error_exhausts_retries(frappe, fake_frappe):
    fake_frappe.responses["/Job"] = httpx.Response(500)
    with pytest.raises(FrappeAPIError) as exc:
        await frappe.list_jobs()
    assert exc.value.api_error_type == "server_error"
    assert exc.value.http_status == 502
    assert len(fake_frappe.requests) == 3


async def test_client_error_not_retried(frappe, fake_frappe):
    fake_frappe.responses["get_posted_jobs"] = httpx.Response(
        403, json={"message": "Not permitted"},
    )
    with pytest.raises(FrappeAPIError) as exc:
        await frappe.get_posted_jobs("TRN-001")
    assert exc.value.status_code == 403
    assert "Not permitted" in exc.value.message
    assert len(fake_frappe.requests) == 1


async def test_exception_in_ok_body_is_failure(frappe, fake_frappe):
    fake_frappe.responses["post_job"] = {"exception": "ValidationError: title missing"}
    with pytest.raises(FrappeAPIError) as exc:
        await frappe.post_job({"title": ""})
    assert exc.value.api_error_type == "frappe_exception"


async def test_connection_error_retried():
    calls = []

    def handler(request):
        calls.append(request)
        raise httpx.ConnectError("refused", request=request)

    client = FrappeClient(
        base_url="https://frappe.test", api_token="k:s", x_key="x",
        max_retries=1, base_delay_ms=0, transport=httpx.MockTransport(handler),
    )
    with pytest.raises(FrappeAPIError) as exc:
        await client.list_drivers()
    await client.aclose()
    assert exc.value.api_error_type == "connection_error"
    assert len(calls) == 2


async def test_posted_jobs_read_from_message_key(frappe, fake_frappe):
    fake_frappe.responses["get_posted_jobs"] = {"message": [{"name": "FEED-1"}]}
    assert await frappe.get_posted_jobs("TRN-001") == [{"name": "FEED-1"}]


async def test_bare_list_body_is_wrapped(frappe, fake_frappe):
    fake_frappe.responses["get_trips"] = [{"trip_id": "TR-00001"}]
    assert await frappe.get_trips("TRN-001") == [{"trip_id": "TR-00001"}]


async def test_non_list_data_becomes_empty(frappe, fake_frappe):
    fake_frappe.responses["/Drivers"] = {"data": {"unexpected": True}}
    assert await frappe.list_drivers() == []


async def test_transporter_profile_returns_doc(frappe, fake_frappe):
    fake_frappe.responses["get_transporter_profile"] = {"doc": {"name": "TRN-001"}}
    assert await frappe.get_transporter_profile("9876543210") == {"name": "TRN-001"}
    assert fake_frappe.requests[0].url.params["phone_number"] == "9876543210"


async def test_update_job_status_posts_body(frappe, fake_frappe):
    fake_frappe.responses["update_job"] = {"message": "ok"}
    await frappe.update_job_status("JOB-1", "FEED-1", "Paused")
    assert fake_frappe.last_json() == {"job": "JOB-1", "feed_id": "FEED-1", "status": "Paused"}


async def test_non_json_body_is_invalid_response(frappe, fake_frappe):
    fake_frappe.responses["/Job"] = httpx.Response(200, text="<html>")
    with pytest.raises(FrappeAPIError) as exc:
        await frappe.list_jobs()
    assert exc.value.api_error_type == "invalid_response"
