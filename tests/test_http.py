from __future__ import annotations

import asyncio
import gc
import json

import httpx
import pytest

from woodcore.errors import RemoteAPIError, TransportError
from woodcore.http import RequestDescriptor


@pytest.mark.anyio
async def test_send_injects_bearer_and_targets_base_url(make_http):
    http, rec = make_http(lambda request: httpx.Response(200, json={"ok": True}))

    await http.send(RequestDescriptor("/clients/7"))

    req = rec.requests[0]
    assert req.headers["Authorization"] == "Bearer wc_test_key"
    assert str(req.url) == "https://api.test/api/v2/clients/7"
    assert req.method == "GET"


@pytest.mark.anyio
async def test_send_returns_body_unmodified(make_http):
    payload = {"status": "success", "data": [{"id": 1}, {"id": 2}], "meta": {"totalPage": 1}}
    http, _ = make_http(lambda request: httpx.Response(200, json=payload))

    body = await http.send(RequestDescriptor("/savingsaccounts", query={}))

    assert body == payload


@pytest.mark.anyio
async def test_get_list_sends_default_pagination(make_http):
    http, rec = make_http(lambda request: httpx.Response(200, json={}))

    await http.send(RequestDescriptor("/loans", query={"status": "active"}))

    params = rec.requests[0].url.params
    assert params["perPage"] == "10"
    assert params["page"] == "1"
    assert params["status"] == "active"


@pytest.mark.anyio
async def test_post_sends_json_body_without_pagination(make_http):
    http, rec = make_http(lambda request: httpx.Response(200, json={"resourceId": 9}))

    body = await http.send(
        RequestDescriptor("/loans/3/approve", "POST", body={"approvedOnDate": "2024-01-02"})
    )

    req = rec.requests[0]
    assert body == {"resourceId": 9}
    assert req.method == "POST"
    assert json.loads(req.content) == {"approvedOnDate": "2024-01-02"}
    assert "page" not in req.url.params
    assert "perPage" not in req.url.params


@pytest.mark.anyio
async def test_string_error_message(make_http):
    http, _ = make_http(lambda request: httpx.Response(404, json={"message": "Client not found"}))

    with pytest.raises(RemoteAPIError) as info:
        await http.send(RequestDescriptor("/clients/404"))

    err = info.value
    assert err.code == 404
    assert err.status_code == 404
    assert err.message == "Client not found"
    assert err.to_dict() == {"name": "RemoteAPIError", "code": 404, "message": "Client not found"}


@pytest.mark.anyio
async def test_object_error_message(make_http):
    payload = {"message": {"message": "Validation failed", "error": "principal is required"}}
    http, _ = make_http(lambda request: httpx.Response(400, json=payload))

    with pytest.raises(RemoteAPIError) as info:
        await http.send(RequestDescriptor("/loans", "POST", body={}))

    assert info.value.message == "Validation failed: principal is required"
    assert info.value.body == payload


@pytest.mark.anyio
async def test_non_json_error_falls_back_to_reason(make_http):
    http, _ = make_http(lambda request: httpx.Response(502, text="<html>bad gateway</html>"))

    with pytest.raises(RemoteAPIError) as info:
        await http.send(RequestDescriptor("/clients"))

    assert info.value.code == 502
    assert info.value.message == "Bad Gateway"
    assert info.value.body is None


@pytest.mark.anyio
async def test_transport_failure_is_normalized(make_http):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    http, _ = make_http(handler)

    with pytest.raises(TransportError) as info:
        await http.send(RequestDescriptor("/clients"))

    assert info.value.code == "ConnectError"
    assert info.value.message == "connection refused"
    assert isinstance(info.value.__cause__, httpx.ConnectError)


@pytest.mark.anyio
async def test_no_retry_on_server_error(make_http):
    http, rec = make_http(lambda request: httpx.Response(503, json={"message": "down"}))

    with pytest.raises(RemoteAPIError):
        await http.send(RequestDescriptor("/clients"))

    assert rec.calls == 1


# ---------------------------------------------------------------------------
# Coalescing
# ---------------------------------------------------------------------------


@pytest.mark.anyio
async def test_concurrent_execute_shares_one_call(make_http):
    release = asyncio.Event()

    async def handler(request):
        await release.wait()
        return httpx.Response(200, json={"id": 1})

    http, rec = make_http(handler)
    pending = http.prepare(RequestDescriptor("/clients/1"))

    first = asyncio.ensure_future(pending.execute())
    second = asyncio.ensure_future(pending.execute())
    await asyncio.sleep(0.01)
    assert pending.in_flight

    release.set()
    r1, r2 = await asyncio.gather(first, second)

    assert rec.calls == 1
    assert r1 == r2 == {"id": 1}
    assert r1 is r2


@pytest.mark.anyio
async def test_concurrent_callers_share_failure(make_http):
    release = asyncio.Event()

    async def handler(request):
        await release.wait()
        return httpx.Response(500, json={"message": "boom"})

    http, rec = make_http(handler)
    pending = http.prepare(RequestDescriptor("/clients/1"))

    tasks = [asyncio.ensure_future(pending.execute()) for _ in range(3)]
    await asyncio.sleep(0.01)
    release.set()
    results = await asyncio.gather(*tasks, return_exceptions=True)

    assert rec.calls == 1
    assert all(isinstance(r, RemoteAPIError) and r.message == "boom" for r in results)


@pytest.mark.anyio
async def test_slot_clears_after_success(make_http):
    http, rec = make_http(lambda request: httpx.Response(200, json={"n": len(rec.requests)}))
    pending = http.prepare(RequestDescriptor("/clients/1"))

    assert await pending.execute() == {"n": 1}
    assert not pending.in_flight
    assert await pending == {"n": 2}
    assert rec.calls == 2


@pytest.mark.anyio
async def test_slot_clears_after_failure(make_http):
    responses = [httpx.Response(500, json={"message": "x"}), httpx.Response(200, json={"ok": 1})]
    http, rec = make_http(lambda request: responses.pop(0))
    pending = http.prepare(RequestDescriptor("/clients/1"))

    with pytest.raises(RemoteAPIError):
        await pending.execute()
    assert not pending.in_flight

    assert await pending.execute() == {"ok": 1}
    assert rec.calls == 2


@pytest.mark.anyio
async def test_separate_executors_do_not_coalesce(make_http):
    release = asyncio.Event()

    async def handler(request):
        await release.wait()
        return httpx.Response(200, json={})

    http, rec = make_http(handler)
    d = RequestDescriptor("/clients/1")
    tasks = [asyncio.ensure_future(http.prepare(d).execute()) for _ in range(2)]
    await asyncio.sleep(0.01)
    release.set()
    await asyncio.gather(*tasks)

    assert rec.calls == 2


@pytest.mark.anyio
async def test_invalid_json_on_success_is_normalized(make_http):
    http, _ = make_http(lambda request: httpx.Response(200, text="<html>ok</html>"))

    with pytest.raises(RemoteAPIError) as info:
        await http.send(RequestDescriptor("/clients/1"))

    assert info.value.code == 200
    assert info.value.message == "Invalid JSON response"
    assert info.value.body is None


@pytest.mark.anyio
async def test_cancelled_sole_waiter_leaves_no_unretrieved_error(make_http):
    release = asyncio.Event()

    async def handler(request):
        await release.wait()
        return httpx.Response(500, json={"message": "boom"})

    http, rec = make_http(handler)
    pending = http.prepare(RequestDescriptor("/clients/1"))

    loop = asyncio.get_running_loop()
    reported = []
    loop.set_exception_handler(lambda _loop, context: reported.append(context))
    try:
        waiter = asyncio.ensure_future(pending.execute())
        await asyncio.sleep(0.01)
        shared = pending._pending
        waiter.cancel()
        with pytest.raises(asyncio.CancelledError):
            await waiter

        release.set()
        while not shared.done():
            await asyncio.sleep(0.01)
        await asyncio.sleep(0)
        del shared
        gc.collect()
    finally:
        loop.set_exception_handler(None)

    assert rec.calls == 1
    assert not pending.in_flight
    assert reported == []
