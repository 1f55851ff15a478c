"""Tests for the HubSpot contact store."""

import json

import httpx
import pytest
import respx
from httpx import Response

from contactenrich.services.crm.contact_store import (
    ContactNotFoundError,
    ContactStoreTransportError,
)
from contactenrich.services.crm.hubspot import HubSpotContactStore

CONTACT_URL = "https://api.hubapi.com/crm/v3/objects/contacts/101"


@pytest.mark.asyncio
@respx.mock
async def test_get_by_id_maps_properties():
    route = respx.get(CONTACT_URL).mock(
        return_value=Response(
            200,
            json={
                "id": "101",
                "properties": {
                    "email": "jane@acme.com",
                    "jobtitle": "VP of Sales",
                    "firstname": "Jane",
                    "lastname": "Doe",
                    "company": None,
                    "hs_object_id": "101",
                },
            },
        )
    )

    async with HubSpotContactStore(access_token="pat-test") as store:
        record = await store.get_by_id("101")

    assert record.id == "101"
    assert record.email == "jane@acme.com"
    assert record.job_title == "VP of Sales"
    assert record.first_name == "Jane"
    assert record.company is None

    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer pat-test"
    assert request.url.params["properties"] == "email,jobtitle,firstname,lastname,company,industry,city"


@pytest.mark.asyncio
@respx.mock
async def test_update_sends_properties():
    route = respx.patch(CONTACT_URL).mock(return_value=Response(200, json={"id": "101"}))

    async with HubSpotContactStore(access_token="pat-test") as store:
        await store.update("101", {"company": "Acme Corp", "city": "San Francisco"})

    request = route.calls.last.request
    assert json.loads(request.content) == {
        "properties": {"company": "Acme Corp", "city": "San Francisco"}
    }


@pytest.mark.asyncio
@respx.mock
async def test_custom_base_url():
    route = respx.get("https://hubspot.internal/crm/v3/objects/contacts/5").mock(
        return_value=Response(200, json={"id": "5", "properties": {}})
    )

    async with HubSpotContactStore(access_token="t", base_url="https://hubspot.internal/") as store:
        record = await store.get_by_id("5")

    assert route.called
    assert record.email is None


@pytest.mark.asyncio
@respx.mock
async def test_missing_contact_raises_not_found():
    respx.get(CONTACT_URL).mock(
        return_value=Response(404, json={"status": "error", "message": "resource not found"})
    )

    async with HubSpotContactStore(access_token="pat-test") as store:
        with pytest.raises(ContactNotFoundError, match="Contact 101 not found"):
            await store.get_by_id("101")


@pytest.mark.asyncio
@respx.mock
async def test_http_error_includes_hubspot_message():
    respx.patch(CONTACT_URL).mock(
        return_value=Response(
            401,
            json={
                "status": "error",
                "message": "Authentication credentials not found.",
                "category": "INVALID_AUTHENTICATION",
            },
        )
    )

    async with HubSpotContactStore(access_token="bad") as store:
        with pytest.raises(ContactStoreTransportError) as exc_info:
            await store.update("101", {"company": "Acme"})

    assert str(exc_info.value) == "HTTP error 401: Authentication credentials not found."


@pytest.mark.asyncio
@respx.mock
async def test_timeout_raises_transport_error():
    respx.get(CONTACT_URL).mock(side_effect=httpx.ConnectTimeout("timed out"))

    async with HubSpotContactStore(access_token="pat-test") as store:
        with pytest.raises(ContactStoreTransportError, match="timed out"):
            await store.get_by_id("101")


@pytest.mark.asyncio
@respx.mock
async def test_connection_error_raises_transport_error():
    respx.get(CONTACT_URL).mock(side_effect=httpx.ConnectError("connection refused"))

    async with HubSpotContactStore(access_token="pat-test") as store:
        with pytest.raises(ContactStoreTransportError, match="connection refused"):
            await store.get_by_id("101")


@pytest.mark.asyncio
@respx.mock
async def test_get_by_id_is_not_retried():
    route = respx.get(CONTACT_URL).mock(return_value=Response(503, text="Service Unavailable"))

    async with HubSpotContactStore(access_token="pat-test") as store:
        with pytest.raises(ContactStoreTransportError):
            await store.get_by_id("101")

    assert route.call_count == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "contact_id,expected_path",
    [
        (
            "../../../../settings/v3/users",
            b"/crm/v3/objects/contacts/..%2F..%2F..%2F..%2Fsettings%2Fv3%2Fusers",
        ),
        ("../companies/5", b"/crm/v3/objects/contacts/..%2Fcompanies%2F5"),
        ("101?archived=true", b"/crm/v3/objects/contacts/101%3Farchived%3Dtrue"),
    ],
)
@respx.mock
async def test_contact_id_stays_in_contacts_path(contact_id, expected_path):
    route = respx.route(host="api.hubapi.com").mock(return_value=Response(404))

    async with HubSpotContactStore(access_token="pat-test") as store:
        with pytest.raises(ContactNotFoundError):
            await store.get_by_id(contact_id)
        with pytest.raises(ContactNotFoundError):
            await store.update(contact_id, {"company": "Acme Corp"})

    assert route.call_count == 2
    for call in route.calls:
        assert call.request.url.raw_path.split(b"?")[0] == expected_path


@pytest.mark.asyncio
@pytest.mark.parametrize("contact_id", [".", ".."])
@respx.mock
async def test_dot_segment_contact_id_is_rejected(contact_id):
    route = respx.route(host="api.hubapi.com").mock(return_value=Response(200, json={}))

    async with HubSpotContactStore(access_token="pat-test") as store:
        with pytest.raises(ContactNotFoundError, match="Invalid contact ID"):
            await store.update(contact_id, {"company": "Acme Corp"})

    assert not route.called
