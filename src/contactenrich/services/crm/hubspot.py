"""HubSpot CRM contact store using the CRM v3 objects API."""

from urllib.parse import quote

import httpx
import structlog

from contactenrich.services.crm.contact_store import (
    CONTACT_PROPERTIES,
    ContactNotFoundError,
    ContactRecord,
    ContactStoreTransportError,
)

logger = structlog.get_logger()


class HubSpotContactStore:
    """
    Read and update HubSpot contacts.

    API Documentation: https://developers.hubspot.com/docs/api/crm/contacts

    Authentication uses a private app access token passed in by the caller.
    Requests are not retried.
    """

    DEFAULT_BASE_URL = "https://api.hubapi.com"
    CONTACTS_PATH = "/crm/v3/objects/contacts"

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
    ):
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={
                    "Authorization": f"Bearer {self.access_token}",
                    "Content-Type": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get_by_id(self, contact_id: str) -> ContactRecord:
        """
        Fetch a contact with the properties used for enrichment.

        Raises:
            ContactNotFoundError: Contact ID does not exist
            ContactStoreTransportError: Request failed
        """
        response = await self._request(
            "GET",
            contact_id,
            params={"properties": ",".join(CONTACT_PROPERTIES)},
        )
        data = response.json()
        return ContactRecord.from_properties(
            str(data.get("id") or contact_id),
            data.get("properties") or {},
        )

    async def update(self, contact_id: str, updates: dict[str, str]) -> None:
        """
        Update contact properties.

        Raises:
            ContactNotFoundError: Contact ID does not exist
            ContactStoreTransportError: Request failed
        """
        await self._request("PATCH", contact_id, json={"properties": updates})
        logger.info("Updated HubSpot contact", contact_id=contact_id, fields=sorted(updates))

    async def _request(self, method: str, contact_id: str, **kwargs) -> httpx.Response:
        url = self._contact_path(contact_id)
        client = await self._get_client()

        try:
            response = await client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning("HubSpot request timed out", method=method, contact_id=contact_id)
            raise ContactStoreTransportError(f"HubSpot request timed out: {method} {url}") from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            if status_code == 404:
                raise ContactNotFoundError(f"Contact {contact_id} not found") from e
            message = self._error_message(e.response)
            logger.error(
                "HubSpot HTTP error",
                method=method,
                contact_id=contact_id,
                status=status_code,
                error=message,
            )
            raise ContactStoreTransportError(f"HTTP error {status_code}: {message}") from e
        except httpx.HTTPError as e:
            logger.error("HubSpot request failed", method=method, contact_id=contact_id, error=str(e))
            raise ContactStoreTransportError(f"HubSpot request failed: {e}") from e

        return response

    def _contact_path(self, contact_id: str) -> str:
        """Build the object path with the ID encoded as a single segment."""
        if contact_id in (".", ".."):
            raise ContactNotFoundError(f"Invalid contact ID {contact_id!r}")
        return f"{self.CONTACTS_PATH}/{quote(contact_id, safe='')}"

    def _error_message(self, response: httpx.Response) -> str:
        """
        Extract the message from a HubSpot error body.

        Error format:
        {
            "status": "error",
            "message": "Authentication credentials not found.",
            "correlationId": "...",
            "category": "INVALID_AUTHENTICATION"
        }
        """
        try:
            data = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return response.reason_phrase

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
