"""
HubSpot CRM v3 client for the practicum custom object.
Uses Bearer token auth and the requests library; every call is attempted once.
"""

import logging
from typing import Any, NoReturn

import requests
from fastapi import Depends

from hubspot_practicum.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

# HubSpot caps list page size at 100.
MAX_PAGE_SIZE = 100


class HubSpotServiceError(Exception):
    """Raised when a HubSpot API call fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        detail: Any = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class HubSpotService:
    """
    Client for one HubSpot custom object resource (/crm/v3/objects/<type>).
    """

    CUSTOM_OBJECT_PROPERTIES = ["name", "bio", "species"]

    def __init__(
        self,
        access_token: str = "",
        base_url: str = "https://api.hubapi.com",
        object_type: str = "2-55323801",
        timeout: float = 30.0,
    ) -> None:
        self._token = (access_token or "").strip()
        self._base_url = base_url
        self._object_type = object_type
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "HubSpotService":
        return cls(
            access_token=settings.private_app_access,
            base_url=settings.hubspot_base_url,
            object_type=settings.hubspot_object_type,
            timeout=settings.hubspot_timeout,
        )

    @property
    def configured(self) -> bool:
        """True when an access token is available; callers skip HubSpot otherwise."""
        return bool(self._token)

    @property
    def custom_object_path(self) -> str:
        return f"/crm/v3/objects/{self._object_type}"

    def _get_headers(self) -> dict[str, str]:
        """Build request headers with Bearer token."""
        if not self._token:
            raise HubSpotServiceError(
                "HubSpot access token not configured. Set PRIVATE_APP_ACCESS in environment."
            )
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
        }

    def _handle_error(self, response: requests.Response) -> NoReturn:
        """Interpret error response and raise HubSpotServiceError with detail."""
        try:
            body = response.json()
        except ValueError:
            body = response.text or None
        msg = f"HubSpot API error: {response.status_code}"
        if isinstance(body, dict):
            detail = body.get("message") or body.get("status") or body
            if body.get("category"):
                msg += f" ({body['category']})"
            if isinstance(detail, str):
                msg += f" - {detail}"
        elif isinstance(body, str) and body:
            msg += f" - {body[:500]}"
        raise HubSpotServiceError(msg, status_code=response.status_code, detail=body)

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any] | list[Any]:
        """
        Execute a single HTTP request against HubSpot.
        path: e.g. /crm/v3/objects/2-55323801 (no leading slash required).
        """
        url = f"{self._base_url.rstrip('/')}/{path.lstrip('/')}"
        headers = self._get_headers()

        try:
            resp = requests.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                json=json,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise HubSpotServiceError(f"HubSpot request failed: {e!s}") from e

        if not resp.ok:
            self._handle_error(resp)
        if resp.status_code == 204 or not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError as e:
            raise HubSpotServiceError(
                "HubSpot returned a non-JSON response",
                status_code=resp.status_code,
                detail=resp.text[:500],
            ) from e

    # -------------------------------------------------------------------------
    # Custom object records
    # -------------------------------------------------------------------------

    def list_custom_objects(
        self,
        limit: int = MAX_PAGE_SIZE,
        properties: list[str] | None = None,
    ) -> dict[str, Any]:
        """Fetch the first page of custom object records."""
        params: dict[str, Any] = {
            "limit": min(limit, MAX_PAGE_SIZE),
            "properties": ",".join(properties or self.CUSTOM_OBJECT_PROPERTIES),
        }
        data = self._request("GET", self.custom_object_path, params=params)
        if isinstance(data, list):
            return {"results": data}
        if not isinstance(data, dict):
            raise HubSpotServiceError(
                "Unexpected response when listing custom objects", detail=data
            )
        return data

    def create_custom_object(self, record_data: dict[str, Any]) -> dict[str, Any]:
        """Create a record. record_data can be {'properties': {...}} or flat properties."""
        if "properties" not in record_data:
            record_data = {"properties": record_data}
        data = self._request("POST", self.custom_object_path, json=record_data)
        if not isinstance(data, dict):
            raise HubSpotServiceError("Unexpected response when creating custom object")
        logger.info("Created HubSpot custom object id=%s", data.get("id", ""))
        return data


def get_hubspot_service(settings: Settings = Depends(get_settings)) -> HubSpotService:
    """Dependency: return a HubSpotService built from application settings."""
    return HubSpotService.from_settings(settings)
