# infrastructure/external/console_client.py

import httpx
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from app.settings import ConsoleAccessSettings, settings
from core.enums import ResultFormat, SortOrder
from core.exceptions import ConfigurationError, RemoteError
from core.models import ImageRecord
from shared.utils.validation import validate_response

logger = logging.getLogger(__name__)


@dataclass
class ConsoleResponse:
    """Status and decoded body of a Console call"""
    status_code: int
    data: Any

    @property
    def ok(self) -> bool:
        return self.status_code == 200


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(body: Any, fallback: str) -> str:
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    if isinstance(body, str) and body:
        return body
    return fallback


class ConsoleClient:
    """
    Async client for the Console REST API.

    Instances are cheap and hold only the access token; each call opens its
    own ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        access_token: str,
        console_endpoint: str,
        timeout: int = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.console_endpoint = console_endpoint.rstrip("/")
        self.timeout = timeout

        # HTTP client config
        self.client_config: Dict[str, Any] = {
            "timeout": httpx.Timeout(self.timeout),
            "headers": {
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/json",
                "User-Agent": "EdgeInferenceViewer/1.0",
            },
        }
        if transport is not None:
            self.client_config["transport"] = transport

    # -----------------------------
    # Construction
    # -----------------------------
    @classmethod
    async def create_instance(
        cls,
        config: Optional[ConsoleAccessSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "ConsoleClient":
        """
        Fetch an access token with the client credentials grant and return a
        client bound to it.

        Raises:
            ConfigurationError: settings are incomplete or the token request fails
        """
        config = config or settings.console_access
        if not config.is_complete:
            raise ConfigurationError("Console access settings are incomplete")

        token_config: Dict[str, Any] = {"timeout": httpx.Timeout(config.request_timeout)}
        if transport is not None:
            token_config["transport"] = transport

        try:
            async with httpx.AsyncClient(**token_config) as client:
                response = await client.post(
                    config.portal_authorization_endpoint,
                    data={"grant_type": "client_credentials", "scope": "system"},
                    auth=(config.client_id, config.client_secret),
                    headers={"Accept": "application/json"},
                )
        except httpx.HTTPError as e:
            logger.error(f"🔌 Cannot reach authorization endpoint: {e}")
            raise ConfigurationError(f"Cannot reach authorization endpoint: {e}") from e

        if response.status_code != 200:
            logger.error(f"❌ Token request rejected: {response.status_code}")
            raise ConfigurationError(f"Token request rejected with status {response.status_code}")

        try:
            body = validate_response(_decode_body(response), ["access_token"], response.status_code)
        except RemoteError as e:
            raise ConfigurationError(str(e)) from e

        logger.debug("🔑 Console access token acquired")
        return cls(
            access_token=body["access_token"],
            console_endpoint=config.console_endpoint,
            timeout=config.request_timeout,
            transport=transport,
        )

    async def _get(self, path: str, params: Dict[str, Any]) -> httpx.Response:
        endpoint = f"{self.console_endpoint}{path}"
        try:
            async with httpx.AsyncClient(**self.client_config) as client:
                return await client.get(endpoint, params=params)
        except httpx.TimeoutException as e:
            logger.error(f"⏰ Timeout calling Console: {endpoint}")
            raise RemoteError(f"Timeout calling Console: {endpoint}") from e
        except httpx.HTTPError as e:
            logger.error(f"🔌 Connection error to Console: {endpoint}")
            raise RemoteError(f"Connection error to Console: {e}") from e

    # -----------------------------
    # Images
    # -----------------------------
    async def get_images(
        self,
        device_id: str,
        sub_directory_name: str,
        number_of_images: int,
        skip: int = 0,
        order_by: SortOrder = SortOrder.DESC,
        from_datetime: Optional[str] = None,
        to_datetime: Optional[str] = None
    ) -> List[ImageRecord]:
        """
        List uploaded images of a device directory.

        Raises:
            RemoteError: non-200 status or a body without an image list
        """
        params: Dict[str, Any] = {
            "limit": number_of_images,
            "skip": skip,
            "order_by": SortOrder(order_by).value,
        }
        if from_datetime:
            params["from_datetime"] = from_datetime
        if to_datetime:
            params["to_datetime"] = to_datetime

        path = f"/devices/{device_id}/images/directories/{sub_directory_name}"
        response = await self._get(path, params)
        body = _decode_body(response)

        if response.status_code != 200:
            logger.warning(f"⚠️ Console returned {response.status_code} listing images of {device_id}")
            raise RemoteError(
                _error_message(body, f"Cannot get images (status {response.status_code})"),
                response.status_code,
                body,
            )

        body = validate_response(body, ["images"], response.status_code)
        entries = body["images"] or []
        if not isinstance(entries, list):
            raise RemoteError("Malformed image listing", response.status_code, body)
        try:
            images = [ImageRecord.from_dict(entry) for entry in entries]
        except (KeyError, TypeError) as e:
            raise RemoteError("Malformed image listing", response.status_code, body) from e
        logger.debug(f"🖼️ Listed {len(images)} images - Device: {device_id}")
        return images

    # -----------------------------
    # Inference results
    # -----------------------------
    async def get_inference_results(
        self,
        device_id: str,
        filter: Optional[str] = None,
        number_of_inference_results: int = 1,
        raw: ResultFormat = ResultFormat.RAW,
        time: Optional[str] = None
    ) -> ConsoleResponse:
        """Look up inference results; the caller decides what a non-200 status means"""
        params: Dict[str, Any] = {
            "number_of_inference_results": number_of_inference_results,
            "raw": int(raw),
        }
        if filter is not None:
            params["filter"] = filter
        if time is not None:
            params["time"] = time

        response = await self._get(f"/devices/{device_id}/inferenceresults", params)
        logger.debug(f"📥 Inference lookup {time} - Device: {device_id} - Status: {response.status_code}")
        return ConsoleResponse(status_code=response.status_code, data=_decode_body(response))
