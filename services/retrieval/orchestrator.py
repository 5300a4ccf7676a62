# services/retrieval/orchestrator.py
import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, List, Optional

from app.settings import ConsoleAccessSettings, settings
from core.enums import ResultFormat, SortOrder
from core.exceptions import ConfigurationError, DecodeError, MissingInferenceData, RemoteError
from core.models import ImageRecord, OutputRecord
from infrastructure.external.console_client import ConsoleClient, ConsoleResponse
from shared.decorators.timing import time_execution
from .deserializer import decode_inference_payload, serialize_detections
from .time_window import resolve_window

logger = logging.getLogger(__name__)

ClientFactory = Callable[[ConsoleAccessSettings], Awaitable[ConsoleClient]]

WRONG_SETTINGS_MESSAGE = "Wrong setting. Check the settings."
MISSING_INFERENCE_MESSAGE = "Cannot get inference results."


def utc_now() -> datetime:
    """Current UTC wall clock as a naive datetime, comparable with image timestamps"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def extract_inference_payload(response: ConsoleResponse) -> str:
    """Base64 detection payload of the first inference result"""
    if not response.ok:
        data = response.data
        message = data.get("message") if isinstance(data, dict) else data
        raise RemoteError(
            str(message or f"Inference lookup failed with status {response.status_code}"),
            response.status_code,
            data,
        )

    results = response.data
    if not isinstance(results, list) or len(results) == 0:
        raise MissingInferenceData(MISSING_INFERENCE_MESSAGE, response.status_code, results)

    try:
        payload = results[0]["inference_result"]["Inferences"][0]["O"]
    except (KeyError, IndexError, TypeError) as e:
        raise MissingInferenceData(MISSING_INFERENCE_MESSAGE, response.status_code, results) from e

    if not payload:
        raise MissingInferenceData(MISSING_INFERENCE_MESSAGE, response.status_code, results)
    if not isinstance(payload, str):
        raise DecodeError(f"Inference payload is not a string: {type(payload).__name__}")
    return payload


class ImageInferenceService:
    """Pairs uploaded device images with their decoded inference results"""

    def __init__(
        self,
        console_settings: Optional[ConsoleAccessSettings] = None,
        client_factory: Optional[ClientFactory] = None,
        clock: Callable[[], datetime] = utc_now
    ):
        self.console_settings = console_settings or settings.console_access
        self.client_factory = client_factory or ConsoleClient.create_instance
        self.clock = clock

    async def _create_client(self) -> Any:
        try:
            return await self.client_factory(self.console_settings)
        except Exception as e:
            logger.error(f"❌ Cannot create Console client: {e}")
            raise ConfigurationError(WRONG_SETTINGS_MESSAGE) from e

    @time_execution
    async def retrieve(
        self,
        device_id: str,
        output_sub_dir: str,
        number_of_images: int
    ) -> List[OutputRecord]:
        """
        Images uploaded in the 10 hours after ``output_sub_dir`` (capped at now),
        newest first, each with its decoded detections.

        Images are processed one at a time and the first failure aborts the
        whole call; no partial list is returned.

        Raises:
            ConfigurationError: Console client cannot be created
            InvalidDirectoryName: ``output_sub_dir`` is not a timestamp
            RemoteError: a Console call failed (MissingInferenceData if an image
                has no inference payload)
            DecodeError: an inference payload cannot be decoded
        """
        client = await self._create_client()
        window = resolve_window(output_sub_dir, self.clock())

        logger.info(
            f"🚀 Retrieving up to {number_of_images} images - Device: {device_id} "
            f"- Window: {window.start_time}-{window.end_time}"
        )

        images = await client.get_images(
            device_id,
            output_sub_dir,
            number_of_images,
            skip=0,
            order_by=SortOrder.DESC,
            from_datetime=window.start_time,
            to_datetime=window.end_time,
        )

        output_list: List[OutputRecord] = []
        for image in images:
            # Sequential on purpose: one inference lookup in flight per request
            output_list.append(await self._pair_with_inference(client, device_id, image))

        logger.info(f"✅ Retrieved {len(output_list)} images with inferences - Device: {device_id}")
        return output_list

    async def _pair_with_inference(self, client: Any, device_id: str, image: ImageRecord) -> OutputRecord:
        logger.info(f"🖼️ GetImages response: {image.name}")
        timestamp = image.timestamp

        response = await client.get_inference_results(
            device_id,
            filter=None,
            number_of_inference_results=1,
            raw=ResultFormat.RAW,
            time=timestamp,
        )
        detections = decode_inference_payload(extract_inference_payload(response))

        return OutputRecord(
            image=image.data_uri,
            inference_data=serialize_detections(detections),
            timestamp=timestamp,
        )
