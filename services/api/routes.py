"""API routes serving device images paired with their inference results."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.settings import settings
from core.exceptions import RemoteError
from services.retrieval import ImageInferenceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["inferences"])

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_image_inference_service() -> ImageInferenceService:
    """New service per request so no Console client is shared between callers."""
    return ImageInferenceService()


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _parse_number_of_images(value: Optional[str]) -> Optional[int]:
    if value is None or value == "":
        return settings.default_number_of_images
    try:
        number = int(value)
    except ValueError:
        return None
    return number if number > 0 else None


@router.api_route("/getImagesAndInferences", methods=ALL_METHODS)
async def get_images_and_inferences(
    request: Request,
    deviceId: Optional[str] = None,
    imagePath: Optional[str] = None,
    numberOfImages: Optional[str] = None,
    service: ImageInferenceService = Depends(get_image_inference_service),
) -> JSONResponse:
    """
    Get images and inference results from the Console.

    Query parameters:
        deviceId: Edge AI device ID.
        imagePath: Subdirectory where the images are stored (a 17-digit timestamp).
        numberOfImages: The number of images to get, 5 by default.

    Returns:
        200 with a list of {image, inferenceData, timestamp}, newest first.
        400 if deviceId is missing or numberOfImages is invalid, 405 for
        anything but GET, 500 with {message} if retrieval fails.
    """
    if request.method != "GET":
        return _message(405, "The API server only accepts GET requests.")

    if not deviceId:
        return _message(400, "Device ID is not specified.")

    number_of_images = _parse_number_of_images(numberOfImages)
    if number_of_images is None:
        return _message(400, "Number of images must be a positive integer.")

    try:
        records = await service.retrieve(deviceId, imagePath or "", number_of_images)
    except Exception as e:
        message = e.remote_message if isinstance(e, RemoteError) else None
        logger.error(f"❌ getImagesAndInferences failed - Device: {deviceId}: {e}")
        return _message(500, message or str(e))

    return JSONResponse(status_code=200, content=[record.to_dict() for record in records])
