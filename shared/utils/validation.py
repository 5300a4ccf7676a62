# shared/utils/validation.py

from typing import Any, Dict, Optional

from core.exceptions import RemoteError

def validate_response(
    response: Any,
    required_keys: list = None,
    status_code: Optional[int] = None
) -> Dict[str, Any]:
    """
    Validate a JSON response body from the Console.

    Args:
        response (Any): Decoded response body.
        required_keys (list, optional): List of keys that must exist in response.
        status_code (int, optional): HTTP status, attached to the raised error.

    Returns:
        Dict[str, Any]: The response, if valid. Raises RemoteError if invalid.
    """
    if not isinstance(response, dict):
        raise RemoteError(f"Response is not a JSON object: {response!r}", status_code, response)

    if required_keys:
        missing_keys = [k for k in required_keys if k not in response]
        if missing_keys:
            raise RemoteError(f"Missing keys in response: {missing_keys}", status_code, response)

    return response
