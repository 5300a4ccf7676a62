# core/exceptions.py
from typing import Any, Optional

class InferenceViewerException(Exception):
    """Base exception for the inference viewer service"""
    pass

class FormatError(InferenceViewerException):
    """Timestamp string is not in yyyyMMddHHmmssfff format"""
    pass

class InvalidDirectoryName(InferenceViewerException):
    """Image directory name cannot be turned into a query window"""
    pass

class ConfigurationError(InferenceViewerException):
    """Console client cannot be constructed from the current settings"""
    pass

class RemoteError(InferenceViewerException):
    """Console API related errors"""
    def __init__(self, message: str, status_code: Optional[int] = None, response_data: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data

    @property
    def remote_message(self) -> Optional[str]:
        """Message supplied by the Console in its error body, if any"""
        if isinstance(self.response_data, dict):
            message = self.response_data.get("message")
            if message:
                return str(message)
        return None

class MissingInferenceData(RemoteError):
    """Inference lookup succeeded but carried no detection payload"""
    pass

class DecodeError(InferenceViewerException):
    """Inference payload is not a well-formed object detection buffer"""
    pass
